import pytest

from errctx import scope
from errctx.errors import ContextualError
from errctx.helpers import MISSING

from .common import Boom


def test_error_context_decorates():
    "Test that ErrorContext decorates an escaping exception."

    cause = Boom("message")

    with pytest.raises(ContextualError) as info:
        with scope.ErrorContext("user", "alice"):
            raise cause

    assert info.value.cause is cause
    assert info.value.context == ("user", "alice")
    assert info.value.__cause__ is cause
    assert str(info.value) == "message"


def test_error_context_nesting():
    "Test that outer scopes put their context before inner scopes."

    cause = Boom("message")

    with pytest.raises(ContextualError) as info:
        with scope.ErrorContext("outer", 1):
            with scope.ErrorContext("middle"):
                with scope.ErrorContext("inner", 3):
                    raise cause

    assert info.value.cause is cause
    assert info.value.context == ("outer", 1, "middle", MISSING, "inner", 3)
    assert info.value.__cause__ is cause


def test_error_context_no_exception():
    "Test that ErrorContext does nothing when the block succeeds."

    with scope.ErrorContext("k", "v") as ctx:
        value = 5

    assert value == 5
    assert ctx.keyvals == ("k", "v")


def test_error_context_empty():
    "Test that an empty ErrorContext lets the original exception through."

    cause = Boom()

    with pytest.raises(Boom) as info:
        with scope.ErrorContext():
            raise cause

    assert info.value is cause


def test_error_context_base_exception():
    "Test that ErrorContext doesn't decorate exceptions that aren't Exceptions."

    with pytest.raises(KeyboardInterrupt):
        with scope.ErrorContext("k", "v"):
            raise KeyboardInterrupt()


def test_err_ctx_inline():
    "Test that err_ctx adds inline context."

    def inside():
        raise Boom("message")

    with pytest.raises(ContextualError) as info:
        scope.err_ctx(("op", "inside"), inside)

    assert isinstance(info.value.cause, Boom)
    assert info.value.context == ("op", "inside")


def test_err_ctx_returns():
    "Test that err_ctx returns the value of the callable."

    assert scope.err_ctx(("op", "add"), lambda: 1 + 2) == 3


def test_err_ctx_empty():
    "Test that err_ctx with no context re-raises the original exception."

    def inside():
        raise Boom("message")

    with pytest.raises(Boom):
        scope.err_ctx((), inside)
