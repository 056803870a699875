"""
The decorated error type and the helpers that recognize context on arbitrary errors.
"""

from .helpers import CONTEXT_HOOK

from abc import ABCMeta, abstractmethod
import attr


def _check_cause(inst, attribute, value):
    if isinstance(value, ContextualError):
        raise TypeError(
            "ContextualError can't wrap another ContextualError; use with_context"
        )


def _as_context(value):
    if isinstance(value, (str, bytes)):
        raise TypeError("Context must be a sequence of keys and values, not a string")
    return tuple(value)


@attr.s(auto_exc=True, frozen=True)
class ContextualError(Exception):
    """
    Pairs an error with a flat tuple of alternating keys and values.

    Instances are built by ``with_context`` and ``with_prefix``, never edited after
    that. The message is always the message of ``cause``, so decorating an error
    doesn't change what a user sees; the context is only visible to code that asks
    for it.

    >>> err = ContextualError(KeyError("user"), ("request_id", 42))
    >>> str(err)
    "'user'"
    >>> err.context
    ('request_id', 42)
    """

    cause = attr.ib(validator=_check_cause)
    context = attr.ib(default=(), converter=_as_context)

    def __str__(self):
        cause = self.cause
        return "" if cause is None else str(cause)

    def __error_context__(self):
        return self.context


class HasContext(metaclass=ABCMeta):
    """
    Any error that exposes key-value context through an ``__error_context__`` method.

    Like the ABCs in ``collections.abc``, this is checked structurally: a class need
    not inherit from ``HasContext`` or register with it.
    """

    __slots__ = ()

    @abstractmethod
    def __error_context__(self):
        return ()

    @classmethod
    def __subclasshook__(cls, C):
        if cls is HasContext:
            for klass in C.__mro__:
                if CONTEXT_HOOK in klass.__dict__:
                    if callable(klass.__dict__[CONTEXT_HOOK]):
                        return True
                    break
        return NotImplemented


def has_context(err):
    return isinstance(err, HasContext)


def get_context(err):
    """
    Return the context held by ``err`` as a tuple. Errors without context, or whose
    hook returns None, give an empty tuple.
    """
    if isinstance(err, ContextualError):
        return err.context
    if isinstance(err, HasContext):
        context = getattr(err, CONTEXT_HOOK)()
        return () if context is None else tuple(context)
    return ()


def unwrap(err):
    "Return the undecorated error behind ``err``."
    return err.cause if isinstance(err, ContextualError) else err
