from .accumulate import with_prefix
from .errors import unwrap


def _decorate(exc, keyvals):
    decorated = with_prefix(exc, *keyvals)
    cause = unwrap(decorated)
    raise decorated from (cause if isinstance(cause, BaseException) else None)


class ErrorContext:
    """
    Decorate exceptions escaping a block with key-value context.

    >>> with ErrorContext("user", "alice"):
    ...   with ErrorContext("step", "load"):
    ...     raise KeyError("config")
    Traceback (most recent call last):
    errctx.errors.ContextualError: 'config'

    The exception that reaches the caller is a ``ContextualError`` whose cause is
    the ``KeyError`` and whose context is ``("user", "alice", "step", "load")``.

    As the exception walks up the stack, each outer ErrorContext prepends its pairs,
    so the context reads from the outermost scope to the innermost. Only subclasses
    of ``Exception`` are decorated; ``KeyboardInterrupt`` and friends pass through.
    """

    def __init__(self, *keyvals):
        self.keyvals = keyvals

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if self.keyvals and isinstance(exc_value, Exception):
            _decorate(exc_value, self.keyvals)


def err_ctx(keyvals, func):
    """
    Execute a callable, decorating exceptions raised with error context.

    ``err_ctx(keyvals, func)`` has the same effect as:

        with ErrorContext(*keyvals):
            return func()
    """
    try:
        return func()
    except Exception as exc:
        if not keyvals:
            raise
        _decorate(exc, keyvals)
