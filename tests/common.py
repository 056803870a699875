class ForeignError(Exception):
    """
    An error from some other library that keeps its own context and exposes it through
    the context hook, without inheriting from anything in errctx.
    """

    def __init__(self, message, *keyvals):
        super().__init__(message)
        self._keyvals = list(keyvals)

    def __error_context__(self):
        return self._keyvals


class NotAHook(Exception):
    "Has the hook name, but it isn't callable."

    __error_context__ = None


class Boom(Exception):
    pass


class NoContextYet(Exception):
    "A foreign error whose hook reports no context with None."

    def __error_context__(self):
        return None
