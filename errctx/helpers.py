CONTEXT_HOOK = "__error_context__"


class MissingValue:
    """
    The type of ``MISSING``. It stands in for the value of a key that was supplied
    without one, so that a context always holds complete pairs.
    """

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "(MISSING)"

    __str__ = __repr__

    def __reduce__(self):
        return "MISSING"


MISSING = MissingValue()
