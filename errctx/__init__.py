"""
The errctx library attaches key-value context to errors as they travel up through the
layers of a program, without changing the error's message or losing the original
error.

Context is a flat sequence of alternating keys and values. ``with_context`` appends
to it and ``with_prefix`` prepends; both return a new ``ContextualError`` and leave
the error they were given alone.
"""

from .accumulate import set_trace, with_context, with_prefix  # noqa
from .errors import (  # noqa
    ContextualError,
    HasContext,
    get_context,
    has_context,
    unwrap,
)
from .helpers import MISSING, MissingValue  # noqa
from .scope import ErrorContext, err_ctx  # noqa
