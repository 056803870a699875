"""
Build decorated errors by merging new key-value pairs with any context an error
already carries.

The two operations differ only in where the new pairs go. Both flatten decoration to
a single level: the result always wraps the original cause, never another
``ContextualError``.
"""

from .errors import ContextualError, get_context
from .helpers import MISSING

import logging

logger = logging.getLogger(__name__)
TRACE = 5


def trace(fmt, *args, _logger=logger, _TRACE=TRACE):
    "Trace a log message. Avoids issues with applications setting `style`."
    if _logger.isEnabledFor(_TRACE):
        _logger.log(_TRACE, fmt.format(*args))


def set_trace(enabled=True):
    logger.setLevel(TRACE if enabled else logging.WARNING)


def _split(err):
    """
    Separate an error into the error to wrap and the context it already holds.

    Our own type is unwrapped to its cause. Any other error with the context hook is
    kept as the cause and its context is copied.
    """
    if isinstance(err, ContextualError):
        return err.cause, err.context
    return err, get_context(err)


def with_context(err, *keyvals):
    """
    Return a new error with ``keyvals`` appended to the context of ``err``.

    If ``err`` already carries context, the new pairs follow it. A trailing key
    without a value is completed with ``MISSING``. With no ``keyvals``, ``err`` is
    returned as is.
    """
    if not keyvals:
        return err

    cause, prior = _split(err)
    context = prior + keyvals
    if len(context) % 2:
        context += (MISSING,)

    trace("with_context({!r}): {} + {} values", cause, len(prior), len(keyvals))
    return ContextualError(cause, context)


def with_prefix(err, *keyvals):
    """
    Return a new error with ``keyvals`` placed before the context of ``err``.

    Only the new pairs are completed with ``MISSING``; the existing context already
    holds whole pairs, so the sentinel lands right after the caller's odd key.
    """
    if not keyvals:
        return err

    cause, prior = _split(err)
    if len(keyvals) % 2:
        keyvals += (MISSING,)

    trace("with_prefix({!r}): {} + {} values", cause, len(keyvals), len(prior))
    return ContextualError(cause, keyvals + prior)
