"""Failure normalization.

Collapses whatever an operation failed with into a ``PromiseError``:

1. a ``PromiseError`` passes through unchanged;
2. an error-like value (exception, object or mapping carrying a message)
   becomes a ``PromiseError`` with that message;
3. anything else becomes an ``UnknownError``.

``Rejection`` wrappers are unwrapped to their reason first.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from promise_result.constants import UNKNOWN_ERROR_MESSAGE
from promise_result.errors import (
    PromiseError,
    Rejection,
    UnknownError,
    _walk_exception_chain,
)


def unwrap_rejection(reason: object) -> object:
    """Return the innermost reason of a (possibly nested) ``Rejection``."""
    seen: set[int] = set()
    while isinstance(reason, Rejection) and id(reason) not in seen:
        seen.add(id(reason))
        reason = reason.reason
    return reason


def _exception_message(exc: BaseException) -> str | None:
    for e in _walk_exception_chain(exc):
        try:
            text = str(e)
        except Exception:
            continue
        if text:
            return text
    return None


def derive_message(reason: object) -> str | None:
    """Return the message an error-like *reason* carries, or None.

    Exceptions use ``str()``, falling back along their cause/context chain.
    Other objects are error-like when they expose a non-empty string
    ``message`` attribute (or ``"message"`` key, for mappings).
    """
    if isinstance(reason, BaseException):
        return _exception_message(reason)
    text: Any = None
    try:
        if isinstance(reason, Mapping):
            text = reason.get("message")
        else:
            text = getattr(reason, "message", None)
    except Exception:
        text = None
    if isinstance(text, str) and text:
        return text
    return None


def to_error(
    reason: object, *, unknown_message: str = UNKNOWN_ERROR_MESSAGE
) -> PromiseError:
    """Normalize any failure reason into a ``PromiseError``.

    Order matters: a ``PromiseError`` is itself error-like, so it is checked
    before the generic message extraction.
    """
    reason = unwrap_rejection(reason)
    if isinstance(reason, PromiseError):
        return reason

    message = derive_message(reason)
    if message is not None:
        # No positional args: the foreign message is stored verbatim.
        return PromiseError(message)
    return UnknownError(unknown_message)


def is_recognized(reason: object) -> bool:
    """Return True when *reason* carries a type or message worth preserving."""
    reason = unwrap_rejection(reason)
    return isinstance(reason, PromiseError) or derive_message(reason) is not None
