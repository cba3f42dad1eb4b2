"""Exception hierarchy for promise-result."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from promise_result.constants import CANCELLED_MESSAGE, UNKNOWN_ERROR_MESSAGE

if TYPE_CHECKING:
    from collections.abc import Iterator


class PromiseError(Exception):
    """Base failure for all promise-result errors.

    Operation authors raise it (or a subclass) to signal a domain failure;
    the execution adapter synthesizes it for foreign failures.

    The message is stored verbatim unless positional ``args`` are given, in
    which case it is interpolated with ``%``-style formatting::

        PromiseError("disk full")
        PromiseError("%d items failed", 3)

    A template/argument mismatch raises ``TypeError`` or ``ValueError`` from
    the constructor.
    """

    def __init__(self, message: str, *args: Any, hint: str | None = None) -> None:
        text = message % args if args else message
        if not text:
            text = UNKNOWN_ERROR_MESSAGE
        super().__init__(text)
        self._message = text
        self.hint = hint

    @property
    def message(self) -> str:
        """Human-readable description of the failure."""
        return self._message

    def __str__(self) -> str:
        return self.message


class UnknownError(PromiseError):
    """Failure with no recognizable message."""

    def __init__(
        self, message: str = UNKNOWN_ERROR_MESSAGE, *, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)


class OperationCancelledError(PromiseError):
    """The operation settled as cancelled while its caller was not."""

    def __init__(
        self, message: str = CANCELLED_MESSAGE, *, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)


class StatusError(PromiseError):
    """Failure carrying a numeric status code (HTTP-like)."""

    def __init__(
        self,
        message: str,
        *args: Any,
        status_code: int,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, *args, hint=hint)
        self.status_code = status_code

    @property
    def message(self) -> str:
        return f"{self._message} (status={self.status_code})"


class ConfigurationError(PromiseError):
    """Configuration validation or resolution failed."""


class Rejection(Exception):  # noqa: N818
    """Rejection with a non-exception reason.

    Host bridges (foreign promise implementations, callback adapters) raise
    this when an operation is rejected with a value that is not an
    exception, e.g. ``Rejection(12345)``.
    """

    def __init__(self, reason: object) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        # The reason is opaque; it never doubles as a message.
        return ""


def _walk_exception_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* and its ``__cause__``/``__context__`` chain, with cycle protection."""
    seen: set[int] = set()
    stack: list[BaseException] = [exc]
    while stack:
        cur = stack.pop()
        if id(cur) in seen:
            continue
        seen.add(id(cur))
        yield cur

        cause = cur.__cause__
        if isinstance(cause, BaseException):
            stack.append(cause)
        context = cur.__context__
        if isinstance(context, BaseException):
            stack.append(context)

