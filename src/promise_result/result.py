"""Settled outcome of an asynchronous operation.

``PromiseResult`` holds either a success value or a ``PromiseError``, never
both. State is fixed at construction; every query and reaction is total, so
inspecting a result never raises because of the state it is in.

Usage:
    result = await execute(fetch_user)
    result.on_resolved(render).on_rejected(lambda e: log.warning(e.message))

    # Or with pattern matching
    match result:
        case PromiseResult(user, None):
            render(user)
        case PromiseResult(_, error):
            report(error)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from promise_result.errors import PromiseError, UnknownError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Self

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PromiseResult(Generic[T]):
    """Resolved value or rejection error of a settled operation.

    Build instances with ``resolved()`` or ``rejected()``.

    Attributes:
        value: The success value; the rejection default (``None`` unless
            given) when rejected.
        error: The failure when rejected; ``None`` when resolved.
    """

    value: T | None
    error: PromiseError | None = None

    @classmethod
    def resolved(cls, value: T) -> PromiseResult[T]:
        """Return a result holding the success *value*."""
        return cls(value, None)

    @classmethod
    def rejected(
        cls, error: PromiseError | None = None, *, default: T | None = None
    ) -> PromiseResult[T]:
        """Return a result holding *error*.

        Args:
            error: The failure; an ``UnknownError`` is synthesized when None.
            default: What ``value`` reports for this rejected result.
        """
        return cls(default, error if error is not None else UnknownError())

    def is_resolved(self) -> bool:
        return self.error is None

    def is_rejected(self) -> bool:
        return self.error is not None

    def value_or(self, default: T) -> T:
        """Return the value when resolved, *default* otherwise."""
        if self.error is None:
            return self.value  # type: ignore[return-value]
        return default

    def on_resolved(self, callback: Callable[[T], object]) -> Self:
        """Call *callback* with the value when resolved; return self."""
        if self.error is None:
            callback(self.value)  # type: ignore[arg-type]
        return self

    def on_rejected(self, callback: Callable[[PromiseError], object]) -> Self:
        """Call *callback* with the error when rejected; return self."""
        if self.error is not None:
            callback(self.error)
        return self

    def on_success(self, callback: Callable[[T], object]) -> None:
        """Terminal form of ``on_resolved``."""
        self.on_resolved(callback)

    def on_failure(self, callback: Callable[[PromiseError], object]) -> None:
        """Terminal form of ``on_rejected``."""
        self.on_rejected(callback)

    def __repr__(self) -> str:
        if self.error is None:
            return f"PromiseResult.resolved({self.value!r})"
        return f"PromiseResult.rejected({self.error!r})"
