"""Execution adapter: run an async operation, always settle into a result.

The boundary converts failure into data. Whatever the operation raises
(domain ``PromiseError``, native exceptions, foreign rejections) comes back
as ``PromiseResult.rejected(...)``; nothing an operation fails with escapes
``execute``.

Cancelling the caller, and interpreter exits, still propagate. An operation
that settles as cancelled while its caller is not being cancelled (an awaited
future cancelled by someone else) is an operation failure like any other.
"""

from __future__ import annotations

import asyncio
import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar, overload

from promise_result.classify import is_recognized, to_error, unwrap_rejection
from promise_result.config import Config
from promise_result.constants import FOREIGN_REPR_LIMIT, UNKNOWN_ERROR_MESSAGE
from promise_result.errors import OperationCancelledError
from promise_result.result import PromiseResult

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

T = TypeVar("T")
P = ParamSpec("P")

logger = logging.getLogger(__name__)


def _preview(reason: object) -> str:
    try:
        text = repr(reason)
    except Exception as exc:
        return f"<unrepresentable {type(reason).__name__}: {type(exc).__name__}>"
    if len(text) > FOREIGN_REPR_LIMIT:
        return text[:FOREIGN_REPR_LIMIT] + "..."
    return text


def _reject(exc: Exception, cfg: Config) -> PromiseResult[Any]:
    error = to_error(
        exc, unknown_message=cfg.unknown_error_message or UNKNOWN_ERROR_MESSAGE
    )
    if cfg.log_foreign_failures and not is_recognized(exc):
        reason = unwrap_rejection(exc)
        logger.debug(
            "Discarding unrecognized failure %s: %s",
            type(reason).__name__,
            _preview(reason),
        )
    logger.debug("Operation rejected: %s: %s", type(error).__name__, error.message)
    return PromiseResult.rejected(error)


async def execute(
    start: Callable[[], Awaitable[T] | T],
    *,
    config: Config | None = None,
) -> PromiseResult[T]:
    """Run *start* and return its settled outcome.

    Args:
        start: Zero-argument callable that starts the operation and returns an
            awaitable (coroutine, future, task). A non-awaitable return value
            counts as an operation that already settled with that value.
        config: Adapter configuration; resolved from the environment when
            omitted.

    Returns:
        ``PromiseResult.resolved(value)`` on success, otherwise
        ``PromiseResult.rejected(error)`` with the normalized failure.

    Example:
        result = await execute(lambda: client.fetch("users/42"))
        if result.is_resolved():
            print(result.value)
    """
    cfg = config if config is not None else Config()
    try:
        pending = start()
        value = await pending if inspect.isawaitable(pending) else pending
    except asyncio.CancelledError:
        task = asyncio.current_task()
        if task is not None and task.cancelling():
            raise
        logger.debug("Operation settled as cancelled")
        return PromiseResult.rejected(OperationCancelledError())
    except Exception as exc:
        return _reject(exc, cfg)
    logger.debug("Operation resolved")
    return PromiseResult.resolved(value)


@overload
def promised(
    fn: Callable[P, Awaitable[T]], /
) -> Callable[P, Awaitable[PromiseResult[T]]]: ...


@overload
def promised(
    *, config: Config | None = None
) -> Callable[
    [Callable[P, Awaitable[T]]], Callable[P, Awaitable[PromiseResult[T]]]
]: ...


def promised(fn: Any = None, /, *, config: Config | None = None) -> Any:
    """Decorate an async function so it returns a ``PromiseResult``.

    Usable bare (``@promised``) or with options (``@promised(config=cfg)``).
    """

    def decorate(
        func: Callable[P, Awaitable[T]],
    ) -> Callable[P, Awaitable[PromiseResult[T]]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> PromiseResult[T]:
            return await execute(lambda: func(*args, **kwargs), config=config)

        return wrapper

    if fn is None:
        return decorate
    return decorate(fn)


async def execute_many(
    starts: Iterable[Callable[[], Awaitable[T] | T]],
    *,
    config: Config | None = None,
) -> list[PromiseResult[T]]:
    """Run several operations concurrently; one result per operation, in order.

    At most ``config.max_concurrency`` operations are in flight at once.
    Like ``execute``, this never raises for operation failures.
    """
    cfg = config if config is not None else Config()
    ops = list(starts)
    sem = asyncio.Semaphore(cfg.max_concurrency)
    logger.debug(
        "Executing %d operation(s) concurrency=%d", len(ops), cfg.max_concurrency
    )

    async def _bounded(start: Callable[[], Awaitable[T] | T]) -> PromiseResult[T]:
        async with sem:
            return await execute(start, config=cfg)

    async with asyncio.TaskGroup() as tg:
        tasks = [tg.create_task(_bounded(op)) for op in ops]
    return [t.result() for t in tasks]
