"""Test helpers (small, reusable doubles).

Keep this file tiny: operations and foreign failure shapes shared by the
adapter and classification suites.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ForeignError:
    """Error-like value from another ecosystem: not an exception, has a message."""

    message: Any


class SilentError(Exception):
    """Exception that renders as an empty string."""


@dataclass
class ScriptedOperation:
    """Async operation that settles with a scripted outcome.

    ``outcome`` is returned as the value unless it is an exception, in which
    case it is raised after yielding to the event loop once.
    """

    outcome: Any = None
    calls: int = 0

    async def __call__(self) -> Any:
        self.calls += 1
        await asyncio.sleep(0)
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


@dataclass
class GateOperation:
    """Async operation with an explicit barrier for concurrency tests."""

    value: Any = None
    started: asyncio.Event = field(default_factory=asyncio.Event)
    release: asyncio.Event = field(default_factory=asyncio.Event)
    in_flight: int = 0
    max_in_flight: int = 0

    async def __call__(self) -> Any:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        self.started.set()
        try:
            await self.release.wait()
        finally:
            self.in_flight -= 1
        return self.value
