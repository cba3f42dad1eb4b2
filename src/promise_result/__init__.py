"""promise-result: turn async outcomes into inspectable results.

Public API:
    - execute(): Run an async operation, always returning a PromiseResult
    - execute_many(): Run several operations concurrently, results in order
    - promised: Decorator for async functions returning PromiseResult
    - PromiseResult: Resolved value or rejection error
    - PromiseError: Base failure type
    - Config: Configuration dataclass
"""

from __future__ import annotations

import logging

from promise_result.classify import to_error
from promise_result.config import Config
from promise_result.constants import UNKNOWN_ERROR_MESSAGE
from promise_result.errors import (
    ConfigurationError,
    OperationCancelledError,
    PromiseError,
    Rejection,
    StatusError,
    UnknownError,
)
from promise_result.execute import execute, execute_many, promised
from promise_result.result import PromiseResult

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("promise-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("promise_result").addHandler(logging.NullHandler())

__all__ = [
    "UNKNOWN_ERROR_MESSAGE",
    "Config",
    "ConfigurationError",
    "OperationCancelledError",
    "PromiseError",
    "PromiseResult",
    "Rejection",
    "StatusError",
    "UnknownError",
    "__version__",
    "execute",
    "execute_many",
    "promised",
    "to_error",
]
