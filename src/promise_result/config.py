"""Configuration: frozen Config resolved from the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from promise_result.constants import (
    ENV_LOG_FOREIGN,
    ENV_UNKNOWN_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
)
from promise_result.errors import ConfigurationError

load_dotenv()


@dataclass(frozen=True)
class Config:
    """Immutable configuration for the execution adapter.

    Fields left as *None* are auto-resolved from environment variables.

    Example:
        config = Config(log_foreign_failures=True)
        result = await execute(fetch, config=config)
    """

    #: Auto-resolved from ``PROMISE_RESULT_UNKNOWN_MESSAGE`` when *None*.
    unknown_error_message: str | None = None
    #: Auto-resolved from ``PROMISE_RESULT_LOG_FOREIGN`` (``"1"`` enables).
    log_foreign_failures: bool | None = None
    max_concurrency: int = 8

    def __post_init__(self) -> None:
        """Auto-resolve environment defaults and validate configuration."""
        if self.unknown_error_message is None:
            resolved = os.environ.get(ENV_UNKNOWN_MESSAGE) or UNKNOWN_ERROR_MESSAGE
            object.__setattr__(self, "unknown_error_message", resolved)

        if self.log_foreign_failures is None:
            enabled = os.environ.get(ENV_LOG_FOREIGN) == "1"
            object.__setattr__(self, "log_foreign_failures", enabled)

        if not str(self.unknown_error_message).strip():
            raise ConfigurationError(
                "unknown_error_message must be a non-empty string",
                hint=f"Unset {ENV_UNKNOWN_MESSAGE} to use the default message.",
            )
        if self.max_concurrency < 1:
            raise ConfigurationError(
                f"max_concurrency must be ≥ 1, got {self.max_concurrency}",
                hint="This controls how many operations execute_many() runs at once.",
            )
