"""Project-wide constants for promise-result."""

# Canonical message for failures that carry nothing recognizable.
UNKNOWN_ERROR_MESSAGE = "an unknown error occurred"

# Message for operations that settled as cancelled without the caller cancelling.
CANCELLED_MESSAGE = "operation cancelled"

# ==============================================================================
# Environment variables
# ==============================================================================

ENV_UNKNOWN_MESSAGE = "PROMISE_RESULT_UNKNOWN_MESSAGE"
ENV_LOG_FOREIGN = "PROMISE_RESULT_LOG_FOREIGN"

# Upper bound on how much of a discarded foreign value's repr is logged.
FOREIGN_REPR_LIMIT = 200
