from __future__ import annotations

CAUSED_BY = "\ncaused by: "
CIRCULAR_MESSAGE_MARKER = ": ..."
CIRCULAR_STACK_MARKER = "\ncauses have become circular..."
FAILED_TO_STRINGIFY = "<failed to stringify value>"
NO_MESSAGE = "<no message>"
CHAIN_SEPARATOR = " -> "
MESSAGE_SEPARATOR = ": "
TRACE_LIMIT_ENV = "CHAINED_ERRORS_TRACE_LIMIT"
