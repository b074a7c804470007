from chained_errors.error_utils import (
    error_chain,
    find_cause_by_reference,
    format_error_chain,
    get_error_cause,
    message_with_causes,
    root_cause,
    root_cause_summary,
    stack_with_causes,
    walk_cause_chain,
)
from chained_errors.error_with_cause import ErrorWithCause
from chained_errors.protocols import ErrorLike, is_error_like

__all__ = [
    "ErrorLike",
    "ErrorWithCause",
    "error_chain",
    "find_cause_by_reference",
    "format_error_chain",
    "get_error_cause",
    "is_error_like",
    "message_with_causes",
    "root_cause",
    "root_cause_summary",
    "stack_with_causes",
    "walk_cause_chain",
]
