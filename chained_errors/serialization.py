from __future__ import annotations

import json
import logging
from typing import Any

from chained_errors.constants import FAILED_TO_STRINGIFY

logger = logging.getLogger(__name__)


def _object_fields(value: Any) -> dict[str, Any]:
    try:
        return vars(value)
    except TypeError:
        raise TypeError(f"Object of type {type(value).__name__} is not serializable") from None


def stringify_cause(value: Any) -> str:
    """Render a non-error cause as text without ever raising."""
    if value is None or isinstance(value, (bool, int, float)):
        return str(value)
    try:
        return json.dumps(value, separators=(",", ":"), default=_object_fields)
    except (ValueError, TypeError, RecursionError) as exc:
        logger.debug("Unable to stringify cause of type %s: %s", type(value).__name__, exc)
        return FAILED_TO_STRINGIFY
