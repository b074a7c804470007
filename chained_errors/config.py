from __future__ import annotations

import os

from chained_errors.constants import TRACE_LIMIT_ENV


def trace_frame_limit() -> int | None:
    """Return the maximum number of frames captured into ``trace``, or None for all."""
    raw = str(os.environ.get(TRACE_LIMIT_ENV, "") or "").strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        return None
    return limit if limit > 0 else None
