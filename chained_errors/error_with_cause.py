from __future__ import annotations

import inspect
import traceback
from typing import Any, Callable

from chained_errors.config import trace_frame_limit

_MISSING: Any = object()


def _code_of(func: Callable[..., Any] | None) -> Any | None:
    if func is None:
        return None
    func = getattr(func, "__func__", func)
    return getattr(func, "__code__", None)


def _capture_trace(
    error: BaseException,
    message: str | None,
    constructor_opt: Callable[..., Any] | None = None,
) -> str:
    header = type(error).__name__ if not message else f"{type(error).__name__}: {message}"
    code = _code_of(constructor_opt)
    frame = inspect.currentframe()
    marker = None
    try:
        # Skip this helper and every constructor frame bound to the new error.
        frame = frame.f_back if frame is not None else None
        while frame is not None and frame.f_locals.get("self") is error:
            frame = frame.f_back
        if code is not None:
            # Drop the nearest call of constructor_opt and everything it called.
            marker = frame
            while marker is not None and marker.f_code is not code:
                marker = marker.f_back
            if marker is not None:
                frame = marker.f_back
        summary = traceback.StackSummary.extract(
            traceback.walk_stack(frame),
            limit=trace_frame_limit(),
        )
    finally:
        del frame, marker
    summary.reverse()
    frames = "".join(summary.format()).rstrip("\n")
    if not frames:
        return header
    return f"{header}\n{frames}"


class ErrorWithCause(Exception):
    """
    Error that records the value which caused it.

    Args:
        message: Human-readable error message, stored as given.
        cause: Optional underlying error or value. ``cause`` always reads back,
            as None when it was not supplied; ``has_cause`` tells the two apart.
        constructor_opt: Optional factory or helper that builds the error. Its
            nearest call frame and every frame it called are left out of
            ``trace``. Ignored when it is not on the current stack.
    """

    def __init__(
        self,
        message: str | None = None,
        *,
        cause: Any = _MISSING,
        constructor_opt: Callable[..., Any] | None = None,
    ) -> None:
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.message = message
        self._cause = _MISSING
        if cause is not _MISSING:
            self.cause = cause
        self.trace: str | None = _capture_trace(self, message, constructor_opt)

    @property
    def cause(self) -> Any:
        return None if self._cause is _MISSING else self._cause

    @cause.setter
    def cause(self, value: Any) -> None:
        self._cause = value
        # Enables chained traceback: ErrorWithCause <- cause
        self.__cause__ = value if isinstance(value, BaseException) else None

    @cause.deleter
    def cause(self) -> None:
        self._cause = _MISSING
        self.__cause__ = None

    @property
    def has_cause(self) -> bool:
        return self._cause is not _MISSING
