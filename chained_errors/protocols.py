from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ErrorLike(Protocol):
    message: Any


def is_error_like(value: object) -> bool:
    if isinstance(value, BaseException):
        return True
    if value is None or isinstance(value, type):
        return False
    try:
        return isinstance(value, ErrorLike)
    except Exception:
        # Before 3.12 the protocol check calls getattr(), so a raising property lands here.
        return False
