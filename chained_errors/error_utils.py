from __future__ import annotations

import inspect
import logging
import traceback
from typing import Any, Callable, Iterator

from chained_errors.constants import (
    CAUSED_BY,
    CHAIN_SEPARATOR,
    CIRCULAR_MESSAGE_MARKER,
    CIRCULAR_STACK_MARKER,
    MESSAGE_SEPARATOR,
    NO_MESSAGE,
)
from chained_errors.models import CauseRepresentation, ChainStep, Deferred, Direct
from chained_errors.protocols import ErrorLike, is_error_like
from chained_errors.serialization import stringify_cause

logger = logging.getLogger(__name__)

_ABSENT: Any = object()


def _read_attr(obj: object, name: str, default: Any) -> Any:
    try:
        return getattr(obj, name, default)
    except Exception:
        return default


def _safe_str(value: object) -> str:
    try:
        return str(value)
    except Exception:
        return ""


def _is_cause_accessor(value: object) -> bool:
    """VError / NError style: ``cause`` is a method returning the cause."""
    if not callable(value) or isinstance(value, type) or is_error_like(value):
        return False
    try:
        inspect.signature(value).bind()
    except (TypeError, ValueError):
        return False
    return True


def cause_representation(err: object) -> CauseRepresentation | None:
    if not is_error_like(err):
        return None
    value = _read_attr(err, "cause", _ABSENT)
    if _read_attr(err, "has_cause", None) is False:
        value = _ABSENT
    if value is not _ABSENT:
        if _is_cause_accessor(value):
            return Deferred(value)
        return Direct(value)
    if isinstance(err, BaseException):
        if err.__cause__ is not None:
            return Direct(err.__cause__)
        if not err.__suppress_context__ and err.__context__ is not None:
            return Direct(err.__context__)
    return None


def _resolve(representation: CauseRepresentation | None) -> tuple[bool, Any]:
    if representation is None:
        return (False, None)
    try:
        return (True, representation.resolve())
    except Exception as exc:
        logger.debug("Cause accessor raised %s: %s", type(exc).__name__, exc)
        return (False, None)


def get_error_cause(err: object) -> Any | None:
    has_value, value = _resolve(cause_representation(err))
    if has_value and is_error_like(value):
        return value
    return None


def walk_cause_chain(err: object) -> Iterator[ChainStep]:
    seen: set[int] = set()
    current: Any | None = err if is_error_like(err) else None
    while current is not None:
        seen.add(id(current))
        representation = cause_representation(current)
        has_value, value = _resolve(representation)
        next_error = value if has_value and is_error_like(value) else None
        circular = next_error is not None and id(next_error) in seen
        yield ChainStep(
            error=current,
            representation=representation,
            has_cause_value=has_value,
            cause_value=value,
            next_error=next_error,
            circular=circular,
        )
        if circular:
            return
        current = next_error


def _reference_matcher(reference: object) -> Callable[[object], bool] | None:
    if reference is ErrorLike:
        return is_error_like
    if isinstance(reference, tuple):
        matchers = [_reference_matcher(item) for item in reference]
        if not matchers or any(matcher is None for matcher in matchers):
            return None
        return lambda node: any(matcher(node) for matcher in matchers)
    if isinstance(reference, type) and issubclass(reference, BaseException):
        return lambda node: isinstance(node, reference)
    return None


def find_cause_by_reference(err: object, reference: Any) -> Any | None:
    matcher = _reference_matcher(reference)
    if matcher is None:
        return None
    for step in walk_cause_chain(err):
        if matcher(step.error):
            return step.error
    return None


def _message_text(err: object) -> str:
    message = _read_attr(err, "message", _ABSENT)
    if message is _ABSENT:
        return _safe_str(err) if isinstance(err, BaseException) else ""
    return "" if message is None else _safe_str(message)


def message_with_causes(err: object) -> str:
    parts: list[str] = []
    skip_message = False
    for step in walk_cause_chain(err):
        if not skip_message:
            parts.append(_message_text(step.error))
        if step.next_error is None:
            break
        # A deferred cause's message is already part of the wrapper's message.
        skip_message = step.deferred
        if not skip_message:
            parts.append(MESSAGE_SEPARATOR)
        if step.circular:
            if not skip_message:
                parts.append(_message_text(step.next_error))
            parts.append(CIRCULAR_MESSAGE_MARKER)
    return "".join(parts)


def _format_exception_trace(exc: BaseException) -> str:
    header = "".join(traceback.format_exception_only(type(exc), exc)).rstrip("\n")
    if exc.__traceback__ is None:
        return header
    frames = "".join(traceback.format_tb(exc.__traceback__)).rstrip("\n")
    return f"{header}\n{frames}"


def _trace_text(err: object) -> str:
    trace = _read_attr(err, "trace", _ABSENT)
    if trace is _ABSENT:
        return _format_exception_trace(err) if isinstance(err, BaseException) else ""
    return "" if trace is None else _safe_str(trace)


def stack_with_causes(err: object) -> str:
    parts: list[str] = []
    for step in walk_cause_chain(err):
        parts.append(_trace_text(step.error))
        if step.next_error is not None:
            parts.append(CAUSED_BY)
            if step.circular:
                parts.append(_trace_text(step.next_error))
                parts.append(CIRCULAR_STACK_MARKER)
        elif step.has_cause_value:
            parts.append(CAUSED_BY)
            parts.append(stringify_cause(step.cause_value))
    return "".join(parts)


def error_chain(err: object) -> list[Any]:
    return [step.error for step in walk_cause_chain(err)]


def root_cause(err: object) -> Any | None:
    chain = error_chain(err)
    return chain[-1] if chain else None


def format_error_chain(err: object) -> str:
    parts: list[str] = []
    for item in error_chain(err):
        message = _message_text(item).strip() or NO_MESSAGE
        parts.append(f"{type(item).__name__}: {message}")
    return CHAIN_SEPARATOR.join(parts)


def root_cause_summary(err: object) -> str:
    root = root_cause(err)
    if root is None:
        return ""
    message = _message_text(root).strip() or NO_MESSAGE
    return f"{type(root).__name__}: {message}"
