from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union


@dataclass(frozen=True)
class Direct:
    value: Any

    def resolve(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Deferred:
    accessor: Callable[[], Any]

    def resolve(self) -> Any:
        return self.accessor()


CauseRepresentation = Union[Direct, Deferred]


@dataclass(frozen=True)
class ChainStep:
    """One node of a cause chain as seen by the walker.

    ``cause_value`` is the resolved cause, error-like or not, and is only
    meaningful when ``has_cause_value`` is set. ``next_error`` is the
    error-like cause the walk advances to; ``circular`` means it was
    already visited and the walk stops here.
    """

    error: Any
    representation: CauseRepresentation | None
    has_cause_value: bool
    cause_value: Any
    next_error: Any | None
    circular: bool = False

    @property
    def deferred(self) -> bool:
        return isinstance(self.representation, Deferred)
