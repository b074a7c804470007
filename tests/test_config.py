from __future__ import annotations

import pytest

from chained_errors.config import trace_frame_limit


def test_trace_frame_limit_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHAINED_ERRORS_TRACE_LIMIT", raising=False)

    assert trace_frame_limit() is None


@pytest.mark.parametrize("raw", ["", "   ", "abc", "0", "-3"])
def test_trace_frame_limit_ignores_invalid_values(
    monkeypatch: pytest.MonkeyPatch,
    raw: str,
) -> None:
    monkeypatch.setenv("CHAINED_ERRORS_TRACE_LIMIT", raw)

    assert trace_frame_limit() is None


def test_trace_frame_limit_reads_positive_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHAINED_ERRORS_TRACE_LIMIT", " 12 ")

    assert trace_frame_limit() == 12
