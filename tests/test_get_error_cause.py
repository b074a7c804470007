from __future__ import annotations

import pytest

from chained_errors.error_utils import get_error_cause
from chained_errors.error_with_cause import ErrorWithCause
from fakes import SubError, VError


@pytest.mark.parametrize("value", [None, True, 42, "error", {"cause": ValueError("x")}])
def test_returns_nothing_for_non_errors(value: object) -> None:
    assert get_error_cause(value) is None


def test_returns_nothing_for_error_without_cause() -> None:
    assert get_error_cause(ValueError("Foo")) is None
    assert get_error_cause(ErrorWithCause("Foo")) is None


def test_returns_cause() -> None:
    cause = SubError("Foo")
    err = ErrorWithCause("Bar", cause=cause)

    assert get_error_cause(err) is cause


def test_does_not_return_non_error_cause() -> None:
    err = ErrorWithCause("Bar", cause="123")

    assert get_error_cause(err) is None


def test_returns_native_exception_cause() -> None:
    cause = SubError("Foo")
    try:
        raise ValueError("Bar") from cause
    except ValueError as err:
        assert get_error_cause(err) is cause


def test_returns_vError_style_cause() -> None:
    cause = SubError("Foo")
    err = VError(cause, "Bar")

    assert get_error_cause(err) is cause


def test_does_not_return_non_error_from_cause_accessor() -> None:
    class Wrapper(Exception):
        def cause(self) -> str:
            return "123"

    assert get_error_cause(Wrapper("Bar")) is None


def test_does_not_raise_when_cause_accessor_raises() -> None:
    class Broken(Exception):
        def cause(self) -> BaseException:
            raise RuntimeError("boom")

    assert get_error_cause(Broken("Bar")) is None


def test_does_not_invoke_accessor_with_required_arguments() -> None:
    calls: list[object] = []

    def needs_argument(value: object) -> BaseException:
        calls.append(value)
        return ValueError("never")

    err = ErrorWithCause("Bar", cause=needs_argument)

    assert get_error_cause(err) is None
    assert calls == []


def test_does_not_instantiate_exception_class_cause() -> None:
    err = ErrorWithCause("Bar", cause=ValueError)

    assert get_error_cause(err) is None


def test_accepts_duck_typed_error_like_values() -> None:
    class Failure:
        def __init__(self, message: str, cause: object = None) -> None:
            self.message = message
            self.cause = cause

    inner = Failure("inner")
    outer = Failure("outer", cause=inner)

    assert get_error_cause(outer) is inner
    assert get_error_cause(inner) is None


def test_does_not_raise_when_cause_property_raises() -> None:
    class Hostile(Exception):
        @property
        def cause(self) -> object:
            raise RuntimeError("no")

    assert get_error_cause(Hostile("Bar")) is None
