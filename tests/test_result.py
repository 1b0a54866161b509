from __future__ import annotations

import pytest

from promptsdk.core.errors import ErrorInfo, OutcomeError
from promptsdk.result import Err, Ok, err, ok


def _describe(outcome) -> str:
    match outcome:
        case Ok(value):
            return f"ok:{value}"
        case Err(error):
            return f"err:{error.message}"
    raise AssertionError("unreachable")


def test_ok_holds_only_a_value() -> None:
    outcome = ok({"a": 1})

    assert outcome.value == {"a": 1}
    assert outcome.error is None
    assert outcome.is_ok is True


def test_err_holds_only_an_error() -> None:
    outcome = err(ErrorInfo(message="boom"))

    assert outcome.value is None
    assert outcome.error == ErrorInfo(message="boom")
    assert outcome.is_ok is False


def test_constructors_do_not_inspect_their_argument() -> None:
    assert ok(None).value is None
    assert ok(None).is_ok is True
    assert err("not an ErrorInfo").error == "not an ErrorInfo"


def test_outcomes_support_pattern_matching() -> None:
    assert _describe(ok(3)) == "ok:3"
    assert _describe(err(ErrorInfo(message="nope"))) == "err:nope"


def test_unwrap() -> None:
    assert ok("v").unwrap() == "v"

    with pytest.raises(OutcomeError) as exc_info:
        err(ErrorInfo(message="bad")).unwrap()

    assert exc_info.value.error.message == "bad"


def test_unwrap_of_plain_error_value_raises_outcome_error() -> None:
    with pytest.raises(OutcomeError) as exc_info:
        err("boom").unwrap()

    assert exc_info.value.error == "boom"
    assert str(exc_info.value) == "boom"


def test_unwrap_or() -> None:
    assert ok(1).unwrap_or(2) == 1
    assert err(ErrorInfo(message="x")).unwrap_or(2) == 2


def test_outcomes_are_immutable() -> None:
    outcome = ok(1)

    with pytest.raises(AttributeError):
        outcome.value = 2  # type: ignore[misc]
