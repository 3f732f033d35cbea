from pytollcalculator.exceptions import MixedDayError, PyTollCalculatorError, ValidationError


def test_error_defaults() -> None:
    exc = PyTollCalculatorError("base error")
    assert exc.error_type == "unknown"
    assert exc.error_code is None
    assert exc.detail == "base error"
    assert exc.user_message is None


def test_error_detail_fallback() -> None:
    exc = ValidationError(detail="short detail")
    assert str(exc) == "short detail"
    assert exc.detail == "short detail"
    assert exc.error_code == "validation_error"


def test_error_overrides() -> None:
    exc = ValidationError(
        "bad passage",
        error_code="bad_timestamp",
        detail="timestamp could not be parsed",
        user_message="Check the passage time.",
    )
    assert exc.error_type == "validation"
    assert exc.error_code == "bad_timestamp"
    assert exc.detail == "timestamp could not be parsed"
    assert exc.user_message == "Check the passage time."


def test_mixed_day_error_is_validation_error() -> None:
    exc = MixedDayError("two days")
    assert isinstance(exc, ValidationError)
    assert exc.error_type == "validation"
    assert exc.error_code == "mixed_days"
