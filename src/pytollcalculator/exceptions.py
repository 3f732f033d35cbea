"""Library exceptions."""

from __future__ import annotations


class PyTollCalculatorError(Exception):
    """Base exception for the library."""

    error_type = "unknown"
    default_error_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
    ) -> None:
        text = message if message is not None else detail
        super().__init__(text if text is not None else "")
        self.error_code = error_code if error_code is not None else self.default_error_code
        self.detail = detail if detail is not None else message
        self.user_message = user_message


class ValidationError(PyTollCalculatorError):
    """Raised when inputs fail validation."""

    error_type = "validation"
    default_error_code = "validation_error"


class MixedDayError(ValidationError):
    """Raised when passages for one daily fee span more than one calendar date."""

    default_error_code = "mixed_days"
