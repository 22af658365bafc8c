from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTimeFormatError(ValidationError):
    """Raised when a time string is not strict 24-hour HH:MM."""

    def __init__(self, time_string: Any, details: Optional[str] = None):
        self.time_string = time_string
        self.details = details
        message = f'Invalid time format: "{time_string}". Expected 24-hour format HH:MM (e.g. "09:30" or "14:45").'
        if details:
            message = f"{message} {details}"
        super().__init__(message)


class InvalidDateError(ValidationError):
    """Raised for an unresolvable date, year or month."""

    def __init__(self, message: str, value: Any = None):
        self.value = value
        super().__init__(message)


class InvalidMetricInputError(ValidationError):
    """Raised when productivity inputs are negative or empty."""

    def __init__(self, message: str, value: Any = None):
        self.value = value
        super().__init__(message)


class CalculationOutOfRangeError(DomainError):
    """Raised when derived worked hours fall outside [0, 24]."""

    def __init__(self, worked_hours: float, in_time: str, out_time: str):
        self.worked_hours = worked_hours
        self.in_time = in_time
        self.out_time = out_time
        super().__init__(
            f"Calculated worked hours ({worked_hours}) is outside valid range [0, 24] "
            f"(in_time: {in_time}, out_time: {out_time})."
        )


class FileValidationError(ValidationError):
    """Raised when an uploaded file is not an accepted workbook."""

    def __init__(self, message: str, filename: Optional[str] = None):
        self.filename = filename
        super().__init__(message)


class RowValidationError(ValidationError):
    """Raised when a spreadsheet row cannot be turned into an attendance entry."""

    def __init__(self, message: str, row_number: Optional[int] = None):
        self.row_number = row_number
        if row_number is not None:
            message = f"Row {row_number}: {message}"
        super().__init__(message)


class SpreadsheetParsingError(DomainError):
    """Raised when a workbook cannot be read or holds no usable rows."""
