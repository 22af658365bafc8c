from __future__ import annotations

from numbers import Real

from ..core.constants import MAX_YEAR, MIN_YEAR
from ..core.exceptions import InvalidDateError, InvalidMetricInputError


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def require_year(year) -> int:
    if not _is_int(year) or year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidDateError(f"Invalid year: {year!r}. Must be an integer between {MIN_YEAR} and {MAX_YEAR}.", year)
    return year


def require_month(month) -> int:
    if not _is_int(month) or month < 1 or month > 12:
        raise InvalidDateError(f"Invalid month: {month!r}. Must be an integer between 1 and 12.", month)
    return month


def require_non_negative(value, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real) or value != value or value < 0:
        raise InvalidMetricInputError(f"Invalid {field_name}: {value!r}. Must be a non-negative number.", value)
    return float(value)
