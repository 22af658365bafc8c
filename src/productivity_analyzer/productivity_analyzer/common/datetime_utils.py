from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Any, Optional

from ..core.constants import DASHBOARD_MAX_YEAR, DASHBOARD_MIN_YEAR
from ..core.exceptions import InvalidDateError
from .validators import require_month, require_year

_MONTH_PARAM = re.compile(r"^(\d{4})-(\d{2})$")


def parse_iso_date(value: str) -> date:
    """Parse an ISO date or datetime string into its calendar date."""
    return datetime.fromisoformat(value).date()


def normalize_date(value: Any) -> date:
    """Strip time-of-day so the value can be used as a day-level key.

    Accepts ``date``, ``datetime`` (incl. ``pandas.Timestamp``) and ISO strings.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_iso_date(value.strip())
        except ValueError as e:
            raise InvalidDateError(f"Unable to parse date: {value!r}. Expected YYYY-MM-DD or an ISO datetime.", value) from e
    raise InvalidDateError(f"Invalid date value: {value!r}", value)


def days_in_month(year: int, month: int) -> int:
    require_year(year)
    require_month(month)
    return calendar.monthrange(year, month)[1]


def month_dates(year: int, month: int) -> list[date]:
    """Every calendar date of (year, month), day 1 to the last day, in order."""
    return [date(year, month, day) for day in range(1, days_in_month(year, month) + 1)]


def parse_month_param(value: Optional[str], *, today: Optional[date] = None) -> tuple[int, int]:
    """Parse a ``YYYY-MM`` month picker value, falling back to the current month."""
    today = today or now_local().date()
    fallback = (today.year, today.month)
    if not value:
        return fallback

    match = _MONTH_PARAM.match(value.strip())
    if not match:
        return fallback

    year, month = int(match.group(1)), int(match.group(2))
    if year < DASHBOARD_MIN_YEAR or year > DASHBOARD_MAX_YEAR or month < 1 or month > 12:
        return fallback
    return year, month


def format_month(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
