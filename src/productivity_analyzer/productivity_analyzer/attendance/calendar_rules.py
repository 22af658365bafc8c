"""Business calendar: expected work hours per day.

This is the only place the weekday/Saturday/Sunday rule lives.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from ..common.datetime_utils import month_dates, normalize_date
from ..common.numbers import round_half_up
from ..core.constants import (
    EXPECTED_HOURS_SATURDAY,
    EXPECTED_HOURS_SUNDAY,
    EXPECTED_HOURS_WEEKDAY,
    HOURS_DECIMALS,
)

_SATURDAY = 5
_SUNDAY = 6


def _resolve(value: Any) -> date:
    return normalize_date(value)


def is_sunday(value: Any) -> bool:
    return _resolve(value).weekday() == _SUNDAY


def is_saturday(value: Any) -> bool:
    return _resolve(value).weekday() == _SATURDAY


def expected_hours_for_date(value: Any) -> float:
    """Expected hours: Mon-Fri 8.5, Saturday 4.0, Sunday 0.0.

    Raises:
        InvalidDateError: if ``value`` is not a resolvable calendar date.
    """
    weekday = _resolve(value).weekday()
    if weekday == _SUNDAY:
        return EXPECTED_HOURS_SUNDAY
    if weekday == _SATURDAY:
        return EXPECTED_HOURS_SATURDAY
    return EXPECTED_HOURS_WEEKDAY


def expected_hours_for_month(year: int, month: int) -> float:
    total = sum(expected_hours_for_date(d) for d in month_dates(year, month))
    return round_half_up(total, HOURS_DECIMALS)
