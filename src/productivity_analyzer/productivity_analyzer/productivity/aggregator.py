"""Productivity metrics: actual vs. expected hours."""

from __future__ import annotations

from typing import Sequence

from ..attendance.calendar_rules import expected_hours_for_date
from ..attendance.model import DailyAttendanceRecord
from ..common.numbers import round_half_up
from ..common.validators import require_non_negative
from ..core.constants import HOURS_DECIMALS, PERCENT_DECIMALS
from ..core.exceptions import InvalidMetricInputError
from .model import ProductivityMetrics


def calculate_productivity(actual_hours: float, expected_hours: float) -> float:
    """Percentage of expected hours actually worked, 1 decimal, uncapped.

    A period with no expected hours counts as fully met (100.0).
    """
    actual = require_non_negative(actual_hours, "actual_hours")
    expected = require_non_negative(expected_hours, "expected_hours")

    if expected == 0:
        return 100.0
    return round_half_up(actual / expected * 100, PERCENT_DECIMALS)


def aggregate(records: Sequence[DailyAttendanceRecord]) -> ProductivityMetrics:
    """Sum a set of daily records into productivity metrics.

    Expected hours are recomputed from each record's date.
    """
    if not records:
        raise InvalidMetricInputError("Records must be non-empty", records)

    actual = 0.0
    expected = 0.0
    for record in records:
        actual += require_non_negative(record.worked_hours, "worked_hours")
        expected += expected_hours_for_date(record.work_date)

    actual = round_half_up(actual, HOURS_DECIMALS)
    expected = round_half_up(expected, HOURS_DECIMALS)
    return ProductivityMetrics(
        actual_hours=actual,
        expected_hours=expected,
        productivity_percentage=calculate_productivity(actual, expected),
    )
