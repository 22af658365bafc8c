"""Strict 24-hour time parsing and worked-hours arithmetic."""

from __future__ import annotations

import re

from ..common.numbers import round_half_up
from ..core.constants import HOURS_DECIMALS, TIME_24HR_PATTERN
from ..core.exceptions import CalculationOutOfRangeError, InvalidTimeFormatError

_TIME_24HR = re.compile(TIME_24HR_PATTERN)


def is_valid_time_format(value) -> bool:
    return isinstance(value, str) and _TIME_24HR.match(value.strip()) is not None


def parse_time_to_decimal(time_str: str) -> float:
    """Convert ``HH:MM`` to decimal hours, e.g. ``"09:30"`` -> ``9.5``.

    Raises:
        InvalidTimeFormatError: for anything other than a strict 24-hour time.
    """
    if not isinstance(time_str, str) or not time_str.strip():
        raise InvalidTimeFormatError(time_str, "Time must be a non-empty string.")

    trimmed = time_str.strip()
    match = _TIME_24HR.match(trimmed)
    if not match:
        raise InvalidTimeFormatError(trimmed, "Use 24-hour format: HH:MM (e.g. 09:30, 14:45).")

    hours = int(match.group(1))
    minutes = int(match.group(2))
    return hours + minutes / 60.0


def compute_worked_hours(in_time: str, out_time: str) -> float:
    """Hours between check-in and check-out, rounded to 2 decimals.

    An out-time earlier than the in-time is an overnight shift ending the next day.
    """
    in_hours = parse_time_to_decimal(in_time)
    out_hours = parse_time_to_decimal(out_time)

    if out_hours >= in_hours:
        worked = out_hours - in_hours
    else:
        worked = 24 - in_hours + out_hours

    if worked < 0 or worked > 24:
        raise CalculationOutOfRangeError(worked, in_time, out_time)

    return round_half_up(worked, HOURS_DECIMALS)
