from __future__ import annotations

from datetime import date
from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import RawAttendanceEntry
from ..time_parser import compute_worked_hours
from .base import DayDecision, DayStatusStrategy


class PresentStrategy(DayStatusStrategy):
    """Day with a check-in/check-out: worked hours come from the entry."""

    def decide(self, *, work_date: date, entry: Optional[RawAttendanceEntry]) -> DayDecision:
        return DayDecision(
            status=AttendanceStatus.PRESENT,
            worked_hours=compute_worked_hours(entry.in_time, entry.out_time),
            in_time=entry.in_time,
            out_time=entry.out_time,
        )
