from __future__ import annotations

from datetime import date
from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import RawAttendanceEntry
from .base import DayDecision, DayStatusStrategy


class WeekendStrategy(DayStatusStrategy):
    """Sunday without a record."""

    def decide(self, *, work_date: date, entry: Optional[RawAttendanceEntry]) -> DayDecision:
        return DayDecision(status=AttendanceStatus.WEEKEND)
