from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .calendar_rules import is_sunday
from .model import RawAttendanceEntry
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import DayStatusStrategy
from .strategies.present_strategy import PresentStrategy
from .strategies.weekend_strategy import WeekendStrategy


@dataclass(frozen=True)
class DayStatusStrategyFactory:
    """Factory Pattern: choose the strategy that classifies a day.

    Only Sunday is a full day off. A Saturday with no check-in is leave.
    """

    def for_day(self, *, work_date: date, entry: Optional[RawAttendanceEntry]) -> DayStatusStrategy:
        if entry is not None:
            return PresentStrategy()
        if is_sunday(work_date):
            return WeekendStrategy()
        return AbsentStrategy()
