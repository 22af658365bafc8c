from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import RawAttendanceEntry


@dataclass(frozen=True)
class DayDecision:
    status: AttendanceStatus
    worked_hours: float = 0.0
    in_time: Optional[str] = None
    out_time: Optional[str] = None


class DayStatusStrategy(ABC):
    """Strategy Pattern: encapsulate how one calendar day is classified."""

    @abstractmethod
    def decide(self, *, work_date: date, entry: Optional[RawAttendanceEntry]) -> DayDecision:
        raise NotImplementedError
