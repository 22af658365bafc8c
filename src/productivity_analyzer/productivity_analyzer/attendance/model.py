from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class RawAttendanceEntry:
    """One observed check-in/check-out, as parsed from the import source.

    ``work_date`` may still carry a time-of-day; the processor strips it.
    """

    employee_ref: str
    work_date: Union[date, datetime]
    in_time: str
    out_time: str


@dataclass(frozen=True)
class DailyAttendanceRecord:
    """Domain entity: one employee-day of a processed month."""

    employee_ref: str
    work_date: date
    status: AttendanceStatus
    worked_hours: float = 0.0
    in_time: Optional[str] = None
    out_time: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "employee_ref": self.employee_ref,
            "work_date": self.work_date.strftime("%Y-%m-%d"),
            "in_time": self.in_time,
            "out_time": self.out_time,
            "worked_hours": self.worked_hours,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class ReplaceResult:
    """Outcome of replacing one month of records in storage."""

    deleted: int
    inserted: int
    employees: int
