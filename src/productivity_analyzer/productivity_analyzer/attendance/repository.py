from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import DailyAttendanceRecord, ReplaceResult


class AttendanceRepository(Protocol):
    """Storage interface for processed attendance.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def replace_month(self, *, year: int, month: int, records: Sequence[DailyAttendanceRecord]) -> ReplaceResult:
        """Atomically swap the month's records of every employee in ``records``."""

        raise NotImplementedError

    def get_month_records(
        self,
        *,
        year: int,
        month: int,
        employee_ref: Optional[str] = None,
    ) -> Sequence[DailyAttendanceRecord]:
        """Records of the month ordered by employee, then date."""

        raise NotImplementedError
