from __future__ import annotations

import io
from datetime import date
from typing import Optional

import pandas as pd
import pytest

from src.productivity_analyzer.productivity_analyzer.attendance.model import (
    DailyAttendanceRecord,
    RawAttendanceEntry,
    ReplaceResult,
)
from src.productivity_analyzer.productivity_analyzer.core.constants import REQUIRED_COLUMNS


class InMemoryAttendanceRepo:
    def __init__(self):
        self.records: list[DailyAttendanceRecord] = []
        self.replace_calls = 0

    def replace_month(self, *, year, month, records):
        self.replace_calls += 1
        refs = {r.employee_ref for r in records}
        before = len(self.records)
        self.records = [
            r
            for r in self.records
            if not (r.employee_ref in refs and (r.work_date.year, r.work_date.month) == (year, month))
        ]
        deleted = before - len(self.records)
        self.records.extend(records)
        return ReplaceResult(deleted=deleted, inserted=len(records), employees=len(refs))

    def get_month_records(self, *, year, month, employee_ref: Optional[str] = None):
        rows = [
            r
            for r in self.records
            if (r.work_date.year, r.work_date.month) == (year, month)
            and (employee_ref is None or r.employee_ref == employee_ref)
        ]
        return sorted(rows, key=lambda r: (r.employee_ref, r.work_date))


@pytest.fixture
def attendance_repo():
    return InMemoryAttendanceRepo()


@pytest.fixture
def make_entry():
    def _make(work_date: date, in_time: str = "09:00", out_time: str = "17:30", employee_ref: str = "Alice"):
        return RawAttendanceEntry(employee_ref=employee_ref, work_date=work_date, in_time=in_time, out_time=out_time)

    return _make


@pytest.fixture
def make_workbook():
    """Build .xlsx bytes from row lists (header = required columns unless given)."""

    def _make(rows, columns=REQUIRED_COLUMNS) -> bytes:
        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            pd.DataFrame(rows, columns=list(columns)).to_excel(writer, index=False)
        return out.getvalue()

    return _make
