from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ParsedAttendanceRow:
    """One spreadsheet row after cell normalization."""

    row_number: int
    employee_name: str
    work_date: date
    in_time: str
    out_time: str


@dataclass(frozen=True)
class ImportSummary:
    year: int
    month: int
    parsed_row_count: int
    employee_count: int
    record_count: int
    deleted_count: int = 0

    @property
    def message(self) -> str:
        return f"Successfully processed {self.record_count} records for {self.employee_count} employees"
