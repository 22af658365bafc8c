from __future__ import annotations

import logging
from typing import Sequence

from ..attendance.model import DailyAttendanceRecord, RawAttendanceEntry
from ..attendance.processor import process_month
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_month
from ..core.exceptions import SpreadsheetParsingError
from .excel_reader import WorkbookSource, read_attendance_workbook, validate_file_extension
from .model import ImportSummary, ParsedAttendanceRow

logger = logging.getLogger(__name__)


def detect_target_month(rows: Sequence[ParsedAttendanceRow]) -> tuple[int, int]:
    """The month of the first row decides the month of the whole upload."""
    if not rows:
        raise SpreadsheetParsingError("No valid attendance records found in Excel file")
    first = rows[0].work_date
    return first.year, first.month


def group_rows_by_employee(rows: Sequence[ParsedAttendanceRow]) -> dict[str, list[RawAttendanceEntry]]:
    groups: dict[str, list[RawAttendanceEntry]] = {}
    for row in rows:
        groups.setdefault(row.employee_name, []).append(
            RawAttendanceEntry(
                employee_ref=row.employee_name,
                work_date=row.work_date,
                in_time=row.in_time,
                out_time=row.out_time,
            )
        )
    return groups


def build_month_ledger(
    year: int,
    month: int,
    groups: dict[str, list[RawAttendanceEntry]],
) -> list[DailyAttendanceRecord]:
    """Gap-fill every employee's month. The first failing employee aborts the batch."""
    ledger: list[DailyAttendanceRecord] = []
    for employee_ref, entries in groups.items():
        ledger.extend(process_month(year, month, entries, employee_ref=employee_ref))
    return ledger


class AttendanceImportService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def import_workbook(self, *, filename: str, content: WorkbookSource) -> ImportSummary:
        validate_file_extension(filename)
        rows = read_attendance_workbook(content)
        logger.info("Parsed %d records from %s", len(rows), filename)
        return self.import_rows(rows)

    def import_rows(self, rows: Sequence[ParsedAttendanceRow]) -> ImportSummary:
        """Process and store one month of parsed rows.

        Nothing is written unless every employee's month was processed.
        """
        year, month = detect_target_month(rows)
        logger.info("Processing attendance for %s", format_month(year, month))

        outside = sum(1 for r in rows if (r.work_date.year, r.work_date.month) != (year, month))
        if outside:
            logger.warning("%d rows fall outside %s and are ignored", outside, format_month(year, month))

        groups = group_rows_by_employee(rows)
        logger.info("Found %d unique employees", len(groups))

        ledger = build_month_ledger(year, month, groups)
        result = self._attendance.replace_month(year=year, month=month, records=ledger)
        logger.info(
            "Replaced %s: deleted %d, inserted %d records",
            format_month(year, month), result.deleted, result.inserted,
        )

        return ImportSummary(
            year=year,
            month=month,
            parsed_row_count=len(rows),
            employee_count=len(groups),
            record_count=result.inserted,
            deleted_count=result.deleted,
        )
