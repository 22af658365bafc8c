from __future__ import annotations

import logging
from datetime import date

import pytest

from src.productivity_analyzer.productivity_analyzer.core.enums import AttendanceStatus
from src.productivity_analyzer.productivity_analyzer.core.exceptions import (
    FileValidationError,
    InvalidTimeFormatError,
    SpreadsheetParsingError,
)
from src.productivity_analyzer.productivity_analyzer.imports.model import ParsedAttendanceRow
from src.productivity_analyzer.productivity_analyzer.imports.service import (
    AttendanceImportService,
    detect_target_month,
    group_rows_by_employee,
)


def _row(n, name, d, in_time="09:00", out_time="17:30"):
    return ParsedAttendanceRow(row_number=n, employee_name=name, work_date=d, in_time=in_time, out_time=out_time)


def test_detect_target_month_uses_first_row():
    rows = [_row(2, "Alice", date(2024, 2, 5)), _row(3, "Alice", date(2024, 1, 31))]
    assert detect_target_month(rows) == (2024, 2)

    with pytest.raises(SpreadsheetParsingError):
        detect_target_month([])


def test_group_rows_by_employee_keeps_order():
    rows = [
        _row(2, "Bob", date(2024, 1, 2)),
        _row(3, "Alice", date(2024, 1, 2)),
        _row(4, "Bob", date(2024, 1, 3)),
    ]

    groups = group_rows_by_employee(rows)

    assert list(groups) == ["Bob", "Alice"]
    assert [e.work_date for e in groups["Bob"]] == [date(2024, 1, 2), date(2024, 1, 3)]


def test_import_rows_fills_each_employee_month(attendance_repo):
    service = AttendanceImportService(attendance_repo)
    rows = [
        _row(2, "Alice", date(2024, 1, 2)),
        _row(3, "Bob", date(2024, 1, 2), "08:00", "16:30"),
        _row(4, "Bob", date(2024, 1, 3)),
    ]

    summary = service.import_rows(rows)

    assert (summary.year, summary.month) == (2024, 1)
    assert summary.parsed_row_count == 3
    assert summary.employee_count == 2
    assert summary.record_count == 62
    assert summary.deleted_count == 0
    assert summary.message == "Successfully processed 62 records for 2 employees"
    assert attendance_repo.replace_calls == 1

    bob = attendance_repo.get_month_records(year=2024, month=1, employee_ref="Bob")
    assert len(bob) == 31
    assert sum(1 for r in bob if r.status == AttendanceStatus.PRESENT) == 2
    assert sum(1 for r in bob if r.status == AttendanceStatus.WEEKEND) == 4


def test_import_rows_with_bad_time_writes_nothing(attendance_repo):
    service = AttendanceImportService(attendance_repo)
    rows = [
        _row(2, "Alice", date(2024, 1, 2)),
        _row(3, "Bob", date(2024, 1, 2), "25:00", "17:30"),
    ]

    with pytest.raises(InvalidTimeFormatError):
        service.import_rows(rows)

    assert attendance_repo.replace_calls == 0
    assert attendance_repo.records == []


def test_reimport_replaces_month(attendance_repo):
    service = AttendanceImportService(attendance_repo)
    service.import_rows([_row(2, "Alice", date(2024, 1, 2))])

    summary = service.import_rows([_row(2, "Alice", date(2024, 1, 3), "10:00", "12:00")])

    assert summary.deleted_count == 31
    records = attendance_repo.get_month_records(year=2024, month=1)
    assert len(records) == 31
    by_day = {r.work_date.day: r for r in records}
    assert by_day[2].status == AttendanceStatus.ABSENT
    assert by_day[3].worked_hours == 2.0


def test_rows_outside_month_are_ignored(attendance_repo, caplog):
    service = AttendanceImportService(attendance_repo)
    rows = [_row(2, "Alice", date(2024, 1, 2)), _row(3, "Alice", date(2024, 2, 1))]

    with caplog.at_level(logging.WARNING):
        summary = service.import_rows(rows)

    assert summary.record_count == 31
    assert attendance_repo.get_month_records(year=2024, month=2) == []
    assert "1 rows fall outside 2024-01" in caplog.text


def test_import_workbook_end_to_end(attendance_repo, make_workbook):
    service = AttendanceImportService(attendance_repo)
    content = make_workbook(
        [
            ["Alice", "2024-02-01", "9:00", "5:30 PM"],
            ["Alice", "2024-02-02", "09:00", "13:00"],
        ]
    )

    summary = service.import_workbook(filename="february.xlsx", content=content)

    assert (summary.year, summary.month, summary.record_count) == (2024, 2, 29)
    by_day = {r.work_date.day: r for r in attendance_repo.get_month_records(year=2024, month=2)}
    assert by_day[1].worked_hours == 8.5
    assert by_day[2].worked_hours == 4.0
    assert by_day[4].status == AttendanceStatus.WEEKEND


def test_import_workbook_rejects_extension(attendance_repo, make_workbook):
    service = AttendanceImportService(attendance_repo)

    with pytest.raises(FileValidationError):
        service.import_workbook(filename="february.csv", content=make_workbook([]))

    assert attendance_repo.replace_calls == 0
