from __future__ import annotations

from datetime import date, datetime, time, timedelta

import pytest

from src.productivity_analyzer.productivity_analyzer.core.exceptions import (
    FileValidationError,
    RowValidationError,
    SpreadsheetParsingError,
)
from src.productivity_analyzer.productivity_analyzer.imports.excel_reader import (
    parse_cell_date,
    parse_cell_time,
    read_attendance_workbook,
    validate_file_extension,
)


def test_validate_file_extension():
    assert validate_file_extension("January.XLSX") == "January.XLSX"

    with pytest.raises(FileValidationError):
        validate_file_extension("january.csv")
    with pytest.raises(FileValidationError):
        validate_file_extension("")


@pytest.mark.parametrize(
    "value, expected",
    [
        (datetime(2024, 1, 2, 8, 0), date(2024, 1, 2)),
        (date(2024, 1, 2), date(2024, 1, 2)),
        (45293, date(2024, 1, 2)),
        (45293.75, date(2024, 1, 2)),
        ("2024-01-02", date(2024, 1, 2)),
        ("2024/01/02", date(2024, 1, 2)),
        ("01/02/2024", date(2024, 1, 2)),
        ("01-02-2024", date(2024, 1, 2)),
    ],
)
def test_parse_cell_date(value, expected):
    assert parse_cell_date(value) == expected


@pytest.mark.parametrize("value", ["tomorrow", "2024-02-30", True, [2024, 1, 2]])
def test_parse_cell_date_rejects(value):
    with pytest.raises(RowValidationError):
        parse_cell_date(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("09:00", "09:00"),
        ("9:05", "09:05"),
        ("09:05:30", "09:05"),
        ("5:30 PM", "17:30"),
        ("12:00 AM", "00:00"),
        ("12:15 pm", "12:15"),
        (0.375, "09:00"),
        (time(8, 5), "08:05"),
        (datetime(2024, 1, 1, 18, 45), "18:45"),
        (timedelta(hours=7, minutes=30), "07:30"),
    ],
)
def test_parse_cell_time(value, expected):
    assert parse_cell_time(value) == expected


@pytest.mark.parametrize("value", ["25:00", "10:61", "13:00 PM", "abc", 1.5, -0.1, None])
def test_parse_cell_time_rejects(value):
    with pytest.raises(RowValidationError):
        parse_cell_time(value)


def test_read_workbook_normalizes_rows(make_workbook):
    content = make_workbook(
        [
            ["Alice", "2024-01-02", "9:00", "17:30"],
            ["Bob", "2024-01-03", "08:00 AM", "4:30 PM"],
        ]
    )

    rows = read_attendance_workbook(content)

    assert [(r.row_number, r.employee_name, r.work_date, r.in_time, r.out_time) for r in rows] == [
        (2, "Alice", date(2024, 1, 2), "09:00", "17:30"),
        (3, "Bob", date(2024, 1, 3), "08:00", "16:30"),
    ]


def test_read_workbook_native_date_and_time_cells(make_workbook):
    content = make_workbook([["Alice", datetime(2024, 1, 2), time(9, 0), time(17, 30)]])

    rows = read_attendance_workbook(content)

    assert rows[0].work_date == date(2024, 1, 2)
    assert (rows[0].in_time, rows[0].out_time) == ("09:00", "17:30")


def test_read_workbook_skips_rows_without_name_and_date(make_workbook):
    content = make_workbook(
        [
            ["Alice", "2024-01-02", "09:00", "17:30"],
            [None, None, "09:00", None],
        ]
    )

    rows = read_attendance_workbook(content)

    assert len(rows) == 1


def test_read_workbook_reports_row_with_missing_field(make_workbook):
    content = make_workbook(
        [
            ["Alice", "2024-01-02", "09:00", "17:30"],
            ["Bob", "2024-01-03", None, "17:30"],
        ]
    )

    with pytest.raises(RowValidationError) as exc:
        read_attendance_workbook(content)

    assert exc.value.row_number == 3
    assert str(exc.value).startswith("Row 3:")


def test_read_workbook_reports_row_with_bad_time(make_workbook):
    content = make_workbook([["Alice", "2024-01-02", "25:00", "17:30"]])

    with pytest.raises(RowValidationError) as exc:
        read_attendance_workbook(content)

    assert exc.value.row_number == 2
    assert "25:00" in str(exc.value)


def test_read_workbook_requires_columns(make_workbook):
    content = make_workbook([["Alice", "2024-01-02"]], columns=["Employee Name", "Date"])

    with pytest.raises(SpreadsheetParsingError) as exc:
        read_attendance_workbook(content)

    assert "In Time" in str(exc.value)


def test_read_workbook_without_rows(make_workbook):
    with pytest.raises(SpreadsheetParsingError):
        read_attendance_workbook(make_workbook([]))


def test_read_workbook_with_only_blank_rows(make_workbook):
    with pytest.raises(SpreadsheetParsingError):
        read_attendance_workbook(make_workbook([[None, None, "09:00", "17:00"]]))


def test_read_workbook_rejects_non_excel_bytes():
    with pytest.raises(SpreadsheetParsingError):
        read_attendance_workbook(b"definitely not a workbook")
