"""Read the attendance workbook into normalized rows.

Layout: first sheet, header row with ``Employee Name``, ``Date``, ``In Time``
and ``Out Time``. Cell values are normalized here; the engine only ever sees
``date`` objects and zero-padded ``HH:MM`` strings.
"""

from __future__ import annotations

import io
import re
from datetime import date, datetime, time, timedelta
from numbers import Real
from pathlib import Path
from typing import Any, BinaryIO, Union

import pandas as pd

from ..core.constants import ALLOWED_UPLOAD_EXTENSIONS, REQUIRED_COLUMNS
from ..core.exceptions import FileValidationError, RowValidationError, SpreadsheetParsingError
from .model import ParsedAttendanceRow

# Excel serial day 0 (accounts for the 1900 leap-year bug).
_EXCEL_EPOCH = datetime(1899, 12, 30)
_MINUTES_PER_DAY = 24 * 60

_AM_PM = re.compile(r"^(\d{1,2}):(\d{2})\s*([AaPp][Mm])$")
_CLOCK = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")
_DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d", "%m/%d/%Y", "%m-%d-%Y")

WorkbookSource = Union[bytes, str, Path, BinaryIO]


def validate_file_extension(filename: str) -> str:
    if not filename or not filename.lower().endswith(ALLOWED_UPLOAD_EXTENSIONS):
        raise FileValidationError(
            f"Invalid file type. Expected Excel file ({', '.join(ALLOWED_UPLOAD_EXTENSIONS)}), got: {filename}",
            filename,
        )
    return filename


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _hhmm(hours: int, minutes: int) -> str:
    return f"{hours:02d}:{minutes:02d}"


def parse_cell_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, Real) and not isinstance(value, bool):
        try:
            return (_EXCEL_EPOCH + timedelta(days=float(value))).date()
        except (OverflowError, ValueError) as e:
            raise RowValidationError(f"Invalid Excel serial date number: {value}") from e

    if isinstance(value, str):
        text = value.strip()
        for fmt in _DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        raise RowValidationError(
            f'Unable to parse date string: "{text}". Expected YYYY-MM-DD, MM/DD/YYYY or an Excel date.'
        )

    raise RowValidationError(f"Invalid date type: {type(value).__name__}. Expected a date, number or string.")


def parse_cell_time(value: Any) -> str:
    """Normalize a time cell to ``HH:MM`` (24-hour, zero-padded)."""
    if isinstance(value, datetime):
        value = value.time()
    if isinstance(value, time):
        return _hhmm(value.hour, value.minute)

    if isinstance(value, timedelta):
        total_minutes = int(value.total_seconds()) // 60
        if not 0 <= total_minutes < _MINUTES_PER_DAY:
            raise RowValidationError(f"Time out of range: {value}")
        return _hhmm(total_minutes // 60, total_minutes % 60)

    if isinstance(value, Real) and not isinstance(value, bool):
        # Fraction of a day, e.g. 0.375 -> 09:00
        total_minutes = int(round(float(value) * _MINUTES_PER_DAY))
        if not 0 <= total_minutes < _MINUTES_PER_DAY:
            raise RowValidationError(f"Time out of range: {value}. Expected a fraction of a day.")
        return _hhmm(total_minutes // 60, total_minutes % 60)

    if isinstance(value, str):
        text = value.strip()

        match = _AM_PM.match(text)
        if match:
            hours, minutes = int(match.group(1)), int(match.group(2))
            period = match.group(3).upper()
            if not 1 <= hours <= 12 or minutes > 59:
                raise RowValidationError(f"Time out of range: {text}.")
            if period == "PM" and hours != 12:
                hours += 12
            elif period == "AM" and hours == 12:
                hours = 0
            return _hhmm(hours, minutes)

        match = _CLOCK.match(text)
        if match:
            hours, minutes = int(match.group(1)), int(match.group(2))
            if hours > 23 or minutes > 59:
                raise RowValidationError(f"Time out of range: {text}. Hours must be 0-23, minutes 0-59.")
            return _hhmm(hours, minutes)

        raise RowValidationError(f'Invalid time format: "{text}". Expected HH:MM or HH:MM AM/PM.')

    raise RowValidationError(f"Invalid time type: {type(value).__name__}. Expected a time, number or string.")


def _load_frame(source: WorkbookSource) -> pd.DataFrame:
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    try:
        return pd.read_excel(source, sheet_name=0, dtype=object)
    except Exception as e:
        raise SpreadsheetParsingError("Failed to parse Excel file") from e


def read_attendance_workbook(source: WorkbookSource) -> list[ParsedAttendanceRow]:
    """Parse the first sheet into rows.

    Rows with neither a name nor a date are skipped. Any other incomplete or
    malformed row fails the whole workbook.

    Raises:
        SpreadsheetParsingError: unreadable workbook, missing columns, no rows.
        RowValidationError: a row that cannot be normalized (with row number).
    """
    frame = _load_frame(source)
    frame.columns = [str(c).strip() for c in frame.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
    if missing:
        raise SpreadsheetParsingError(f"Excel file is missing required columns: {', '.join(missing)}")
    if frame.empty:
        raise SpreadsheetParsingError("Excel file contains no data rows")

    name_col, date_col, in_col, out_col = REQUIRED_COLUMNS
    rows: list[ParsedAttendanceRow] = []

    for offset, record in enumerate(frame.to_dict("records")):
        row_number = offset + 2  # 1-based, after the header row
        name, raw_date, raw_in, raw_out = record[name_col], record[date_col], record[in_col], record[out_col]

        if is_blank(name) and is_blank(raw_date):
            continue
        if any(is_blank(v) for v in (name, raw_date, raw_in, raw_out)):
            raise RowValidationError(
                "Missing required fields (Employee Name, Date, In Time, or Out Time)",
                row_number,
            )

        try:
            rows.append(
                ParsedAttendanceRow(
                    row_number=row_number,
                    employee_name=str(name).strip(),
                    work_date=parse_cell_date(raw_date),
                    in_time=parse_cell_time(raw_in),
                    out_time=parse_cell_time(raw_out),
                )
            )
        except RowValidationError as e:
            raise RowValidationError(str(e), row_number) from e

    if not rows:
        raise SpreadsheetParsingError("No valid attendance records found in Excel file")
    return rows
