"""Example: run the engine on a workbook without Flask or MySQL.

Usage: python examples/example_usage.py attendance.xlsx
"""

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.productivity_analyzer.productivity_analyzer.imports.excel_reader import read_attendance_workbook
from src.productivity_analyzer.productivity_analyzer.imports.service import (
    build_month_ledger,
    detect_target_month,
    group_rows_by_employee,
)
from src.productivity_analyzer.productivity_analyzer.productivity.aggregator import aggregate


def main(path: str) -> None:
    rows = read_attendance_workbook(Path(path))
    year, month = detect_target_month(rows)
    ledger = build_month_ledger(year, month, group_rows_by_employee(rows))

    by_employee: dict = {}
    for record in ledger:
        by_employee.setdefault(record.employee_ref, []).append(record)

    print(f"{year}-{month:02d}")
    for name, records in by_employee.items():
        m = aggregate(records)
        print(f"  {name}: {m.actual_hours:.2f}/{m.expected_hours:.2f}h -> {m.productivity_percentage}%")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        raise SystemExit(__doc__)
    main(sys.argv[1])
