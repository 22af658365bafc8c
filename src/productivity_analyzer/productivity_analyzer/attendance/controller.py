from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_month, parse_month_param
from ..container import Container

LEDGER_FIELDS = [
    "employee_ref",
    "work_date",
    "status",
    "in_time",
    "out_time",
    "worked_hours",
    "expected_hours",
    "productivity_percentage",
]


def register(app: Flask, container: Container) -> None:
    def _write_ledger_csv(*, rows: list[dict], filename: str):
        """Write ledger rows to a CSV attachment (UTF-8 with BOM for Excel)."""

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=LEDGER_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow({k: ("" if v is None else v) for k, v in row.items()})

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance")
    def api_attendance():
        year, month = parse_month_param(request.args.get("month"))
        employee = (request.args.get("employee") or "").strip() or None

        rows = container.report_service.build_ledger(year=year, month=month, employee_ref=employee)
        return jsonify({"month": format_month(year, month), "employee": employee, "records": rows}), 200

    @app.route("/api/attendance/export", methods=["GET"], endpoint="api_attendance_export")
    def api_attendance_export():
        year, month = parse_month_param(request.args.get("month"))
        rows = container.report_service.build_ledger(year=year, month=month)
        return _write_ledger_csv(rows=rows, filename=f"attendance_{format_month(year, month)}.csv")
