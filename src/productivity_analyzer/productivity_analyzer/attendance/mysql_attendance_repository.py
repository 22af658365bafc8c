from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import days_in_month
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, normalize_hhmm
from .model import DailyAttendanceRecord, ReplaceResult
from .repository import AttendanceRepository


def _month_bounds(year: int, month: int) -> tuple[date, date]:
    return date(year, month, 1), date(year, month, days_in_month(year, month))


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def replace_month(self, *, year: int, month: int, records: Sequence[DailyAttendanceRecord]) -> ReplaceResult:
        if not records:
            return ReplaceResult(deleted=0, inserted=0, employees=0)

        start, end = _month_bounds(year, month)
        names = list(dict.fromkeys(r.employee_ref for r in records))
        placeholders = ",".join(["%s"] * len(names))

        # One transaction: employees upsert + delete + insert commit together or not at all.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO employees(name) VALUES(%s)
                ON DUPLICATE KEY UPDATE name=VALUES(name)
                """,
                [(name,) for name in names],
            )

            cur.execute(
                f"SELECT employee_id, name FROM employees WHERE name IN ({placeholders})",
                tuple(names),
            )
            ids = {r["name"]: int(r["employee_id"]) for r in fetchall(cur)}
            id_placeholders = ",".join(["%s"] * len(ids))

            cur.execute(
                f"""
                DELETE FROM attendance_records
                WHERE employee_id IN ({id_placeholders}) AND work_date BETWEEN %s AND %s
                """,
                (*ids.values(), start, end),
            )
            deleted = int(cur.rowcount or 0)

            rows = [
                (
                    ids[r.employee_ref],
                    r.work_date,
                    r.in_time,
                    r.out_time,
                    r.worked_hours,
                    r.status.value,
                )
                for r in records
            ]
            cur.executemany(
                """
                INSERT INTO attendance_records(employee_id, work_date, in_time, out_time, worked_hours, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                rows,
            )

        return ReplaceResult(deleted=deleted, inserted=len(rows), employees=len(names))

    def get_month_records(
        self,
        *,
        year: int,
        month: int,
        employee_ref: Optional[str] = None,
    ) -> Sequence[DailyAttendanceRecord]:
        start, end = _month_bounds(year, month)
        clauses = ["ar.work_date BETWEEN %s AND %s"]
        params: list[object] = [start, end]

        if employee_ref is not None:
            clauses.append("e.name=%s")
            params.append(employee_ref)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT e.name, ar.work_date, ar.in_time, ar.out_time, ar.worked_hours, ar.status
                FROM attendance_records ar
                JOIN employees e ON e.employee_id = ar.employee_id
                WHERE {where}
                ORDER BY e.name ASC, ar.work_date ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)

            return [
                DailyAttendanceRecord(
                    employee_ref=r["name"],
                    work_date=r["work_date"],
                    status=AttendanceStatus(r["status"]),
                    worked_hours=as_float(r.get("worked_hours")),
                    in_time=normalize_hhmm(r.get("in_time")),
                    out_time=normalize_hhmm(r.get("out_time")),
                )
                for r in rows
            ]
