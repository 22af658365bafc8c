from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .database.connection import DatabaseConnection, DBConfig
from .imports.service import AttendanceImportService
from .productivity.service import ProductivityReportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    attendance_repo: MySQLAttendanceRepository

    import_service: AttendanceImportService
    report_service: ProductivityReportService


def build_container(*, db_config: Mapping) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    attendance_repo = MySQLAttendanceRepository(conn)

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        import_service=AttendanceImportService(attendance_repo),
        report_service=ProductivityReportService(attendance_repo),
    )
