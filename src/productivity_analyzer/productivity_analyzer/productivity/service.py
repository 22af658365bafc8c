from __future__ import annotations

from typing import Optional

from ..attendance.calendar_rules import expected_hours_for_date, expected_hours_for_month
from ..attendance.model import DailyAttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.numbers import round_half_up
from ..common.validators import require_month, require_year
from ..core.constants import HIGH_LEAVES_THRESHOLD, HOURS_DECIMALS, LOW_PRODUCTIVITY_THRESHOLD, PERCENT_DECIMALS
from ..core.enums import AttendanceStatus
from .aggregator import aggregate, calculate_productivity
from .model import CompanyMetrics, DashboardReport, EmployeeMetrics


class ProductivityReportService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def build_monthly_dashboard(self, *, year: int, month: int) -> DashboardReport:
        month_expected = expected_hours_for_month(year, month)
        records = self._attendance.get_month_records(year=year, month=month)
        if not records:
            return DashboardReport(
                year=year,
                month=month,
                month_expected_hours=month_expected,
                company=CompanyMetrics(),
                has_data=False,
            )

        by_employee: dict[str, list[DailyAttendanceRecord]] = {}
        for r in records:
            by_employee.setdefault(r.employee_ref, []).append(r)

        employees: list[EmployeeMetrics] = []
        for employee_ref in sorted(by_employee):
            rows = by_employee[employee_ref]
            metrics = aggregate(rows)
            leaves = sum(1 for r in rows if r.status == AttendanceStatus.ABSENT)
            employees.append(
                EmployeeMetrics(
                    employee_ref=employee_ref,
                    worked_hours=metrics.actual_hours,
                    expected_hours=metrics.expected_hours,
                    leaves_taken=leaves,
                    productivity_percentage=metrics.productivity_percentage,
                    low_productivity=metrics.productivity_percentage < LOW_PRODUCTIVITY_THRESHOLD,
                    high_leaves=leaves > HIGH_LEAVES_THRESHOLD,
                )
            )

        average = sum(e.productivity_percentage for e in employees) / len(employees)
        company = CompanyMetrics(
            total_employees=len(employees),
            average_productivity=round_half_up(average, PERCENT_DECIMALS),
            total_leaves_taken=sum(e.leaves_taken for e in employees),
            total_worked_hours=round_half_up(sum(e.worked_hours for e in employees), HOURS_DECIMALS),
            total_expected_hours=round_half_up(sum(e.expected_hours for e in employees), HOURS_DECIMALS),
        )

        return DashboardReport(
            year=year,
            month=month,
            month_expected_hours=month_expected,
            company=company,
            employees=employees,
            has_data=True,
        )

    def build_ledger(self, *, year: int, month: int, employee_ref: Optional[str] = None) -> list[dict]:
        """Day-by-day rows for display/export, with expected hours recomputed."""
        require_year(year)
        require_month(month)
        rows: list[dict] = []
        for r in self._attendance.get_month_records(year=year, month=month, employee_ref=employee_ref):
            expected = expected_hours_for_date(r.work_date)
            row = r.to_dict()
            row["expected_hours"] = expected
            row["productivity_percentage"] = calculate_productivity(r.worked_hours, expected)
            rows.append(row)
        return rows
