from __future__ import annotations

from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class ProductivityMetrics:
    actual_hours: float
    expected_hours: float
    productivity_percentage: float


@dataclass(frozen=True)
class EmployeeMetrics:
    employee_ref: str
    worked_hours: float
    expected_hours: float
    leaves_taken: int
    productivity_percentage: float
    low_productivity: bool = False
    high_leaves: bool = False


@dataclass(frozen=True)
class CompanyMetrics:
    total_employees: int = 0
    average_productivity: float = 0.0
    total_leaves_taken: int = 0
    total_worked_hours: float = 0.0
    total_expected_hours: float = 0.0


@dataclass(frozen=True)
class DashboardReport:
    """Read-model for the monthly dashboard."""

    year: int
    month: int
    month_expected_hours: float
    company: CompanyMetrics
    employees: list[EmployeeMetrics] = field(default_factory=list)
    has_data: bool = False

    def to_dict(self) -> dict:
        return asdict(self)
