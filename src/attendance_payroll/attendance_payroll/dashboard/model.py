from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DailyStats:
    total: int
    present: int
    on_leave: int
    absent: int


@dataclass(frozen=True)
class ProjectWideStats:
    total_salary_paid: float
    total_work_days: int
    total_overtime_hours: float


@dataclass(frozen=True)
class MonthlyStats:
    total_employees: int
    active_employees: int
    total_pay: float
    total_overtime_hours: float
    total_absences: int


@dataclass(frozen=True)
class TrendPoint:
    label: str
    count: int


@dataclass(frozen=True)
class SalaryShare:
    employee_name: str
    total_pay: float
