from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PayrollReport:
    """Read-model: bảng lương của một nhân viên (chưa làm tròn)."""

    employee_id: str
    employee_name: str
    monthly_salary: float
    daily_rate: float
    effective_days: int
    absent_days: int
    leave_days: int
    sick_days: int
    overtime_hours: float
    total_payable_days: float
    total_pay: float
    advance: float = 0.0
    bonus: float = 0.0
    deduction: float = 0.0


@dataclass(frozen=True)
class PayslipLine:
    title: str
    value: float
    note: str = ""


@dataclass(frozen=True)
class Payslip:
    employee_id: str
    employee_name: str
    earnings: tuple[PayslipLine, ...]
    deductions: tuple[PayslipLine, ...]
    absence_deduction: float = 0.0
    absent_days: int = 0

    @property
    def total_earnings(self) -> float:
        return sum(line.value for line in self.earnings)

    @property
    def total_deductions(self) -> float:
        return sum(line.value for line in self.deductions)

    @property
    def net_pay(self) -> float:
        return self.total_earnings - self.total_deductions
