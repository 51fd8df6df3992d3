from __future__ import annotations

from typing import Optional, Sequence

from ..attendance.aggregator import DayTally, tally_month
from ..attendance.model import AttendanceLedger
from ..core.constants import OVERTIME_HOURS_PER_DAY
from ..core.enums import SalaryMode
from ..employees.model import Employee
from ..financials.model import FinancialData, lookup_financials
from ..jalali.model import YearMonth, iter_months
from ..settings.model import ProjectSettings
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollReport, Payslip, PayslipLine


def compute_report(
    employees: Sequence[Employee],
    ledger: AttendanceLedger,
    settings: ProjectSettings,
    financials: FinancialData,
    start: YearMonth,
    end: Optional[YearMonth] = None,
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> dict[str, PayrollReport]:
    """Payroll per employee over the months ``start..end``.

    Each month folds in its own advance/bonus/deduction; values stay unrounded.
    """
    calculator = calculator or StandardPayrollCalculator()
    rules = settings.day_rules
    months = list(iter_months(start, end))
    result: dict[str, PayrollReport] = {}

    for employee in employees:
        cells = ledger.get(employee.employee_id) or {}
        tally = DayTally()
        advance = bonus = deduction = 0.0

        for year_month in months:
            month_fin = lookup_financials(financials, employee.employee_id, year_month.year, year_month.month)
            advance += month_fin.advance or 0
            bonus += month_fin.bonus or 0
            deduction += month_fin.deduction or 0
            tally.add(tally_month(cells, year_month, rules))

        daily_rate = calculator.daily_rate(employee.monthly_salary, settings.base_day_count)
        payable_days = calculator.payable_days(tally.effective_days, tally.overtime_hours)
        total_pay = calculator.total_pay(
            payable_days=payable_days,
            daily_rate=daily_rate,
            bonus=bonus,
            advance=advance,
            deduction=deduction,
        )

        result[employee.employee_id] = PayrollReport(
            employee_id=employee.employee_id,
            employee_name=employee.display_name,
            monthly_salary=employee.monthly_salary,
            daily_rate=daily_rate,
            effective_days=tally.effective_days,
            absent_days=tally.absent_days,
            leave_days=tally.leave_days,
            sick_days=tally.sick_days,
            overtime_hours=tally.overtime_hours,
            total_payable_days=payable_days,
            total_pay=total_pay,
            advance=advance,
            bonus=bonus,
            deduction=deduction,
        )

    return result


def build_payslip(employee: Employee, report: PayrollReport, settings: ProjectSettings) -> Payslip:
    """Earnings/deductions breakdown of one report row.

    In official mode the salary components are prorated over the effective
    days instead of the flat monthly salary. The absence deduction is shown
    for information only: absent days are already missing from the payable
    days, so it is not subtracted again.
    """
    days = report.effective_days
    overtime_pay = report.overtime_hours / OVERTIME_HOURS_PER_DAY * report.daily_rate

    if settings.salary_mode == SalaryMode.OFFICIAL:
        base_days = settings.effective_base_day_count

        def _prorated(value: Optional[float]) -> float:
            return (value or 0) / base_days * days

        earnings = (
            PayslipLine("حقوق پایه", _prorated(employee.base_salary), f"بر اساس {days} روز کارکرد"),
            PayslipLine("حق مسکن", _prorated(employee.housing_allowance)),
            PayslipLine("حق اولاد", _prorated(employee.child_allowance)),
            PayslipLine("سایر مزایا", _prorated(employee.other_benefits)),
            PayslipLine("مبلغ اضافه کاری", overtime_pay, f"{report.overtime_hours:g} ساعت"),
            PayslipLine("پاداش", report.bonus),
        )
    else:
        earnings = (
            PayslipLine("حقوق بر اساس کارکرد", report.daily_rate * days, f"{days} روز"),
            PayslipLine("مبلغ اضافه کاری", overtime_pay, f"{report.overtime_hours:g} ساعت"),
            PayslipLine("پاداش", report.bonus),
        )

    deductions = (
        PayslipLine("مساعده", report.advance),
        PayslipLine("سایر کسورات", report.deduction),
    )
    return Payslip(
        employee_id=employee.employee_id,
        employee_name=report.employee_name,
        earnings=earnings,
        deductions=deductions,
        absence_deduction=report.daily_rate * report.absent_days,
        absent_days=report.absent_days,
    )
