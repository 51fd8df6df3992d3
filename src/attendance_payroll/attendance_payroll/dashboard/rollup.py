from __future__ import annotations

import re
from typing import Optional, Sequence

from ..attendance.aggregator import tally_month
from ..attendance.model import AttendanceLedger, ReservedCell, WorkedCell, parse_cell
from ..core.enums import ReservedCode
from ..employees.model import Employee, active_only
from ..financials.model import FinancialData
from ..jalali.converter import current_date, month_label
from ..jalali.model import JalaliDate, YearMonth
from ..payroll.engine import compute_report
from ..settings.model import ProjectSettings
from .model import DailyStats, MonthlyStats, ProjectWideStats, SalaryShare, TrendPoint

_MONTH_PREFIX_RE = re.compile(r"([0-9]{4})-([0-9]{2})", re.ASCII)


def today_snapshot(
    employees: Sequence[Employee],
    ledger: AttendanceLedger,
    today: Optional[JalaliDate] = None,
) -> DailyStats:
    """Present / on leave / absent counts of active employees for today only."""
    active = active_only(employees)
    today_key = (today or current_date()).key

    present = on_leave = absent = 0
    for employee in active:
        cell = parse_cell((ledger.get(employee.employee_id) or {}).get(today_key))
        if isinstance(cell, WorkedCell):
            present += 1
        elif isinstance(cell, ReservedCell) and cell.code == ReservedCode.LEAVE:
            on_leave += 1
        elif isinstance(cell, ReservedCell) and cell.code == ReservedCode.ABSENCE:
            absent += 1

    return DailyStats(total=len(active), present=present, on_leave=on_leave, absent=absent)


def months_with_data(ledger: AttendanceLedger) -> list[YearMonth]:
    """Chronological distinct months that hold at least one entry.

    Only the ``YYYY-MM`` prefix of a key is looked at.
    """
    months: set[YearMonth] = set()
    for cells in ledger.values():
        for date_key in cells:
            found = _MONTH_PREFIX_RE.match(date_key)
            if found and 1 <= int(found.group(2)) <= 12:
                months.add(YearMonth(int(found.group(1)), int(found.group(2))))
    return sorted(months)


def project_wide_totals(
    employees: Sequence[Employee],
    ledger: AttendanceLedger,
    settings: ProjectSettings,
    financials: FinancialData,
) -> ProjectWideStats:
    active = active_only(employees)
    rules = settings.day_rules
    total_pay = 0.0
    work_days = 0
    overtime = 0.0

    for year_month in months_with_data(ledger):
        reports = compute_report(active, ledger, settings, financials, year_month)
        total_pay += sum(r.total_pay for r in reports.values())
        for employee in active:
            tally = tally_month(ledger.get(employee.employee_id) or {}, year_month, rules)
            work_days += tally.worked_days
            overtime += tally.overtime_hours

    return ProjectWideStats(total_salary_paid=total_pay, total_work_days=work_days, total_overtime_hours=overtime)


def employee_trend(ledger: AttendanceLedger) -> list[TrendPoint]:
    points = []
    for year_month in months_with_data(ledger):
        prefix = year_month.key + "-"
        count = sum(1 for cells in ledger.values() if any(k.startswith(prefix) for k in cells))
        points.append(TrendPoint(label=month_label(year_month.year, year_month.month), count=count))
    return points


def salary_distribution(
    employees: Sequence[Employee],
    ledger: AttendanceLedger,
    settings: ProjectSettings,
    financials: FinancialData,
    year_month: YearMonth,
) -> list[SalaryShare]:
    reports = compute_report(active_only(employees), ledger, settings, financials, year_month)
    return [SalaryShare(r.employee_name, r.total_pay) for r in reports.values() if r.total_pay > 0]


def monthly_stats(
    employees: Sequence[Employee],
    ledger: AttendanceLedger,
    settings: ProjectSettings,
    financials: FinancialData,
    year_month: YearMonth,
) -> MonthlyStats:
    active = active_only(employees)
    reports = compute_report(active, ledger, settings, financials, year_month).values()
    return MonthlyStats(
        total_employees=len(employees),
        active_employees=len(active),
        total_pay=sum(r.total_pay for r in reports),
        total_overtime_hours=sum(r.overtime_hours for r in reports),
        total_absences=sum(r.absent_days for r in reports),
    )
