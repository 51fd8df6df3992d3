from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.aggregator import aggregate
from ..attendance.model import AttendanceSummary
from ..attendance.repository import AttendanceRepository
from ..core.exceptions import NotFoundError
from ..employees.model import active_only
from ..employees.repository import EmployeeRepository
from ..financials.repository import FinancialRepository
from ..jalali.model import YearMonth
from ..settings.service import SettingsService
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .engine import build_payslip, compute_report
from .export import payroll_csv, payroll_csv_filename
from .model import PayrollReport, Payslip


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str


class PayrollReportService:
    """Loads a project's state and runs the pure report functions over it.

    Reports cover active (non-archived) employees only.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        financials: FinancialRepository,
        settings: SettingsService,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._financials = financials
        self._settings = settings
        self._calculator = calculator or StandardPayrollCalculator()

    def attendance_summary(
        self, project_id: str, start: YearMonth, end: Optional[YearMonth] = None
    ) -> list[AttendanceSummary]:
        employees = active_only(self._employees.list_for_project(project_id))
        rules = self._settings.get(project_id).day_rules
        ledger = self._attendance.get_ledger(project_id)
        return list(aggregate(employees, ledger, rules, start, end).values())

    def payroll_report(self, project_id: str, start: YearMonth, end: Optional[YearMonth] = None) -> list[PayrollReport]:
        employees = active_only(self._employees.list_for_project(project_id))
        reports = compute_report(
            employees,
            self._attendance.get_ledger(project_id),
            self._settings.get(project_id),
            self._financials.get_for_project(project_id),
            start,
            end,
            calculator=self._calculator,
        )
        return list(reports.values())

    def payslip(self, project_id: str, employee_id: str, start: YearMonth, end: Optional[YearMonth] = None) -> Payslip:
        employee = self._employees.get(project_id, employee_id)
        if not employee:
            raise NotFoundError("Employee not found")

        settings = self._settings.get(project_id)
        reports = compute_report(
            [employee],
            {employee_id: self._attendance.get_cells(project_id, employee_id)},
            settings,
            self._financials.get_for_project(project_id),
            start,
            end,
            calculator=self._calculator,
        )
        return build_payslip(employee, reports[employee_id], settings)

    def export_csv(
        self, project_id: str, start: YearMonth, end: Optional[YearMonth] = None, *, project_name: str = ""
    ) -> CsvExport:
        reports = self.payroll_report(project_id, start, end)
        return CsvExport(
            filename=payroll_csv_filename(project_name or project_id, start, end),
            content=payroll_csv(reports),
        )
