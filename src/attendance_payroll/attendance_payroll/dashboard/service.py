from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..employees.repository import EmployeeRepository
from ..financials.repository import FinancialRepository
from ..jalali.model import JalaliDate, YearMonth
from ..settings.service import SettingsService
from .model import DailyStats, MonthlyStats, ProjectWideStats, SalaryShare, TrendPoint
from .rollup import employee_trend, monthly_stats, project_wide_totals, salary_distribution, today_snapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardData:
    daily: DailyStats
    trend: list[TrendPoint]
    monthly: Optional[MonthlyStats] = None
    salary_distribution: Optional[list[SalaryShare]] = None
    project_wide: Optional[ProjectWideStats] = None


class DashboardService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        financials: FinancialRepository,
        settings: SettingsService,
    ):
        self._employees = employees
        self._attendance = attendance
        self._financials = financials
        self._settings = settings

    def build(
        self,
        project_id: str,
        *,
        year_month: Optional[YearMonth] = None,
        today: Optional[JalaliDate] = None,
    ) -> DashboardData:
        """Month mode when ``year_month`` is given, otherwise project-lifetime totals."""
        employees = list(self._employees.list_for_project(project_id))
        ledger = self._attendance.get_ledger(project_id)
        settings = self._settings.get(project_id)
        financials = self._financials.get_for_project(project_id)

        daily = today_snapshot(employees, ledger, today)
        trend = employee_trend(ledger)

        if year_month is not None:
            logger.debug("Dashboard for project %s, month %s", project_id, year_month.key)
            return DashboardData(
                daily=daily,
                trend=trend,
                monthly=monthly_stats(employees, ledger, settings, financials, year_month),
                salary_distribution=salary_distribution(employees, ledger, settings, financials, year_month),
            )

        logger.debug("Dashboard for project %s, all months", project_id)
        return DashboardData(
            daily=daily,
            trend=trend,
            project_wide=project_wide_totals(employees, ledger, settings, financials),
        )
