from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_non_negative
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..jalali.model import YearMonth
from .model import MonthlyFinancials
from .repository import FinancialRepository

logger = logging.getLogger(__name__)


class FinancialService:
    """Use case: monthly advance / bonus / deduction per employee."""

    def __init__(self, financials: FinancialRepository, employees: EmployeeRepository):
        self._financials = financials
        self._employees = employees

    def get(self, project_id: str, employee_id: str, year_month: YearMonth) -> MonthlyFinancials:
        return self._financials.get(project_id, employee_id, year_month.year, year_month.month)

    def update(
        self,
        project_id: str,
        employee_id: str,
        year_month: YearMonth,
        *,
        advance: Optional[float] = None,
        bonus: Optional[float] = None,
        deduction: Optional[float] = None,
    ) -> MonthlyFinancials:
        """Merge the given amounts into the month; zeros are dropped, not stored."""
        if not self._employees.get(project_id, employee_id):
            raise NotFoundError("Employee not found")

        current = self.get(project_id, employee_id, year_month)
        merged = MonthlyFinancials(
            advance=current.advance if advance is None else require_non_negative(advance, "Advance"),
            bonus=current.bonus if bonus is None else require_non_negative(bonus, "Bonus"),
            deduction=current.deduction if deduction is None else require_non_negative(deduction, "Deduction"),
        ).cleaned()

        self._financials.save(project_id, employee_id, year_month.year, year_month.month, merged)
        logger.info("Saved financials of %s for %s", employee_id, year_month.key)
        return merged
