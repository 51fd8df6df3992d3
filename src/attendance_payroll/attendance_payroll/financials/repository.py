from __future__ import annotations

from typing import Protocol

from .model import FinancialData, MonthlyFinancials


class FinancialRepository(Protocol):
    def get_for_project(self, project_id: str) -> FinancialData:
        raise NotImplementedError

    def get(self, project_id: str, employee_id: str, year: int, month: int) -> MonthlyFinancials:
        raise NotImplementedError

    def save(self, project_id: str, employee_id: str, year: int, month: int, financials: MonthlyFinancials) -> None:
        """Store one month; an empty record removes the row instead."""
        raise NotImplementedError

    def delete_for_employee(self, project_id: str, employee_id: str) -> None:
        raise NotImplementedError

    def delete_for_project(self, project_id: str) -> None:
        raise NotImplementedError
