from __future__ import annotations

from abc import ABC, abstractmethod


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def daily_rate(self, monthly_salary: float, base_day_count: int) -> float:
        raise NotImplementedError

    @abstractmethod
    def payable_days(self, effective_days: float, overtime_hours: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def total_pay(
        self,
        *,
        payable_days: float,
        daily_rate: float,
        bonus: float,
        advance: float,
        deduction: float,
    ) -> float:
        raise NotImplementedError
