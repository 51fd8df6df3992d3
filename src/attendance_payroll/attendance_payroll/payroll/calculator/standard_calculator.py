from __future__ import annotations

from ...core.constants import DEFAULT_BASE_DAY_COUNT, OVERTIME_HOURS_PER_DAY
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: (days + overtime/10) * salary/base_days + bonus - advance - deduction.

    Nothing is rounded and the total is not clamped at zero.
    """

    def daily_rate(self, monthly_salary: float, base_day_count: int) -> float:
        if base_day_count <= 0:
            base_day_count = DEFAULT_BASE_DAY_COUNT
        return monthly_salary / base_day_count

    def payable_days(self, effective_days: float, overtime_hours: float) -> float:
        return effective_days + overtime_hours / OVERTIME_HOURS_PER_DAY

    def total_pay(
        self,
        *,
        payable_days: float,
        daily_rate: float,
        bonus: float,
        advance: float,
        deduction: float,
    ) -> float:
        return payable_days * daily_rate + bonus - advance - deduction
