from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

FINANCIAL_FIELDS = ("advance", "bonus", "deduction")


@dataclass(frozen=True)
class MonthlyFinancials:
    """Điều chỉnh tài chính của một nhân viên trong một tháng (giá trị không âm)."""

    advance: Optional[float] = None
    bonus: Optional[float] = None
    deduction: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return not (self.advance or self.bonus or self.deduction)

    def cleaned(self) -> "MonthlyFinancials":
        """Zero values are the same as absent ones and are dropped."""
        return MonthlyFinancials(
            advance=self.advance or None,
            bonus=self.bonus or None,
            deduction=self.deduction or None,
        )

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in FINANCIAL_FIELDS if getattr(self, name)}

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "MonthlyFinancials":
        data = data or {}
        return cls(**{name: float(data[name]) for name in FINANCIAL_FIELDS if data.get(name) is not None})


NO_FINANCIALS = MonthlyFinancials()

# employee_id -> year -> month -> MonthlyFinancials (int or str keys, as stored)
FinancialData = Mapping[str, Mapping[Any, Mapping[Any, MonthlyFinancials]]]


def lookup_financials(data: FinancialData, employee_id: str, year: int, month: int) -> MonthlyFinancials:
    """Missing records at any level read as all-zero adjustments."""
    years = data.get(employee_id) or {}
    months = years.get(year) or years.get(str(year)) or {}
    found = months.get(month) or months.get(str(month))
    if found is None:
        return NO_FINANCIALS
    if isinstance(found, MonthlyFinancials):
        return found
    return MonthlyFinancials.from_dict(found)
