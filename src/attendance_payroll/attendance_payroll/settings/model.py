from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..core.constants import DEFAULT_BASE_DAY_COUNT, WEEKLY_REST_WEEKDAY
from ..core.enums import Currency, DayType, ReservedCode, SalaryMode


@dataclass(frozen=True)
class DayRuleSet:
    """Quy tắc phân loại ngày: ngày nghỉ tuần, ngày lễ và ghi đè theo ngày."""

    holidays: frozenset[str] = frozenset()
    overrides: Mapping[str, DayType] = field(default_factory=dict)
    weekly_rest_weekday: int = WEEKLY_REST_WEEKDAY


@dataclass(frozen=True)
class CustomCode:
    """Mã chấm công do dự án định nghĩa (chỉ dùng để hiển thị)."""

    char: str
    description: str = ""
    color: str = ""
    is_system_code: bool = False


SYSTEM_CODES: tuple[CustomCode, ...] = (
    CustomCode(ReservedCode.ABSENCE.value, "غیبت", "#ef4444", True),
    CustomCode(ReservedCode.LEAVE.value, "مرخصی", "#3b82f6", True),
    CustomCode(ReservedCode.SICK.value, "استعلاجی", "#f59e0b", True),
    CustomCode(ReservedCode.SETTLEMENT.value, "تسویه", "#6b7280", True),
)


@dataclass(frozen=True)
class ProjectSettings:
    base_day_count: int = DEFAULT_BASE_DAY_COUNT
    holidays: frozenset[str] = frozenset()
    day_type_overrides: Mapping[str, DayType] = field(default_factory=dict)
    custom_codes: tuple[CustomCode, ...] = SYSTEM_CODES
    salary_mode: SalaryMode = SalaryMode.PROJECT
    currency: Currency = Currency.TOMAN

    @property
    def day_rules(self) -> DayRuleSet:
        return DayRuleSet(holidays=self.holidays, overrides=self.day_type_overrides)

    @property
    def effective_base_day_count(self) -> int:
        return self.base_day_count if self.base_day_count > 0 else DEFAULT_BASE_DAY_COUNT

    def find_code(self, char: str) -> Optional[CustomCode]:
        for code in self.custom_codes:
            if code.char == char:
                return code
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectSettings":
        """Build from the ``{baseDayCount, holidays, dayTypeOverrides, customCodes}`` shape."""
        codes = tuple(
            CustomCode(
                char=str(c["char"]),
                description=str(c.get("description", "")),
                color=str(c.get("color", "")),
                is_system_code=bool(c.get("isSystemCode", False)),
            )
            for c in data.get("customCodes") or ()
        )
        return cls(
            base_day_count=int(data.get("baseDayCount", DEFAULT_BASE_DAY_COUNT)),
            holidays=frozenset(data.get("holidays") or ()),
            day_type_overrides={k: DayType(v) for k, v in (data.get("dayTypeOverrides") or {}).items()},
            custom_codes=with_system_codes(codes),
            salary_mode=SalaryMode(data.get("salaryMode", SalaryMode.PROJECT.value)),
            currency=Currency(data.get("currency", Currency.TOMAN.value)),
        )

    def to_dict(self) -> dict:
        return {
            "baseDayCount": self.base_day_count,
            "holidays": sorted(self.holidays),
            "dayTypeOverrides": {k: v.value for k, v in sorted(self.day_type_overrides.items())},
            "customCodes": [
                {
                    "char": c.char,
                    "description": c.description,
                    "color": c.color,
                    "isSystemCode": c.is_system_code,
                }
                for c in self.custom_codes
            ],
            "salaryMode": self.salary_mode.value,
            "currency": self.currency.value,
        }


def with_system_codes(codes: tuple[CustomCode, ...]) -> tuple[CustomCode, ...]:
    """Reserved codes always exist; prepend any that are missing."""
    present = {c.char for c in codes}
    missing = tuple(c for c in SYSTEM_CODES if c.char not in present)
    return missing + codes
