from __future__ import annotations

from enum import Enum


class DayType(str, Enum):
    """Loại ngày sau khi áp dụng quy tắc ngày nghỉ."""

    NORMAL = "normal"
    WEEKLY_REST = "friday"
    HOLIDAY = "holiday"


class ReservedCode(str, Enum):
    """Mã chấm công hệ thống, luôn tồn tại và không xoá được."""

    ABSENCE = "غ"
    LEAVE = "م"
    SICK = "ا"
    SETTLEMENT = "ت"

    @classmethod
    def lookup(cls, raw: str) -> "ReservedCode | None":
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class SalaryMode(str, Enum):
    PROJECT = "project"
    OFFICIAL = "official"


class Currency(str, Enum):
    TOMAN = "Toman"
    RIAL = "Rial"
