from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True, order=True)
class YearMonth:
    """Một tháng trọn vẹn trong lịch Jalali, so sánh theo thứ tự thời gian."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month out of range: {self.month}")

    @property
    def key(self) -> str:
        return f"{self.year}-{self.month:02d}"

    def next(self) -> "YearMonth":
        if self.month == 12:
            return YearMonth(self.year + 1, 1)
        return YearMonth(self.year, self.month + 1)

    @classmethod
    def from_key(cls, key: str) -> "YearMonth":
        """Parse ``YYYY-MM`` (a date key prefix also works)."""
        year, month = key[:7].split("-")
        return cls(int(year), int(month))


@dataclass(frozen=True, order=True)
class JalaliDate:
    """Thực thể miền (domain): một ngày trong lịch Jalali."""

    year: int
    month: int
    day: int

    @property
    def key(self) -> str:
        return f"{self.year}-{self.month:02d}-{self.day:02d}"

    @property
    def year_month(self) -> YearMonth:
        return YearMonth(self.year, self.month)


def iter_months(start: YearMonth, end: Optional[YearMonth] = None) -> Iterator[YearMonth]:
    """Yield every month from ``start`` to ``end`` inclusive.

    ``end`` defaults to ``start``. A reversed range yields nothing; callers are
    expected to normalise the range first.
    """
    end = end or start
    current = start
    while current <= end:
        yield current
        current = current.next()
