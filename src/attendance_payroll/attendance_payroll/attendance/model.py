from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from ..core.enums import ReservedCode

# employee_id -> date_key -> raw cell value
AttendanceLedger = Mapping[str, Mapping[str, str]]


@dataclass(frozen=True)
class EmptyCell:
    pass


@dataclass(frozen=True)
class WorkedCell:
    hours: float


@dataclass(frozen=True)
class ReservedCell:
    code: ReservedCode


@dataclass(frozen=True)
class UnrecognizedCell:
    raw: str


Cell = Union[EmptyCell, WorkedCell, ReservedCell, UnrecognizedCell]

EMPTY = EmptyCell()


def parse_cell(raw: Optional[str]) -> Cell:
    """Resolve a raw ledger string into exactly one cell variant."""
    if raw is None:
        return EMPTY
    text = str(raw).strip()
    if not text:
        return EMPTY

    try:
        hours = float(text)
    except ValueError:
        code = ReservedCode.lookup(text)
        return ReservedCell(code) if code else UnrecognizedCell(text)

    if math.isfinite(hours) and hours > 0:
        return WorkedCell(hours)
    return UnrecognizedCell(text)


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model: tổng hợp chấm công của một nhân viên trong khoảng tháng."""

    employee_id: str
    last_name: str
    first_name: str
    position: str
    presence_days: int = 0
    leave_days: int = 0
    sick_days: int = 0
    absent_days: int = 0
    weekly_rest_work_days: int = 0
    holiday_work_days: int = 0
    overtime_hours: float = 0.0
    total_worked_days: int = 0
    notes: str = ""
