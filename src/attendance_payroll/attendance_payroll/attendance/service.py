from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from ..common.validators import require_single_char
from ..core.constants import MAX_WORKED_HOURS, MIN_WORKED_HOURS
from ..core.enums import DayType, ReservedCode
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..jalali.converter import days_in_month, first_weekday_of_month, format_date_key, is_valid_date_key, parse_date_key
from ..jalali.model import YearMonth
from ..settings.classifier import classify_day
from ..settings.service import SettingsService
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridDay:
    day: int
    date_key: str
    weekday: int
    day_type: DayType


@dataclass(frozen=True)
class GridRow:
    employee_id: str
    employee_name: str
    is_archived: bool
    cells: dict[str, str]


@dataclass(frozen=True)
class MonthGrid:
    """Read-model phục vụ bảng chấm công một tháng."""

    year_month: YearMonth
    days: tuple[GridDay, ...]
    rows: tuple[GridRow, ...]


class AttendanceService:
    """Use case: edit the attendance grid.

    Entry validation lives here; the aggregator itself ignores unknown codes.
    """

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository, settings: SettingsService):
        self._attendance = attendance
        self._employees = employees
        self._settings = settings

    def _normalize_value(self, project_id: str, value: str) -> str:
        text = (value or "").strip()
        if not text:
            return ""

        try:
            hours = float(text)
        except ValueError:
            char = require_single_char(text, "Attendance code").lower()
            if not self._settings.get(project_id).find_code(char):
                raise ValidationError(f"Unknown attendance code: {char!r}") from None
            return char

        if not MIN_WORKED_HOURS <= hours <= MAX_WORKED_HOURS:
            raise ValidationError(f"Worked hours must be between {MIN_WORKED_HOURS} and {MAX_WORKED_HOURS}")
        return f"{hours:g}"

    def set_cell(self, project_id: str, employee_id: str, date_key: str, value: str) -> dict[str, str]:
        """Write one cell and return every cell that changed (empty string = cleared).

        A settlement code also fills the rest of that month and records the
        employee's settlement date.
        """
        if not is_valid_date_key(date_key):
            raise ValidationError(f"Invalid date: {date_key!r}")
        employee = self._employees.get(project_id, employee_id)
        if not employee:
            raise NotFoundError("Employee not found")

        normalized = self._normalize_value(project_id, value)
        if not normalized:
            self._attendance.delete_cells(project_id, employee_id, [date_key])
            return {date_key: ""}

        changed = {date_key: normalized}
        if normalized == ReservedCode.SETTLEMENT.value:
            parsed = parse_date_key(date_key)
            for day in range(parsed.day + 1, days_in_month(parsed.year, parsed.month) + 1):
                changed[format_date_key(parsed.year, parsed.month, day)] = normalized
            self._employees.update(project_id, replace(employee, settlement_date=date_key))
            logger.info("Employee %s settled on %s", employee_id, date_key)

        self._attendance.upsert_cells(project_id, employee_id, changed)
        return changed

    def month_grid(self, project_id: str, year_month: YearMonth, *, include_archived: bool = False) -> MonthGrid:
        rules = self._settings.get(project_id).day_rules
        first_weekday = first_weekday_of_month(year_month.year, year_month.month)
        days = []
        for day in range(1, days_in_month(year_month.year, year_month.month) + 1):
            date_key = format_date_key(year_month.year, year_month.month, day)
            weekday = (first_weekday + day - 1) % 7
            days.append(GridDay(day, date_key, weekday, classify_day(date_key, rules, weekday=weekday)))

        ledger = self._attendance.get_ledger(project_id)
        prefix = year_month.key + "-"
        rows = []
        for employee in self._employees.list_for_project(project_id):
            if employee.is_archived and not include_archived:
                continue
            cells = {k: v for k, v in (ledger.get(employee.employee_id) or {}).items() if k.startswith(prefix)}
            rows.append(GridRow(employee.employee_id, employee.display_name, employee.is_archived, cells))

        return MonthGrid(year_month=year_month, days=tuple(days), rows=tuple(rows))
