from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from ..core.constants import SETTLEMENT_NOTE, STANDARD_SHIFT_HOURS
from ..core.enums import DayType, ReservedCode
from ..employees.model import Employee
from ..jalali.converter import days_in_month, first_weekday_of_month, format_date_key
from ..jalali.model import YearMonth, iter_months
from ..settings.classifier import classify_day
from ..settings.model import DayRuleSet
from .model import AttendanceLedger, AttendanceSummary, ReservedCell, WorkedCell, parse_cell


@dataclass
class DayTally:
    """Running per-employee counters; only lives inside one aggregation call."""

    presence_days: int = 0
    leave_days: int = 0
    sick_days: int = 0
    absent_days: int = 0
    weekly_rest_work_days: int = 0
    holiday_work_days: int = 0
    overtime_hours: float = 0.0
    has_settlement: bool = False

    @property
    def worked_days(self) -> int:
        """Days with a numeric hours value, whatever the day type."""
        return self.presence_days + self.weekly_rest_work_days + self.holiday_work_days

    @property
    def effective_days(self) -> int:
        return self.worked_days + self.leave_days + self.sick_days

    def add(self, other: "DayTally") -> None:
        self.presence_days += other.presence_days
        self.leave_days += other.leave_days
        self.sick_days += other.sick_days
        self.absent_days += other.absent_days
        self.weekly_rest_work_days += other.weekly_rest_work_days
        self.holiday_work_days += other.holiday_work_days
        self.overtime_hours += other.overtime_hours
        self.has_settlement = self.has_settlement or other.has_settlement


def tally_month(cells: Mapping[str, str], year_month: YearMonth, rules: DayRuleSet) -> DayTally:
    """Count one employee's cells for every day of one month."""
    tally = DayTally()
    if not cells:
        return tally

    first_weekday = first_weekday_of_month(year_month.year, year_month.month)
    for day in range(1, days_in_month(year_month.year, year_month.month) + 1):
        date_key = format_date_key(year_month.year, year_month.month, day)
        cell = parse_cell(cells.get(date_key))

        if isinstance(cell, WorkedCell):
            day_type = classify_day(date_key, rules, weekday=(first_weekday + day - 1) % 7)
            if day_type == DayType.WEEKLY_REST:
                tally.weekly_rest_work_days += 1
            elif day_type == DayType.HOLIDAY:
                tally.holiday_work_days += 1
            else:
                tally.presence_days += 1
            tally.overtime_hours += max(0.0, cell.hours - STANDARD_SHIFT_HOURS)
        elif isinstance(cell, ReservedCell):
            if cell.code == ReservedCode.ABSENCE:
                tally.absent_days += 1
            elif cell.code == ReservedCode.LEAVE:
                tally.leave_days += 1
            elif cell.code == ReservedCode.SICK:
                tally.sick_days += 1
            else:
                tally.has_settlement = True
        # empty and unrecognized cells count for nothing

    return tally


def aggregate(
    employees: Sequence[Employee],
    ledger: AttendanceLedger,
    rules: DayRuleSet,
    start: YearMonth,
    end: Optional[YearMonth] = None,
) -> dict[str, AttendanceSummary]:
    """Attendance summary per employee over the months ``start..end``.

    Every input employee gets an entry, in input order, even without records.
    """
    months = list(iter_months(start, end))
    result: dict[str, AttendanceSummary] = {}

    for employee in employees:
        cells = ledger.get(employee.employee_id) or {}
        total = DayTally()
        for year_month in months:
            total.add(tally_month(cells, year_month, rules))

        result[employee.employee_id] = AttendanceSummary(
            employee_id=employee.employee_id,
            last_name=employee.last_name,
            first_name=employee.first_name,
            position=employee.position,
            presence_days=total.presence_days,
            leave_days=total.leave_days,
            sick_days=total.sick_days,
            absent_days=total.absent_days,
            weekly_rest_work_days=total.weekly_rest_work_days,
            holiday_work_days=total.holiday_work_days,
            overtime_hours=total.overtime_hours,
            total_worked_days=total.effective_days,
            notes=SETTLEMENT_NOTE if total.has_settlement else "",
        )

    return result
