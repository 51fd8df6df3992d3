"""Jalali calendar arithmetic.

All domain dates are Jalali. The Gregorian calendar is only used here, to get
weekdays and "today" out of :mod:`datetime`. Leap years follow the fixed
33-year residue rule stored dates were written with, so the conversions are
built on day counts derived from that same rule instead of an astronomical
algorithm.
"""

from __future__ import annotations

import re
from datetime import date

from ..common.datetime_utils import today_local
from ..core.constants import JALALI_MONTHS, LEAP_YEAR_RESIDUES, MAX_KEY_YEAR, MIN_KEY_YEAR
from .model import JalaliDate

_DATE_KEY_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}", re.ASCII)

_CYCLE_YEARS = 33
_CYCLE_DAYS = 365 * _CYCLE_YEARS + len(LEAP_YEAR_RESIDUES)

# 1 Farvardin 1403 == 2024-03-20
_ANCHOR_YEAR = 1403
_ANCHOR_ORDINAL = date(2024, 3, 20).toordinal()


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")


def is_leap_year(year: int) -> bool:
    return year % _CYCLE_YEARS in LEAP_YEAR_RESIDUES


def days_in_month(year: int, month: int) -> int:
    _check_month(month)
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_leap_year(year) else 29


def _days_before_year(year: int) -> int:
    # Days from year 0 to the first of ``year`` (floor division keeps this
    # valid for years before 0 as well).
    cycles, rest = divmod(year, _CYCLE_YEARS)
    leaps = cycles * len(LEAP_YEAR_RESIDUES) + sum(1 for r in LEAP_YEAR_RESIDUES if r < rest)
    return 365 * year + leaps


def _days_before_month(month: int) -> int:
    if month <= 7:
        return 31 * (month - 1)
    return 186 + 30 * (month - 7)


def _check_date(year: int, month: int, day: int) -> None:
    _check_month(month)
    if not 1 <= day <= days_in_month(year, month):
        raise ValueError(f"day out of range: {year}-{month:02d}-{day:02d}")


def _to_ordinal(year: int, month: int, day: int) -> int:
    _check_date(year, month, day)
    return (
        _ANCHOR_ORDINAL
        + _days_before_year(year)
        - _days_before_year(_ANCHOR_YEAR)
        + _days_before_month(month)
        + day
        - 1
    )


def _from_ordinal(ordinal: int) -> JalaliDate:
    offset = ordinal - _ANCHOR_ORDINAL + _days_before_year(_ANCHOR_YEAR)
    year = (offset * _CYCLE_YEARS) // _CYCLE_DAYS
    while _days_before_year(year + 1) <= offset:
        year += 1
    while _days_before_year(year) > offset:
        year -= 1

    day_of_year = offset - _days_before_year(year)
    if day_of_year < 186:
        month, day = divmod(day_of_year, 31)
    else:
        month, day = divmod(day_of_year - 186, 30)
        month += 6
    return JalaliDate(year, month + 1, day + 1)


def to_gregorian(year: int, month: int, day: int) -> date:
    """Convert a Jalali date to a Gregorian :class:`datetime.date`."""
    return date.fromordinal(_to_ordinal(year, month, day))


def from_gregorian(gregorian: date) -> JalaliDate:
    return _from_ordinal(gregorian.toordinal())


def weekday_of(year: int, month: int, day: int) -> int:
    """Weekday index with 0 = Saturday ... 6 = Friday."""
    sunday_first = to_gregorian(year, month, day).isoweekday() % 7
    return (sunday_first + 1) % 7


def first_weekday_of_month(year: int, month: int) -> int:
    return weekday_of(year, month, 1)


def format_date_key(year: int, month: int, day: int) -> str:
    return f"{year}-{month:02d}-{day:02d}"


def parse_date_key(key: str) -> JalaliDate:
    if not isinstance(key, str) or not _DATE_KEY_RE.fullmatch(key):
        raise ValueError(f"invalid date key: {key!r}")
    year, month, day = (int(part) for part in key.split("-"))
    _check_date(year, month, day)
    return JalaliDate(year, month, day)


def is_valid_date_key(key: str) -> bool:
    """True for a well-formed key of a real date in the supported year window."""
    try:
        parsed = parse_date_key(key)
    except ValueError:
        return False
    return MIN_KEY_YEAR <= parsed.year <= MAX_KEY_YEAR


def current_date() -> JalaliDate:
    return from_gregorian(today_local())


def month_label(year: int, month: int) -> str:
    _check_month(month)
    return f"{JALALI_MONTHS[month - 1]} {year}"
