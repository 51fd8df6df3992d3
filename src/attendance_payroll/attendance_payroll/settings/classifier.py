from __future__ import annotations

from typing import Optional

from ..core.enums import DayType
from ..jalali.converter import parse_date_key, weekday_of
from .model import DayRuleSet


def classify_day(date_key: str, rules: DayRuleSet, *, weekday: Optional[int] = None) -> DayType:
    """Effective day type of ``date_key``.

    Precedence: explicit override, then the weekly rest weekday, then the
    holiday set, otherwise normal. ``weekday`` may be passed by callers that
    already walk a month from its first weekday.
    """
    override = rules.overrides.get(date_key)
    if override is not None:
        return DayType(override)

    if weekday is None:
        parsed = parse_date_key(date_key)
        weekday = weekday_of(parsed.year, parsed.month, parsed.day)
    if weekday == rules.weekly_rest_weekday:
        return DayType.WEEKLY_REST

    if date_key in rules.holidays:
        return DayType.HOLIDAY
    return DayType.NORMAL
