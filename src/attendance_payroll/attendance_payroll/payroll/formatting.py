from __future__ import annotations

import math
from typing import Optional

from ..core.enums import Currency

_PERSIAN_DIGITS = str.maketrans("0123456789,-", "۰۱۲۳۴۵۶۷۸۹٬−")


def round_half_up(value: float) -> int:
    """Round .5 towards +inf, the way the report tables always have."""
    return int(math.floor(value + 0.5))


def format_currency(value: Optional[float], currency: Optional[Currency] = None, *, with_symbol: bool = False) -> str:
    """Presentation-only money formatting; this is the one place amounts get rounded."""
    if value is None:
        return "0"

    currency = currency or Currency.TOMAN
    amount = value * 10 if currency == Currency.RIAL else value
    text = f"{round_half_up(amount):,}".translate(_PERSIAN_DIGITS)
    if with_symbol:
        return f"{text} {'ریال' if currency == Currency.RIAL else 'تومان'}"
    return text
