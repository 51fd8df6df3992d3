from __future__ import annotations

from dataclasses import asdict, is_dataclass
from typing import Any, Optional

from flask import Request

from ..core.exceptions import ValidationError
from ..jalali.converter import current_date
from ..jalali.model import YearMonth


def _year_month(value: Optional[str], field_name: str) -> YearMonth:
    try:
        return YearMonth.from_key(value or "")
    except ValueError:
        raise ValidationError(f"{field_name} must look like YYYY-MM") from None


def period_from_request(request: Request) -> tuple[YearMonth, YearMonth]:
    """Read ``?from=YYYY-MM&to=YYYY-MM`` or ``?year=&month=`` (defaults to this month).

    A reversed range is swapped here, before it reaches the report functions.
    """
    args = request.args
    if args.get("from"):
        start = _year_month(args.get("from"), "from")
        end = _year_month(args.get("to") or args.get("from"), "to")
        return (start, end) if start <= end else (end, start)

    if args.get("year") or args.get("month"):
        try:
            single = YearMonth(int(args["year"]), int(args["month"]))
        except (KeyError, ValueError):
            raise ValidationError("year and month are required together") from None
        return single, single

    today = current_date()
    return today.year_month, today.year_month


def json_body(request: Request) -> dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Expected a JSON object")
    return data


def to_json(value: Any) -> Any:
    if is_dataclass(value):
        return asdict(value)
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value
