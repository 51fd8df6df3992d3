from __future__ import annotations

from flask import Flask, jsonify

from ..core.exceptions import ValidationError
from .converter import current_date, days_in_month, first_weekday_of_month, month_label


def register(app: Flask) -> None:
    @app.get("/api/calendar/today", endpoint="calendar_today")
    def calendar_today():
        today = current_date()
        return jsonify({"date": today.key, "label": month_label(today.year, today.month)})

    @app.get("/api/calendar/<int:year>/<int:month>", endpoint="calendar_month")
    def calendar_month(year: int, month: int):
        try:
            return jsonify(
                {
                    "year": year,
                    "month": month,
                    "label": month_label(year, month),
                    "days": days_in_month(year, month),
                    "first_weekday": first_weekday_of_month(year, month),
                }
            )
        except ValueError as e:
            raise ValidationError(str(e)) from None
