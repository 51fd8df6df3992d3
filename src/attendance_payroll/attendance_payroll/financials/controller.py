from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..container import Container
from ..core.exceptions import ValidationError
from ..jalali.model import YearMonth


def _year_month(year: int, month: int) -> YearMonth:
    try:
        return YearMonth(year, month)
    except ValueError as e:
        raise ValidationError(str(e)) from None


def register(app: Flask, container: Container) -> None:
    service = container.financial_service
    route = "/api/projects/<project_id>/financials/<employee_id>/<int:year>/<int:month>"

    @app.get(route, endpoint="financials_get")
    def financials_get(project_id: str, employee_id: str, year: int, month: int):
        return jsonify(service.get(project_id, employee_id, _year_month(year, month)).to_dict())

    @app.put(route, endpoint="financials_update")
    def financials_update(project_id: str, employee_id: str, year: int, month: int):
        data = json_body(request)
        saved = service.update(
            project_id,
            employee_id,
            _year_month(year, month),
            advance=data.get("advance"),
            bonus=data.get("bonus"),
            deduction=data.get("deduction"),
        )
        return jsonify(saved.to_dict())
