from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, period_from_request, to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.get("/api/projects/<project_id>/attendance", endpoint="attendance_grid")
    def attendance_grid(project_id: str):
        year_month, _ = period_from_request(request)
        include_archived = request.args.get("include_archived") == "1"
        grid = service.month_grid(project_id, year_month, include_archived=include_archived)
        return jsonify(
            {
                "year_month": grid.year_month.key,
                "days": to_json(grid.days),
                "rows": to_json(grid.rows),
            }
        )

    @app.put("/api/projects/<project_id>/attendance/<employee_id>/<date_key>", endpoint="attendance_set")
    def attendance_set(project_id: str, employee_id: str, date_key: str):
        value = str(json_body(request).get("value") or "")
        changed = service.set_cell(project_id, employee_id, date_key, value)
        return jsonify({"success": True, "changed": changed})
