from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import period_from_request, to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.dashboard_service

    @app.get("/api/projects/<project_id>/dashboard", endpoint="dashboard")
    def dashboard(project_id: str):
        year_month = None
        if request.args.get("mode", "month") == "month":
            year_month, _ = period_from_request(request)

        data = service.build(project_id, year_month=year_month)
        return jsonify(
            {
                "daily": to_json(data.daily),
                "trend": to_json(data.trend),
                "monthly": to_json(data.monthly),
                "salary_distribution": to_json(data.salary_distribution),
                "project_wide": to_json(data.project_wide),
            }
        )
