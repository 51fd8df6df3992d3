from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.settings_service

    @app.get("/api/projects/<project_id>/settings", endpoint="settings_get")
    def settings_get(project_id: str):
        return jsonify(service.get(project_id).to_dict())

    @app.patch("/api/projects/<project_id>/settings", endpoint="settings_update")
    def settings_update(project_id: str):
        data = json_body(request)
        settings = service.update(
            project_id,
            base_day_count=data.get("baseDayCount"),
            salary_mode=data.get("salaryMode"),
            currency=data.get("currency"),
        )
        return jsonify(settings.to_dict())

    @app.post("/api/projects/<project_id>/settings/holidays/<date_key>", endpoint="settings_toggle_holiday")
    def settings_toggle_holiday(project_id: str, date_key: str):
        return jsonify({"date": date_key, "holiday": service.toggle_holiday(project_id, date_key)})

    @app.put("/api/projects/<project_id>/settings/overrides/<date_key>", endpoint="settings_override")
    def settings_override(project_id: str, date_key: str):
        settings = service.set_day_override(project_id, date_key, json_body(request).get("type"))
        return jsonify(settings.to_dict())

    @app.post("/api/projects/<project_id>/settings/codes", endpoint="settings_add_code")
    def settings_add_code(project_id: str):
        data = json_body(request)
        settings = service.add_custom_code(
            project_id,
            char=data.get("char", ""),
            description=data.get("description", ""),
            color=data.get("color", ""),
        )
        return jsonify(settings.to_dict()), 201

    @app.delete("/api/projects/<project_id>/settings/codes/<char>", endpoint="settings_remove_code")
    def settings_remove_code(project_id: str, char: str):
        return jsonify(service.remove_custom_code(project_id, char).to_dict())
