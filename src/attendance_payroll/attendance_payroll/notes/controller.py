from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.http import json_body, period_from_request
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.note_service

    @app.get("/api/projects/<project_id>/notes", endpoint="notes_month")
    def notes_month(project_id: str):
        year_month, _ = period_from_request(request)
        return jsonify({"year_month": year_month.key, "notes": service.month_notes(project_id, year_month)})

    @app.put("/api/projects/<project_id>/notes/<employee_id>/<date_key>", endpoint="notes_set")
    def notes_set(project_id: str, employee_id: str, date_key: str):
        note = service.set_note(project_id, employee_id, date_key, str(json_body(request).get("text") or ""))
        return jsonify(asdict(note))
