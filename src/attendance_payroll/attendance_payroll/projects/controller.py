from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.project_service

    @app.get("/api/projects", endpoint="projects_list")
    def projects_list():
        return jsonify(
            {
                "default": service.default_project_id,
                "projects": [p.to_dict() for p in service.list_projects()],
            }
        )

    @app.get("/api/projects/default", endpoint="projects_default")
    def projects_default():
        return jsonify(service.get(service.default_project_id).to_dict())

    @app.post("/api/projects", endpoint="projects_add")
    def projects_add():
        project = service.add(str(json_body(request).get("name") or ""))
        return jsonify(project.to_dict()), 201

    @app.patch("/api/projects/<project_id>", endpoint="projects_rename")
    def projects_rename(project_id: str):
        project = service.rename(project_id, str(json_body(request).get("name") or ""))
        return jsonify(project.to_dict())

    @app.delete("/api/projects/<project_id>", endpoint="projects_remove")
    def projects_remove(project_id: str):
        service.remove(project_id)
        return jsonify({"success": True})
