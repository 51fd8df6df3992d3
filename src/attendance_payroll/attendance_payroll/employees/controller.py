from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..container import Container
from ..core.exceptions import ValidationError

_FIELDS = {
    "lastName": "last_name",
    "firstName": "first_name",
    "position": "position",
    "monthlySalary": "monthly_salary",
    "nationalId": "national_id",
    "baseSalary": "base_salary",
    "housingAllowance": "housing_allowance",
    "childAllowance": "child_allowance",
    "otherBenefits": "other_benefits",
}


def _fields(data: dict) -> dict:
    return {_FIELDS[k]: v for k, v in data.items() if k in _FIELDS}


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.get("/api/projects/<project_id>/employees", endpoint="employees_list")
    def employees_list(project_id: str):
        include_archived = request.args.get("include_archived", "1") != "0"
        employees = service.list_for_project(project_id, include_archived=include_archived)
        return jsonify([e.to_dict() for e in employees])

    @app.post("/api/projects/<project_id>/employees", endpoint="employees_add")
    def employees_add(project_id: str):
        data = _fields(json_body(request))
        employee = service.add(
            project_id,
            last_name=data.pop("last_name", ""),
            first_name=data.pop("first_name", ""),
            **data,
        )
        return jsonify(employee.to_dict()), 201

    @app.patch("/api/projects/<project_id>/employees/<employee_id>", endpoint="employees_update")
    def employees_update(project_id: str, employee_id: str):
        employee = service.update(project_id, employee_id, **_fields(json_body(request)))
        return jsonify(employee.to_dict())

    @app.patch("/api/projects/<project_id>/employees", endpoint="employees_bulk_update")
    def employees_bulk_update(project_id: str):
        data = json_body(request)
        ids, updates = data.get("ids"), data.get("updates") or {}
        if not isinstance(ids, list) or not ids or not isinstance(updates, dict):
            raise ValidationError("Expected a non-empty ids list and an updates object")
        employees = service.bulk_update(project_id, [str(i) for i in ids], **_fields(updates))
        return jsonify([e.to_dict() for e in employees])

    @app.post("/api/projects/<project_id>/employees/<employee_id>/archive", endpoint="employees_archive")
    def employees_archive(project_id: str, employee_id: str):
        return jsonify(service.toggle_archive(project_id, employee_id).to_dict())

    @app.delete("/api/projects/<project_id>/employees/<employee_id>", endpoint="employees_remove")
    def employees_remove(project_id: str, employee_id: str):
        service.remove(project_id, employee_id)
        return jsonify({"success": True})
