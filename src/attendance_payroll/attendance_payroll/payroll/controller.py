from __future__ import annotations

from dataclasses import asdict
from urllib.parse import quote

from flask import Flask, Response, jsonify, request

from ..common.http import period_from_request, to_json
from ..container import Container
from .formatting import format_currency


def register(app: Flask, container: Container) -> None:
    service = container.payroll_report_service
    settings_service = container.settings_service

    @app.get("/api/projects/<project_id>/reports/summary", endpoint="reports_summary")
    def reports_summary(project_id: str):
        start, end = period_from_request(request)
        return jsonify(to_json(service.attendance_summary(project_id, start, end)))

    @app.get("/api/projects/<project_id>/reports/payroll", endpoint="reports_payroll")
    def reports_payroll(project_id: str):
        start, end = period_from_request(request)
        currency = settings_service.get(project_id).currency
        rows = []
        for r in service.payroll_report(project_id, start, end):
            row = asdict(r)
            row["total_pay_display"] = format_currency(r.total_pay, currency)
            rows.append(row)
        return jsonify(rows)

    @app.get("/api/projects/<project_id>/reports/payslip/<employee_id>", endpoint="reports_payslip")
    def reports_payslip(project_id: str, employee_id: str):
        start, end = period_from_request(request)
        payslip = service.payslip(project_id, employee_id, start, end)
        body = asdict(payslip)
        body.update(
            total_earnings=payslip.total_earnings,
            total_deductions=payslip.total_deductions,
            net_pay=payslip.net_pay,
        )
        return jsonify(body)

    @app.get("/api/projects/<project_id>/reports/payroll.csv", endpoint="reports_payroll_csv")
    def reports_payroll_csv(project_id: str):
        start, end = period_from_request(request)
        export = service.export_csv(project_id, start, end, project_name=request.args.get("project_name", ""))
        return Response(
            export.content,
            mimetype="text/csv; charset=utf-8",
            headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(export.filename)}"},
        )
