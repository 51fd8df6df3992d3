from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Any, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import SalaryMode
from ..core.exceptions import NotFoundError, ValidationError
from ..financials.repository import FinancialRepository
from ..notes.repository import NoteRepository
from ..settings.service import SettingsService
from .model import COMPONENT_FIELDS, Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = ("last_name", "first_name", "position", "monthly_salary", "national_id") + COMPONENT_FIELDS

class EmployeeService:
    """Use case: manage the roster of a project."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        financials: FinancialRepository,
        notes: NoteRepository,
        settings: SettingsService,
    ):
        self._employees = employees
        self._attendance = attendance
        self._financials = financials
        self._notes = notes
        self._settings = settings

    def list_for_project(self, project_id: str, *, include_archived: bool = True) -> Sequence[Employee]:
        employees = self._employees.list_for_project(project_id)
        if include_archived:
            return list(employees)
        return [e for e in employees if not e.is_archived]

    def get(self, project_id: str, employee_id: str) -> Employee:
        employee = self._employees.get(project_id, employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def _clean(self, values: dict[str, Any]) -> dict[str, Any]:
        for name in ("last_name", "first_name"):
            if name in values:
                values[name] = require_non_empty(values[name], name.replace("_", " ").capitalize())
        if "position" in values:
            values["position"] = (values["position"] or "").strip()
        if "national_id" in values:
            values["national_id"] = (values["national_id"] or "").strip() or None
        if "monthly_salary" in values:
            values["monthly_salary"] = require_non_negative(values["monthly_salary"], "Monthly salary")
        for name in COMPONENT_FIELDS:
            if values.get(name) is not None:
                values[name] = require_non_negative(values[name], name.replace("_", " ").capitalize())
        return values

    @staticmethod
    def _apply_salary_mode(official: bool, employee: Employee, changed: set[str]) -> Employee:
        """In official mode the salary follows its components, and only when one of them changed."""
        if not official:
            return employee
        if "monthly_salary" in changed:
            raise ValidationError("In official mode the monthly salary is the sum of its components")
        if changed & set(COMPONENT_FIELDS):
            return replace(employee, monthly_salary=employee.components_total)
        return employee

    def add(
        self,
        project_id: str,
        *,
        last_name: str,
        first_name: str,
        position: str = "",
        monthly_salary: float = 0,
        national_id: Optional[str] = None,
        base_salary: Optional[float] = None,
        housing_allowance: Optional[float] = None,
        child_allowance: Optional[float] = None,
        other_benefits: Optional[float] = None,
    ) -> Employee:
        values = self._clean(
            dict(
                last_name=last_name,
                first_name=first_name,
                position=position,
                national_id=national_id,
                base_salary=base_salary,
                housing_allowance=housing_allowance,
                child_allowance=child_allowance,
                other_benefits=other_benefits,
            ),
        )
        employee = Employee(employee_id=uuid.uuid4().hex, **values)
        if self._settings.get(project_id).salary_mode == SalaryMode.OFFICIAL:
            employee = replace(employee, monthly_salary=employee.components_total)
        else:
            employee = replace(employee, monthly_salary=require_non_negative(monthly_salary, "Monthly salary"))

        self._employees.add(project_id, employee)
        logger.info("Added employee %s to project %s", employee.employee_id, project_id)
        return employee

    def update(self, project_id: str, employee_id: str, **changes: Any) -> Employee:
        [updated] = self.bulk_update(project_id, [employee_id], **changes)
        return updated

    def bulk_update(self, project_id: str, employee_ids: Sequence[str], **changes: Any) -> list[Employee]:
        """Apply the same field changes to several employees.

        Every id is checked before anything is written.
        """
        unknown = set(changes) - set(_EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")

        employees = [self.get(project_id, employee_id) for employee_id in dict.fromkeys(employee_ids)]
        values = self._clean(dict(changes))
        official = self._settings.get(project_id).salary_mode == SalaryMode.OFFICIAL
        updated = [self._apply_salary_mode(official, replace(e, **values), set(values)) for e in employees]

        for employee in updated:
            if not self._employees.update(project_id, employee):
                raise ValidationError("Updating the employee failed")
        if len(updated) > 1:
            logger.info("Bulk updated %d employees of project %s: %s", len(updated), project_id, sorted(values))
        return updated

    def toggle_archive(self, project_id: str, employee_id: str) -> Employee:
        employee = self.get(project_id, employee_id)
        updated = replace(employee, is_archived=not employee.is_archived)
        self._employees.update(project_id, updated)
        logger.info("Employee %s archived=%s", employee_id, updated.is_archived)
        return updated

    def remove(self, project_id: str, employee_id: str) -> None:
        """Delete permanently, together with the employee's attendance, financials and notes."""
        self.get(project_id, employee_id)
        self._attendance.delete_for_employee(project_id, employee_id)
        self._financials.delete_for_employee(project_id, employee_id)
        self._notes.delete_for_employee(project_id, employee_id)
        if not self._employees.delete(project_id, employee_id):
            raise ValidationError("Deleting the employee failed")
        logger.info("Removed employee %s from project %s", employee_id, project_id)
