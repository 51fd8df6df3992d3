from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Iterable, Mapping, Optional

import pytest

from src.attendance_payroll.attendance_payroll.container import wire_services
from src.attendance_payroll.attendance_payroll.employees.model import Employee
from src.attendance_payroll.attendance_payroll.financials.model import NO_FINANCIALS, MonthlyFinancials
from src.attendance_payroll.attendance_payroll.jalali import converter
from src.attendance_payroll.attendance_payroll.projects.model import Project
from src.attendance_payroll.attendance_payroll.settings.model import ProjectSettings


@dataclass
class InMemoryEmployees:
    by_project: dict[str, list[Employee]] = field(default_factory=dict)

    def list_for_project(self, project_id: str):
        return list(self.by_project.get(project_id, []))

    def get(self, project_id: str, employee_id: str) -> Optional[Employee]:
        for e in self.by_project.get(project_id, []):
            if e.employee_id == employee_id:
                return e
        return None

    def add(self, project_id: str, employee: Employee) -> None:
        self.by_project.setdefault(project_id, []).append(employee)

    def update(self, project_id: str, employee: Employee) -> bool:
        items = self.by_project.get(project_id, [])
        for i, e in enumerate(items):
            if e.employee_id == employee.employee_id:
                items[i] = employee
                return True
        return False

    def delete(self, project_id: str, employee_id: str) -> bool:
        items = self.by_project.get(project_id, [])
        kept = [e for e in items if e.employee_id != employee_id]
        self.by_project[project_id] = kept
        return len(kept) != len(items)

    def delete_for_project(self, project_id: str) -> None:
        self.by_project.pop(project_id, None)


@dataclass
class InMemoryAttendance:
    ledgers: dict[str, dict[str, dict[str, str]]] = field(default_factory=dict)

    def get_ledger(self, project_id: str):
        return {emp: dict(cells) for emp, cells in self.ledgers.get(project_id, {}).items()}

    def get_cells(self, project_id: str, employee_id: str) -> Mapping[str, str]:
        return dict(self.ledgers.get(project_id, {}).get(employee_id, {}))

    def upsert_cells(self, project_id: str, employee_id: str, cells: Mapping[str, str]) -> None:
        self.ledgers.setdefault(project_id, {}).setdefault(employee_id, {}).update(cells)

    def delete_cells(self, project_id: str, employee_id: str, date_keys: Iterable[str]) -> None:
        cells = self.ledgers.get(project_id, {}).get(employee_id, {})
        for k in date_keys:
            cells.pop(k, None)

    def delete_for_employee(self, project_id: str, employee_id: str) -> None:
        self.ledgers.get(project_id, {}).pop(employee_id, None)

    def delete_for_project(self, project_id: str) -> None:
        self.ledgers.pop(project_id, None)


@dataclass
class InMemorySettings:
    by_project: dict[str, ProjectSettings] = field(default_factory=dict)

    def get(self, project_id: str) -> Optional[ProjectSettings]:
        return self.by_project.get(project_id)

    def save(self, project_id: str, settings: ProjectSettings) -> None:
        self.by_project[project_id] = settings

    def delete(self, project_id: str) -> None:
        self.by_project.pop(project_id, None)


@dataclass
class InMemoryFinancials:
    rows: dict[tuple[str, str, int, int], MonthlyFinancials] = field(default_factory=dict)

    def get_for_project(self, project_id: str):
        data: dict = {}
        for (pid, emp, year, month), fin in self.rows.items():
            if pid == project_id:
                data.setdefault(emp, {}).setdefault(year, {})[month] = fin
        return data

    def get(self, project_id: str, employee_id: str, year: int, month: int) -> MonthlyFinancials:
        return self.rows.get((project_id, employee_id, year, month), NO_FINANCIALS)

    def save(self, project_id: str, employee_id: str, year: int, month: int, financials: MonthlyFinancials) -> None:
        key = (project_id, employee_id, year, month)
        if financials.is_empty:
            self.rows.pop(key, None)
        else:
            self.rows[key] = financials

    def delete_for_employee(self, project_id: str, employee_id: str) -> None:
        for key in [k for k in self.rows if k[0] == project_id and k[1] == employee_id]:
            del self.rows[key]

    def delete_for_project(self, project_id: str) -> None:
        for key in [k for k in self.rows if k[0] == project_id]:
            del self.rows[key]


@dataclass
class InMemoryNotes:
    notes: dict[str, dict[str, dict[str, str]]] = field(default_factory=dict)

    def get_for_project(self, project_id: str):
        return {emp: dict(n) for emp, n in self.notes.get(project_id, {}).items()}

    def get(self, project_id: str, employee_id: str, date_key: str) -> Optional[str]:
        return self.notes.get(project_id, {}).get(employee_id, {}).get(date_key)

    def save(self, project_id: str, employee_id: str, date_key: str, text: str) -> None:
        self.notes.setdefault(project_id, {}).setdefault(employee_id, {})[date_key] = text

    def delete(self, project_id: str, employee_id: str, date_key: str) -> None:
        self.notes.get(project_id, {}).get(employee_id, {}).pop(date_key, None)

    def delete_for_employee(self, project_id: str, employee_id: str) -> None:
        self.notes.get(project_id, {}).pop(employee_id, None)

    def delete_for_project(self, project_id: str) -> None:
        self.notes.pop(project_id, None)


@dataclass
class InMemoryProjects:
    projects: list[Project] = field(default_factory=list)

    def list_all(self):
        return list(self.projects)

    def get(self, project_id: str) -> Optional[Project]:
        return next((p for p in self.projects if p.project_id == project_id), None)

    def add(self, project: Project) -> None:
        self.projects.append(project)

    def rename(self, project_id: str, name: str) -> bool:
        for i, p in enumerate(self.projects):
            if p.project_id == project_id:
                self.projects[i] = replace(p, name=name)
                return True
        return False

    def delete(self, project_id: str) -> bool:
        kept = [p for p in self.projects if p.project_id != project_id]
        removed = len(kept) != len(self.projects)
        self.projects = kept
        return removed


def build_test_container(**kwargs):
    return wire_services(
        projects_repo=InMemoryProjects(),
        employees_repo=InMemoryEmployees(),
        attendance_repo=InMemoryAttendance(),
        settings_repo=InMemorySettings(),
        financials_repo=InMemoryFinancials(),
        notes_repo=InMemoryNotes(),
        **kwargs,
    )


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def container_factory():
    return build_test_container


@pytest.fixture
def make_employee():
    def _make(employee_id: str = "e1", **kwargs) -> Employee:
        base = Employee(
            employee_id=employee_id,
            last_name="Rahimi",
            first_name=employee_id.upper(),
            position="Welder",
            monthly_salary=9_000_000,
        )
        return replace(base, **kwargs)

    return _make


@pytest.fixture
def fixed_today(monkeypatch):
    """Pin "today" to 1 Mehr 1403 (2024-09-22, a Sunday)."""
    monkeypatch.setattr(converter, "today_local", lambda: date(2024, 9, 22))
    return converter.JalaliDate(1403, 7, 1)
