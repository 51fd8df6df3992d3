from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_PROJECT_ID
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .financials.mysql_financial_repository import MySQLFinancialRepository
from .financials.repository import FinancialRepository
from .financials.service import FinancialService
from .notes.mysql_note_repository import MySQLNoteRepository
from .notes.repository import NoteRepository
from .notes.service import NoteService
from .payroll.service import PayrollReportService
from .projects.mysql_project_repository import MySQLProjectRepository
from .projects.repository import ProjectRepository
from .projects.service import ProjectService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    projects_repo: ProjectRepository
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    settings_repo: SettingsRepository
    financials_repo: FinancialRepository
    notes_repo: NoteRepository

    project_service: ProjectService
    settings_service: SettingsService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    financial_service: FinancialService
    note_service: NoteService
    payroll_report_service: PayrollReportService
    dashboard_service: DashboardService


def wire_services(
    *,
    projects_repo: ProjectRepository,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    settings_repo: SettingsRepository,
    financials_repo: FinancialRepository,
    notes_repo: NoteRepository,
    default_project_id: str = DEFAULT_PROJECT_ID,
) -> Container:
    """Build every service on top of the given repositories (MySQL or in-memory)."""
    settings_service = SettingsService(settings_repo)

    return Container(
        projects_repo=projects_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        settings_repo=settings_repo,
        financials_repo=financials_repo,
        notes_repo=notes_repo,
        project_service=ProjectService(
            projects_repo,
            employees_repo,
            attendance_repo,
            settings_repo,
            financials_repo,
            notes_repo,
            default_project_id=default_project_id,
        ),
        settings_service=settings_service,
        employee_service=EmployeeService(employees_repo, attendance_repo, financials_repo, notes_repo, settings_service),
        attendance_service=AttendanceService(attendance_repo, employees_repo, settings_service),
        financial_service=FinancialService(financials_repo, employees_repo),
        note_service=NoteService(notes_repo, employees_repo),
        payroll_report_service=PayrollReportService(employees_repo, attendance_repo, financials_repo, settings_service),
        dashboard_service=DashboardService(employees_repo, attendance_repo, financials_repo, settings_service),
    )


def build_container(*, db_config: Mapping[str, Any], default_project_id: str = DEFAULT_PROJECT_ID) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return wire_services(
        projects_repo=MySQLProjectRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        financials_repo=MySQLFinancialRepository(conn),
        notes_repo=MySQLNoteRepository(conn),
        default_project_id=default_project_id,
    )
