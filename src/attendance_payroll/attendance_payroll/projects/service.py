from __future__ import annotations

import logging
import uuid
from typing import Sequence

from ..attendance.repository import AttendanceRepository
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_PROJECT_ID, DEFAULT_PROJECT_NAME
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..financials.repository import FinancialRepository
from ..notes.repository import NoteRepository
from ..settings.repository import SettingsRepository
from .model import Project
from .repository import ProjectRepository

logger = logging.getLogger(__name__)


class ProjectService:
    """Use case: create, rename and remove projects.

    The default project always exists; it is created on first read and cannot
    be removed. Removing any other project deletes everything scoped to it.
    """

    def __init__(
        self,
        projects: ProjectRepository,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        settings: SettingsRepository,
        financials: FinancialRepository,
        notes: NoteRepository,
        *,
        default_project_id: str = DEFAULT_PROJECT_ID,
    ):
        self._projects = projects
        self._employees = employees
        self._attendance = attendance
        self._settings = settings
        self._financials = financials
        self._notes = notes
        self._default_project_id = default_project_id

    @property
    def default_project_id(self) -> str:
        return self._default_project_id

    def _ensure_default(self) -> None:
        if not self._projects.get(self._default_project_id):
            self._projects.add(Project(self._default_project_id, DEFAULT_PROJECT_NAME))
            logger.info("Created default project %s", self._default_project_id)

    def list_projects(self) -> Sequence[Project]:
        self._ensure_default()
        return list(self._projects.list_all())

    def get(self, project_id: str) -> Project:
        if project_id == self._default_project_id:
            self._ensure_default()
        project = self._projects.get(project_id)
        if not project:
            raise NotFoundError("Project not found")
        return project

    def add(self, name: str) -> Project:
        project = Project(project_id=uuid.uuid4().hex, name=require_non_empty(name, "Project name"))
        self._projects.add(project)
        logger.info("Added project %s", project.project_id)
        return project

    def rename(self, project_id: str, name: str) -> Project:
        name = require_non_empty(name, "Project name")
        self.get(project_id)
        self._projects.rename(project_id, name)
        return Project(project_id, name)

    def remove(self, project_id: str) -> None:
        if project_id == self._default_project_id:
            raise ValidationError("The default project cannot be removed")
        self.get(project_id)

        self._attendance.delete_for_project(project_id)
        self._financials.delete_for_project(project_id)
        self._notes.delete_for_project(project_id)
        self._settings.delete(project_id)
        self._employees.delete_for_project(project_id)
        self._projects.delete(project_id)
        logger.info("Removed project %s with all of its data", project_id)
