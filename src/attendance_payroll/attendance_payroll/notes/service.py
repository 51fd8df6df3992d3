from __future__ import annotations

import logging

from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..jalali.converter import is_valid_date_key
from ..jalali.model import YearMonth
from .model import CellNote, NoteLedger
from .repository import NoteRepository

logger = logging.getLogger(__name__)


class NoteService:
    """Use case: free-text notes on attendance cells."""

    def __init__(self, notes: NoteRepository, employees: EmployeeRepository):
        self._notes = notes
        self._employees = employees

    def get(self, project_id: str, employee_id: str, date_key: str) -> CellNote:
        return CellNote(employee_id, date_key, self._notes.get(project_id, employee_id, date_key) or "")

    def set_note(self, project_id: str, employee_id: str, date_key: str, text: str) -> CellNote:
        """Store the trimmed text; blank text removes the note."""
        if not is_valid_date_key(date_key):
            raise ValidationError(f"Invalid date: {date_key!r}")
        if not self._employees.get(project_id, employee_id):
            raise NotFoundError("Employee not found")

        content = (text or "").strip()
        if content:
            self._notes.save(project_id, employee_id, date_key, content)
        else:
            self._notes.delete(project_id, employee_id, date_key)
        logger.debug("Note of %s on %s %s", employee_id, date_key, "saved" if content else "removed")
        return CellNote(employee_id, date_key, content)

    def month_notes(self, project_id: str, year_month: YearMonth) -> NoteLedger:
        prefix = year_month.key + "-"
        result: dict[str, dict[str, str]] = {}
        for employee_id, notes in self._notes.get_for_project(project_id).items():
            month = {k: v for k, v in notes.items() if k.startswith(prefix)}
            if month:
                result[employee_id] = month
        return result
