from __future__ import annotations

from typing import Optional, Protocol

from .model import NoteLedger


class NoteRepository(Protocol):
    def get_for_project(self, project_id: str) -> NoteLedger:
        raise NotImplementedError

    def get(self, project_id: str, employee_id: str, date_key: str) -> Optional[str]:
        raise NotImplementedError

    def save(self, project_id: str, employee_id: str, date_key: str, text: str) -> None:
        raise NotImplementedError

    def delete(self, project_id: str, employee_id: str, date_key: str) -> None:
        raise NotImplementedError

    def delete_for_employee(self, project_id: str, employee_id: str) -> None:
        raise NotImplementedError

    def delete_for_project(self, project_id: str) -> None:
        raise NotImplementedError
