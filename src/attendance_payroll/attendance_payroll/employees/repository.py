from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_for_project(self, project_id: str) -> Sequence[Employee]:
        """Employees in insertion order (reports keep this order)."""
        raise NotImplementedError

    def get(self, project_id: str, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def add(self, project_id: str, employee: Employee) -> None:
        raise NotImplementedError

    def update(self, project_id: str, employee: Employee) -> bool:
        raise NotImplementedError

    def delete(self, project_id: str, employee_id: str) -> bool:
        raise NotImplementedError

    def delete_for_project(self, project_id: str) -> None:
        raise NotImplementedError
