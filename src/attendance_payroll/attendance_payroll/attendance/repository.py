from __future__ import annotations

from typing import Iterable, Mapping, Protocol

from .model import AttendanceLedger


class AttendanceRepository(Protocol):
    def get_ledger(self, project_id: str) -> AttendanceLedger:
        raise NotImplementedError

    def get_cells(self, project_id: str, employee_id: str) -> Mapping[str, str]:
        raise NotImplementedError

    def upsert_cells(self, project_id: str, employee_id: str, cells: Mapping[str, str]) -> None:
        raise NotImplementedError

    def delete_cells(self, project_id: str, employee_id: str, date_keys: Iterable[str]) -> None:
        raise NotImplementedError

    def delete_for_employee(self, project_id: str, employee_id: str) -> None:
        raise NotImplementedError

    def delete_for_project(self, project_id: str) -> None:
        raise NotImplementedError
