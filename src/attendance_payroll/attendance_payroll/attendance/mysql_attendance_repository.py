from __future__ import annotations

from typing import Iterable, Mapping

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceLedger
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_ledger(self, project_id: str) -> AttendanceLedger:
        ledger: dict[str, dict[str, str]] = {}
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, date_key, cell_value FROM attendance_cells WHERE project_id=%s",
                (project_id,),
            )
            for r in fetchall(cur):
                ledger.setdefault(str(r["employee_id"]), {})[r["date_key"]] = r["cell_value"]
        return ledger

    def get_cells(self, project_id: str, employee_id: str) -> Mapping[str, str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT date_key, cell_value
                FROM attendance_cells
                WHERE project_id=%s AND employee_id=%s
                """,
                (project_id, employee_id),
            )
            return {r["date_key"]: r["cell_value"] for r in fetchall(cur)}

    def upsert_cells(self, project_id: str, employee_id: str, cells: Mapping[str, str]) -> None:
        if not cells:
            return
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendance_cells(project_id, employee_id, date_key, cell_value)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE cell_value=VALUES(cell_value)
                """,
                [(project_id, employee_id, k, v) for k, v in cells.items()],
            )

    def delete_cells(self, project_id: str, employee_id: str, date_keys: Iterable[str]) -> None:
        keys = list(date_keys)
        if not keys:
            return
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                "DELETE FROM attendance_cells WHERE project_id=%s AND employee_id=%s AND date_key=%s",
                [(project_id, employee_id, k) for k in keys],
            )

    def delete_for_employee(self, project_id: str, employee_id: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM attendance_cells WHERE project_id=%s AND employee_id=%s",
                (project_id, employee_id),
            )

    def delete_for_project(self, project_id: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_cells WHERE project_id=%s", (project_id,))
