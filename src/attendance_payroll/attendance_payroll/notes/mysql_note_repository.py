from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import NoteLedger
from .repository import NoteRepository


class MySQLNoteRepository(NoteRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_project(self, project_id: str) -> NoteLedger:
        notes: dict[str, dict[str, str]] = {}
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, date_key, note_text FROM cell_notes WHERE project_id=%s",
                (project_id,),
            )
            for r in fetchall(cur):
                notes.setdefault(str(r["employee_id"]), {})[r["date_key"]] = r["note_text"]
        return notes

    def get(self, project_id: str, employee_id: str, date_key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT note_text
                FROM cell_notes
                WHERE project_id=%s AND employee_id=%s AND date_key=%s
                """,
                (project_id, employee_id, date_key),
            )
            row = fetchone(cur)
            return row["note_text"] if row else None

    def save(self, project_id: str, employee_id: str, date_key: str, text: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO cell_notes(project_id, employee_id, date_key, note_text)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE note_text=VALUES(note_text)
                """,
                (project_id, employee_id, date_key, text),
            )

    def delete(self, project_id: str, employee_id: str, date_key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM cell_notes WHERE project_id=%s AND employee_id=%s AND date_key=%s",
                (project_id, employee_id, date_key),
            )

    def delete_for_employee(self, project_id: str, employee_id: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM cell_notes WHERE project_id=%s AND employee_id=%s",
                (project_id, employee_id),
            )

    def delete_for_project(self, project_id: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM cell_notes WHERE project_id=%s", (project_id,))
