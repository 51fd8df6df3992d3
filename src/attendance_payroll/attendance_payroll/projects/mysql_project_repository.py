from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Project
from .repository import ProjectRepository


def _row_to_project(row: dict) -> Project:
    return Project(project_id=str(row["project_id"]), name=row["name"])


class MySQLProjectRepository(ProjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Project]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT project_id, name FROM projects ORDER BY sort_order")
            return [_row_to_project(r) for r in fetchall(cur)]

    def get(self, project_id: str) -> Optional[Project]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT project_id, name FROM projects WHERE project_id=%s", (project_id,))
            row = fetchone(cur)
            return _row_to_project(row) if row else None

    def add(self, project: Project) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO projects(project_id, name) VALUES(%s,%s)",
                (project.project_id, project.name),
            )

    def rename(self, project_id: str, name: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE projects SET name=%s WHERE project_id=%s", (name, project_id))
            return cur.rowcount > 0

    def delete(self, project_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM projects WHERE project_id=%s", (project_id,))
            return cur.rowcount > 0
