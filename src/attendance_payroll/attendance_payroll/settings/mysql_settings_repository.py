from __future__ import annotations

from typing import Optional

from ..core.enums import Currency, DayType, SalaryMode
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import CustomCode, ProjectSettings, SYSTEM_CODES, with_system_codes
from .repository import SettingsRepository

_SYSTEM_CHARS = {c.char for c in SYSTEM_CODES}
_SETTINGS_TABLES = ("holidays", "day_type_overrides", "custom_codes", "project_settings")


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, project_id: str) -> Optional[ProjectSettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT base_day_count, salary_mode, currency FROM project_settings WHERE project_id=%s",
                (project_id,),
            )
            row = fetchone(cur)
            if not row:
                return None

            cur.execute("SELECT date_key FROM holidays WHERE project_id=%s", (project_id,))
            holidays = frozenset(r["date_key"] for r in fetchall(cur))

            cur.execute("SELECT date_key, day_type FROM day_type_overrides WHERE project_id=%s", (project_id,))
            overrides = {r["date_key"]: DayType(r["day_type"]) for r in fetchall(cur)}

            cur.execute(
                "SELECT code_char, description, color FROM custom_codes WHERE project_id=%s ORDER BY sort_order",
                (project_id,),
            )
            codes = tuple(
                CustomCode(
                    char=r["code_char"],
                    description=r["description"],
                    color=r["color"],
                    is_system_code=r["code_char"] in _SYSTEM_CHARS,
                )
                for r in fetchall(cur)
            )

        return ProjectSettings(
            base_day_count=int(row["base_day_count"]),
            holidays=holidays,
            day_type_overrides=overrides,
            custom_codes=with_system_codes(codes),
            salary_mode=SalaryMode(row["salary_mode"]),
            currency=Currency(row["currency"]),
        )

    def save(self, project_id: str, settings: ProjectSettings) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO project_settings(project_id, base_day_count, salary_mode, currency)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    base_day_count=VALUES(base_day_count),
                    salary_mode=VALUES(salary_mode),
                    currency=VALUES(currency)
                """,
                (project_id, settings.base_day_count, settings.salary_mode.value, settings.currency.value),
            )

            cur.execute("DELETE FROM holidays WHERE project_id=%s", (project_id,))
            cur.executemany(
                "INSERT INTO holidays(project_id, date_key) VALUES(%s,%s)",
                [(project_id, k) for k in sorted(settings.holidays)],
            )

            cur.execute("DELETE FROM day_type_overrides WHERE project_id=%s", (project_id,))
            cur.executemany(
                "INSERT INTO day_type_overrides(project_id, date_key, day_type) VALUES(%s,%s,%s)",
                [(project_id, k, DayType(v).value) for k, v in sorted(settings.day_type_overrides.items())],
            )

            cur.execute("DELETE FROM custom_codes WHERE project_id=%s", (project_id,))
            cur.executemany(
                "INSERT INTO custom_codes(project_id, code_char, description, color) VALUES(%s,%s,%s,%s)",
                [(project_id, c.char, c.description, c.color) for c in settings.custom_codes],
            )

    def delete(self, project_id: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            for table in _SETTINGS_TABLES:
                cur.execute(f"DELETE FROM {table} WHERE project_id=%s", (project_id,))
