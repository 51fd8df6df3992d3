from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_float
from .model import NO_FINANCIALS, FinancialData, MonthlyFinancials
from .repository import FinancialRepository


def _row_to_financials(row: dict) -> MonthlyFinancials:
    return MonthlyFinancials(
        advance=to_float(row.get("advance")),
        bonus=to_float(row.get("bonus")),
        deduction=to_float(row.get("deduction")),
    ).cleaned()


class MySQLFinancialRepository(FinancialRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_project(self, project_id: str) -> FinancialData:
        data: dict[str, dict[int, dict[int, MonthlyFinancials]]] = {}
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, fin_year, fin_month, advance, bonus, deduction
                FROM monthly_financials
                WHERE project_id=%s
                """,
                (project_id,),
            )
            for r in fetchall(cur):
                years = data.setdefault(str(r["employee_id"]), {})
                years.setdefault(int(r["fin_year"]), {})[int(r["fin_month"])] = _row_to_financials(r)
        return data

    def get(self, project_id: str, employee_id: str, year: int, month: int) -> MonthlyFinancials:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT advance, bonus, deduction
                FROM monthly_financials
                WHERE project_id=%s AND employee_id=%s AND fin_year=%s AND fin_month=%s
                """,
                (project_id, employee_id, year, month),
            )
            row = fetchone(cur)
            return _row_to_financials(row) if row else NO_FINANCIALS

    def save(self, project_id: str, employee_id: str, year: int, month: int, financials: MonthlyFinancials) -> None:
        key = (project_id, employee_id, year, month)
        with db_cursor(self._conn_factory) as (_, cur):
            if financials.is_empty:
                cur.execute(
                    """
                    DELETE FROM monthly_financials
                    WHERE project_id=%s AND employee_id=%s AND fin_year=%s AND fin_month=%s
                    """,
                    key,
                )
                return

            cur.execute(
                """
                INSERT INTO monthly_financials(project_id, employee_id, fin_year, fin_month, advance, bonus, deduction)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE advance=VALUES(advance), bonus=VALUES(bonus), deduction=VALUES(deduction)
                """,
                key + (financials.advance, financials.bonus, financials.deduction),
            )

    def delete_for_employee(self, project_id: str, employee_id: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM monthly_financials WHERE project_id=%s AND employee_id=%s",
                (project_id, employee_id),
            )

    def delete_for_project(self, project_id: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM monthly_financials WHERE project_id=%s", (project_id,))
