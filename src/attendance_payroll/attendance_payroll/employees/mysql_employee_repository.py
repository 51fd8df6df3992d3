from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_float
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, last_name, first_name, position, monthly_salary, is_archived, national_id,
    base_salary, housing_allowance, child_allowance, other_benefits, settlement_date
"""


def _row_to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=str(row["employee_id"]),
        last_name=row["last_name"],
        first_name=row["first_name"],
        position=row.get("position") or "",
        monthly_salary=to_float(row.get("monthly_salary")) or 0.0,
        is_archived=bool(row.get("is_archived")),
        national_id=row.get("national_id"),
        base_salary=to_float(row.get("base_salary")),
        housing_allowance=to_float(row.get("housing_allowance")),
        child_allowance=to_float(row.get("child_allowance")),
        other_benefits=to_float(row.get("other_benefits")),
        settlement_date=row.get("settlement_date"),
    )


def _params(employee: Employee) -> tuple:
    return (
        employee.last_name,
        employee.first_name,
        employee.position,
        employee.monthly_salary,
        int(employee.is_archived),
        employee.national_id,
        employee.base_salary,
        employee.housing_allowance,
        employee.child_allowance,
        employee.other_benefits,
        employee.settlement_date,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_project(self, project_id: str) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE project_id=%s ORDER BY sort_order",
                (project_id,),
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def get(self, project_id: str, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE project_id=%s AND employee_id=%s",
                (project_id, employee_id),
            )
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def add(self, project_id: str, employee: Employee) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(
                    project_id, employee_id, last_name, first_name, position, monthly_salary, is_archived,
                    national_id, base_salary, housing_allowance, child_allowance, other_benefits, settlement_date
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (project_id, employee.employee_id) + _params(employee),
            )

    def update(self, project_id: str, employee: Employee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET last_name=%s, first_name=%s, position=%s, monthly_salary=%s, is_archived=%s,
                    national_id=%s, base_salary=%s, housing_allowance=%s, child_allowance=%s,
                    other_benefits=%s, settlement_date=%s
                WHERE project_id=%s AND employee_id=%s
                """,
                _params(employee) + (project_id, employee.employee_id),
            )
            return cur.rowcount > 0

    def delete(self, project_id: str, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM employees WHERE project_id=%s AND employee_id=%s",
                (project_id, employee_id),
            )
            return cur.rowcount > 0

    def delete_for_project(self, project_id: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE project_id=%s", (project_id,))
