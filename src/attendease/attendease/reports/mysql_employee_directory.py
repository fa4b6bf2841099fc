from __future__ import annotations

from typing import Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Employee
from .repository import EmployeeDirectory


class MySQLEmployeeDirectory(EmployeeDirectory):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_reportable(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, full_name, email, role, employee_code, entity_name, location_name, dept_name, is_active
                FROM employees
                WHERE is_active=1 AND role<>%s
                ORDER BY entity_name, location_name, full_name
                """,
                (Role.MANAGEMENT.value,),
            )
            return [
                Employee(
                    user_id=int(r["user_id"]),
                    full_name=r["full_name"],
                    email=r["email"],
                    role=Role(r["role"]),
                    employee_code=r.get("employee_code"),
                    entity_name=r.get("entity_name"),
                    location_name=r.get("location_name"),
                    dept_name=r.get("dept_name"),
                    is_active=bool(r["is_active"]),
                )
                for r in fetchall(cur)
            ]
