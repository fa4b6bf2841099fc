from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Read-model of the employee directory used for reporting."""

    user_id: int
    full_name: str
    email: str
    role: Role = Role.EMPLOYEE
    employee_code: Optional[str] = None
    entity_name: Optional[str] = None
    location_name: Optional[str] = None
    dept_name: Optional[str] = None
    is_active: bool = True
