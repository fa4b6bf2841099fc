from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeDirectory(Protocol):
    def list_reportable(self) -> Sequence[Employee]:
        """Active employees, management excluded, ordered by entity/location/name."""
        raise NotImplementedError
