from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import RegularizationType, RequestStatus
from .model import Regularization


class RegularizationRepository(Protocol):
    def create(
        self,
        *,
        user_id: int,
        work_date: date,
        reg_type: RegularizationType,
        reason: str,
        requested_time: Optional[datetime],
    ) -> int:
        raise NotImplementedError

    def get(self, request_id: int) -> Optional[Regularization]:
        raise NotImplementedError

    def find_pending(self, user_id: int, work_date: date, reg_type: RegularizationType) -> Optional[Regularization]:
        raise NotImplementedError

    def list_for_user(
        self, user_id: int, *, status: Optional[RequestStatus] = None, limit: int = 50
    ) -> Sequence[Regularization]:
        """Newest first."""
        raise NotImplementedError

    def decide(
        self,
        *,
        request_id: int,
        status: RequestStatus,
        reviewer_id: int,
        review_note: Optional[str] = None,
    ) -> bool:
        """Move a PENDING request to ``status``; False when it was no longer pending."""
        raise NotImplementedError
