from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..attendance.repository import SessionRepository
from ..attendance.service import AttendanceService
from ..common.datetime_utils import ensure_aware, ist_date
from ..common.validators import require_non_empty
from ..core.constants import REGULARIZED_DEVICE
from ..core.enums import MANAGER_ROLES, REGULARIZED_SESSION_TYPES, RegularizationType, RequestStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import Regularization
from .repository import RegularizationRepository

logger = logging.getLogger(__name__)


def parse_regularization_type(value) -> RegularizationType:
    if isinstance(value, RegularizationType):
        return value
    try:
        return RegularizationType(str(value))
    except ValueError:
        raise ValidationError("Invalid regularization type")


class RegularizationService:
    """Attendance corrections requested by employees and reviewed by admins.

    Approving a missed check-in/out inserts the session at the requested time
    and rebuilds that day's summary from the full event list.
    """

    def __init__(
        self,
        requests: RegularizationRepository,
        sessions: SessionRepository,
        attendance: AttendanceService,
    ):
        self._requests = requests
        self._sessions = sessions
        self._attendance = attendance

    def submit(
        self,
        *,
        user_id: int,
        work_date: date,
        reg_type,
        reason: str,
        requested_time: Optional[datetime] = None,
    ) -> int:
        if not isinstance(work_date, date):
            raise ValidationError("Date is required")
        kind = parse_regularization_type(reg_type)
        reason = require_non_empty(reason, "Reason")

        if self._requests.find_pending(int(user_id), work_date, kind):
            raise ValidationError("A pending request already exists for this date and type")

        request_id = self._requests.create(
            user_id=int(user_id),
            work_date=work_date,
            reg_type=kind,
            reason=reason,
            requested_time=ensure_aware(requested_time) if requested_time else None,
        )
        logger.info("User %s requested %s regularization for %s", user_id, kind.value, work_date)
        return request_id

    def list_mine(self, *, user_id: int, status: Optional[RequestStatus] = None) -> Sequence[Regularization]:
        return self._requests.list_for_user(int(user_id), status=status)

    def review(
        self,
        *,
        current_role: Role,
        reviewer_id: int,
        request_id: int,
        action,
        review_note: str = "",
    ) -> Regularization:
        if current_role not in MANAGER_ROLES:
            raise AuthorizationError("You do not have permission to review regularizations")
        try:
            decision = RequestStatus(str(getattr(action, "value", action)))
        except ValueError:
            raise ValidationError("Invalid action")
        if decision == RequestStatus.PENDING:
            raise ValidationError("Invalid action")

        req = self._requests.get(int(request_id))
        if not req:
            raise NotFoundError("Regularization request not found")
        if req.status != RequestStatus.PENDING:
            raise ValidationError("Already reviewed")

        decided = self._requests.decide(
            request_id=req.request_id,
            status=decision,
            reviewer_id=int(reviewer_id),
            review_note=(review_note or "").strip() or None,
        )
        if not decided:
            raise ValidationError("Already reviewed")

        if decision == RequestStatus.APPROVED:
            self._apply(req)

        logger.info("Regularization %s %s by %s", req.request_id, decision.value.lower(), reviewer_id)
        return self._requests.get(req.request_id) or req

    def _apply(self, req: Regularization) -> None:
        session_type = REGULARIZED_SESSION_TYPES.get(req.reg_type)
        if session_type is None or req.requested_time is None:
            return

        timestamp = ensure_aware(req.requested_time)
        self._sessions.create(
            user_id=req.user_id,
            session_type=session_type,
            timestamp=timestamp,
            latitude=0.0,
            longitude=0.0,
            device_info=REGULARIZED_DEVICE,
        )
        self._attendance.recompute_day(req.user_id, ist_date(timestamp))
