from __future__ import annotations

import logging
import uuid
from collections import Counter
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Dict, List, Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_date_order, require_non_empty
from ..core.constants import ANNUAL_LEAVE_QUOTA, PAID_LEAVE_QUOTA, SICK_LEAVE_QUOTA
from ..core.enums import LeaveStatus, LeaveType
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..employees.service import ProfileService
from .model import LeaveBalances, LeaveRequest
from .store import LeaveStore

logger = logging.getLogger(__name__)


class LeaveService:
    """Use cases: apply for leave, admin approval, balances."""

    def __init__(
        self,
        leaves: LeaveStore,
        profiles: ProfileService,
        *,
        clock: Callable[[], datetime] = now_local,
        quota: int = ANNUAL_LEAVE_QUOTA,
    ):
        self._leaves = leaves
        self._profiles = profiles
        self._clock = clock
        self._quota = int(quota)

    def apply(
        self,
        employee_id: str,
        *,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        reason: str,
        today: Optional[date] = None,
    ) -> LeaveRequest:
        profile = self._profiles.get(employee_id)
        reason = require_non_empty(reason, "Reason")
        require_date_order(start_date, end_date)
        try:
            leave_type = LeaveType(leave_type)
        except ValueError:
            raise ValidationError(f"Invalid leave type: {leave_type!r}")

        req = LeaveRequest(
            id=f"lv_{uuid.uuid4().hex[:12]}",
            employee_id=profile.employee_id,
            employee_name=profile.full_name,
            type=leave_type,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            status=LeaveStatus.PENDING,
            applied_date=today or self._clock().date(),
        )
        with self._leaves.transaction() as requests:
            requests.append(req)

        logger.info("Leave %s requested by %s (%s, %d days)", req.id, req.employee_id, leave_type.value, req.days)
        return req

    def approve(self, actor_id: str, request_id: str, comment: str = "") -> LeaveRequest:
        return self._decide(actor_id, request_id, LeaveStatus.APPROVED, comment)

    def reject(self, actor_id: str, request_id: str, comment: str = "") -> LeaveRequest:
        return self._decide(actor_id, request_id, LeaveStatus.REJECTED, comment)

    def _decide(self, actor_id: str, request_id: str, status: LeaveStatus, comment: str) -> LeaveRequest:
        actor = self._profiles.get(actor_id)
        if not actor.is_admin:
            raise AuthorizationError("Only administrators can decide leave requests")

        with self._leaves.transaction() as requests:
            idx = next((i for i, r in enumerate(requests) if r.id == request_id), None)
            if idx is None:
                raise NotFoundError("Leave request not found")
            if requests[idx].status != LeaveStatus.PENDING:
                raise ValidationError("Leave request has already been processed")
            decided = replace(
                requests[idx],
                status=status,
                manager_comment=(comment or "").strip() or None,
                decided_by=actor.employee_id,
            )
            requests[idx] = decided

        logger.info("Leave %s %s by %s", request_id, status.value.lower(), actor.employee_id)
        return decided

    def list_all(self, status: Optional[LeaveStatus] = None) -> List[LeaveRequest]:
        items = [r for r in self._leaves.load() if status is None or r.status == status]
        return sorted(items, key=lambda r: (r.applied_date, r.start_date), reverse=True)

    def list_for(self, employee_id: str) -> List[LeaveRequest]:
        return [r for r in self.list_all() if r.employee_id == employee_id]

    def balance(self, employee_id: str) -> int:
        approved = [r for r in self.list_for(employee_id) if r.status == LeaveStatus.APPROVED]
        return max(0, self._quota - len(approved))

    def breakdown(self, employee_id: str) -> Dict[str, int]:
        approved = (r for r in self.list_for(employee_id) if r.status == LeaveStatus.APPROVED)
        counts = Counter(r.type.value for r in approved)
        return {t.value: counts.get(t.value, 0) for t in LeaveType}

    def balances(self, employee_id: str) -> LeaveBalances:
        counts = self.breakdown(employee_id)
        return LeaveBalances(
            paid=max(0, PAID_LEAVE_QUOTA - counts[LeaveType.PAID.value]),
            sick=max(0, SICK_LEAVE_QUOTA - counts[LeaveType.SICK.value]),
            unpaid_taken=counts[LeaveType.UNPAID.value],
        )

    def pending_count(self, employee_id: Optional[str] = None) -> int:
        items = self.list_for(employee_id) if employee_id else self.list_all()
        return sum(1 for r in items if r.status == LeaveStatus.PENDING)
