from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date
from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    id: str
    employee_id: str
    employee_name: str
    type: LeaveType
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus
    applied_date: date
    manager_comment: Optional[str] = None
    decided_by: Optional[str] = None

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "type": self.type.value,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "reason": self.reason,
            "status": self.status.value,
            "appliedDate": self.applied_date.isoformat(),
            "managerComment": self.manager_comment,
            "decidedBy": self.decided_by,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LeaveRequest":
        return cls(
            id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            employee_name=str(data.get("employeeName", "")),
            type=LeaveType(data["type"]),
            start_date=parse_iso_date(data["startDate"]),
            end_date=parse_iso_date(data["endDate"]),
            reason=str(data.get("reason", "")),
            status=LeaveStatus(data.get("status", LeaveStatus.PENDING.value)),
            applied_date=parse_iso_date(data["appliedDate"]),
            manager_comment=data.get("managerComment"),
            decided_by=data.get("decidedBy"),
        )


@dataclass(frozen=True)
class LeaveBalances:
    """Remaining paid/sick allowance and unpaid days taken (approved requests only)."""

    paid: int
    sick: int
    unpaid_taken: int

    def to_dict(self) -> dict:
        return {"paidBalance": self.paid, "sickBalance": self.sick, "unpaidTaken": self.unpaid_taken}
