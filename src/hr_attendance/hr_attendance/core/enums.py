from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for permission checks."""

    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class AttendanceStatus(str, Enum):
    """Daily classification of a record."""

    PRESENT = "Present"
    PARTIAL = "Partial"
    ABSENT = "Absent"
    LEAVE = "Leave"

    @property
    def is_administrative(self) -> bool:
        return self in (AttendanceStatus.ABSENT, AttendanceStatus.LEAVE)


class LeaveType(str, Enum):
    PAID = "Paid"
    SICK = "Sick"
    UNPAID = "Unpaid"


class LeaveStatus(str, Enum):
    """Approval workflow state of a leave request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
