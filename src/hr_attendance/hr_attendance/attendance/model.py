from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import List, Optional

from ..common.datetime_utils import parse_iso_date, parse_iso_datetime, to_iso
from ..core.enums import AttendanceStatus


@dataclass
class Session:
    """One continuous presence interval. ``check_out`` is None while open."""

    check_in: datetime
    check_out: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.check_out is None

    @property
    def duration_ms(self) -> int:
        if self.check_in is None or self.check_out is None:
            return 0
        return (self.check_out - self.check_in) // timedelta(milliseconds=1)

    def to_dict(self) -> dict:
        return {"checkIn": to_iso(self.check_in), "checkOut": to_iso(self.check_out)}

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        return cls(
            check_in=parse_iso_datetime(data.get("checkIn")),
            check_out=parse_iso_datetime(data.get("checkOut")),
        )


@dataclass
class DailyRecord:
    """Domain entity: all sessions of one employee on one calendar day."""

    id: str
    employee_id: str
    date: date
    sessions: List[Session] = field(default_factory=list)
    status: AttendanceStatus = AttendanceStatus.PRESENT
    last_updated: Optional[datetime] = None

    def open_session(self) -> Optional[Session]:
        for s in self.sessions:
            if s.is_open:
                return s
        return None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "date": self.date.isoformat(),
            "sessions": [s.to_dict() for s in self.sessions],
            "status": self.status.value,
            "lastUpdated": to_iso(self.last_updated),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DailyRecord":
        return cls(
            id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            date=parse_iso_date(data["date"]),
            sessions=[Session.from_dict(s) for s in data.get("sessions") or []],
            status=AttendanceStatus(data.get("status", AttendanceStatus.PRESENT.value)),
            last_updated=parse_iso_datetime(data.get("lastUpdated")),
        )


@dataclass(frozen=True)
class AttendanceView:
    """Read-model derived from a DailyRecord on every read. Never persisted."""

    id: str
    employee_id: str
    date: date
    entry: str
    exit: str
    work_hours: str
    work_hours_ms: int
    status: AttendanceStatus
    session_count: int
    is_open: bool

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "date": self.date.isoformat(),
            "entry": self.entry,
            "exit": self.exit,
            "work_hours": self.work_hours,
            "work_hours_ms": self.work_hours_ms,
            "status": self.status.value,
            "session_count": self.session_count,
            "is_open": self.is_open,
        }
