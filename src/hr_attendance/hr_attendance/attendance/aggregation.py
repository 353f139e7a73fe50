"""Fold a day's sessions into the presentation view.

Everything here is a pure function of the record; the status of a day with
sessions is always re-derived, only Absent/Leave are taken from storage.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..common.datetime_utils import format_clock
from ..core.constants import DURATION_PLACEHOLDER, FULL_DAY_MS, MS_PER_HOUR, MS_PER_MINUTE
from ..core.enums import AttendanceStatus
from .model import AttendanceView, DailyRecord, Session


def calculate_net_ms(sessions: Iterable[Session]) -> int:
    """Sum of closed-session durations. Open sessions contribute nothing."""
    return sum(s.duration_ms for s in sessions if s.check_in and s.check_out)


def format_duration(ms: int) -> str:
    if ms <= 0:
        return DURATION_PLACEHOLDER
    hours = ms // MS_PER_HOUR
    minutes = (ms % MS_PER_HOUR) // MS_PER_MINUTE
    return f"{hours}h {minutes}m"


def classify(net_ms: int, has_sessions: bool, stored_status: Optional[AttendanceStatus] = None) -> AttendanceStatus:
    if stored_status is not None and AttendanceStatus(stored_status).is_administrative:
        return AttendanceStatus(stored_status)
    if not has_sessions:
        return AttendanceStatus.ABSENT
    if net_ms >= FULL_DAY_MS:
        return AttendanceStatus.PRESENT
    return AttendanceStatus.PARTIAL


def to_view(record: DailyRecord) -> AttendanceView:
    ordered = sorted(record.sessions, key=lambda s: s.check_in)
    first_in = ordered[0].check_in if ordered else None
    last_out = ordered[-1].check_out if ordered else None
    net_ms = calculate_net_ms(record.sessions)

    return AttendanceView(
        id=record.id,
        employee_id=record.employee_id,
        date=record.date,
        entry=format_clock(first_in),
        exit=format_clock(last_out),
        work_hours=format_duration(net_ms),
        work_hours_ms=net_ms,
        status=classify(net_ms, bool(record.sessions), record.status),
        session_count=len(record.sessions),
        is_open=record.open_session() is not None,
    )
