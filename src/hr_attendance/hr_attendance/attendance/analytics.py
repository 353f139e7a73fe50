from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Sequence

from ..core.constants import MS_PER_HOUR, TREND_DAYS
from ..core.enums import AttendanceStatus
from .aggregation import format_duration
from .model import AttendanceView


@dataclass(frozen=True)
class RecordFilter:
    search: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[AttendanceStatus] = None
    min_hours: Optional[float] = None

    def matches(self, v: AttendanceView) -> bool:
        term = (self.search or "").strip().lower()
        if term and not (
            term in v.employee_id.lower() or term in v.date.isoformat() or term in v.status.value.lower()
        ):
            return False
        if self.start_date and v.date < self.start_date:
            return False
        if self.end_date and v.date > self.end_date:
            return False
        if self.status and v.status != self.status:
            return False
        if self.min_hours is not None and v.work_hours_ms / MS_PER_HOUR < self.min_hours:
            return False
        return True


@dataclass(frozen=True)
class TrendPoint:
    label: str
    hours: float


@dataclass(frozen=True)
class AttendanceSummary:
    total_ms: int
    average_ms: int
    status_counts: Dict[str, int]
    presence_rate: float
    trend: List[TrendPoint] = field(default_factory=list)

    @property
    def total_hours(self) -> str:
        return format_duration(self.total_ms)

    @property
    def average_hours(self) -> str:
        return format_duration(self.average_ms)

    def to_dict(self) -> dict:
        return {
            "total_hours": self.total_hours,
            "average_hours": self.average_hours,
            "total_ms": self.total_ms,
            "average_ms": self.average_ms,
            "status_counts": dict(self.status_counts),
            "presence_rate": self.presence_rate,
            "trend": [{"label": p.label, "hours": p.hours} for p in self.trend],
        }


def filter_views(views: Sequence[AttendanceView], flt: RecordFilter) -> List[AttendanceView]:
    return [v for v in views if flt.matches(v)]


def summarize(views: Sequence[AttendanceView]) -> Optional[AttendanceSummary]:
    """Aggregate figures over views sorted date-descending.

    The average only counts worked days (not Absent/Leave); with no worked
    days it is 0.
    """
    if not views:
        return None

    total_ms = sum(v.work_hours_ms for v in views)
    worked_days = sum(1 for v in views if not v.status.is_administrative)
    average_ms = total_ms // worked_days if worked_days else 0

    counts = Counter(v.status.value for v in views)
    presence_rate = round(counts.get(AttendanceStatus.PRESENT.value, 0) / len(views) * 100, 1)

    chronological = list(reversed(views))[-TREND_DAYS:]
    trend = [
        TrendPoint(label=v.date.strftime("%m/%d"), hours=round(v.work_hours_ms / MS_PER_HOUR, 1))
        for v in chronological
    ]

    return AttendanceSummary(
        total_ms=total_ms,
        average_ms=average_ms,
        status_counts=dict(counts),
        presence_rate=presence_rate,
        trend=trend,
    )


def present_streak(views: Sequence[AttendanceView]) -> int:
    """Consecutive Present days counting back from the latest record."""
    count = 0
    for v in sorted(views, key=lambda x: x.date, reverse=True):
        if v.status != AttendanceStatus.PRESENT:
            break
        count += 1
    return count
