from __future__ import annotations

from datetime import date, timedelta

from src.hr_attendance.hr_attendance.attendance.analytics import (
    RecordFilter,
    filter_views,
    present_streak,
    summarize,
)
from src.hr_attendance.hr_attendance.attendance.model import AttendanceView
from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus

HOUR = 3_600_000


def view(day: date, status: AttendanceStatus, hours: float = 0, employee_id: str = "EMP-101") -> AttendanceView:
    ms = int(hours * HOUR)
    return AttendanceView(
        id=f"{employee_id}-{day}",
        employee_id=employee_id,
        date=day,
        entry="09:00" if ms else "--:--",
        exit="18:00" if ms else "--:--",
        work_hours="",
        work_hours_ms=ms,
        status=status,
        session_count=1 if ms else 0,
        is_open=False,
    )


def test_summary_of_nothing_is_none():
    assert summarize([]) is None


def test_average_skips_absent_and_leave_days():
    views = [
        view(date(2026, 2, 4), AttendanceStatus.PRESENT, 9),
        view(date(2026, 2, 3), AttendanceStatus.LEAVE),
        view(date(2026, 2, 2), AttendanceStatus.PARTIAL, 5),
    ]
    s = summarize(views)

    assert s.total_hours == "14h 0m"
    assert s.average_hours == "7h 0m"
    assert s.status_counts == {"Present": 1, "Leave": 1, "Partial": 1}
    assert s.presence_rate == 33.3


def test_average_is_zero_when_no_worked_days():
    views = [view(date(2026, 2, 3), AttendanceStatus.LEAVE), view(date(2026, 2, 2), AttendanceStatus.ABSENT)]
    s = summarize(views)

    assert s.average_ms == 0
    assert s.average_hours == "--"
    assert s.presence_rate == 0.0


def test_trend_is_chronological_and_capped():
    start = date(2026, 1, 1)
    views = [view(start + timedelta(days=i), AttendanceStatus.PRESENT, 8.5) for i in range(20)]
    views.sort(key=lambda v: v.date, reverse=True)

    trend = summarize(views).trend

    assert len(trend) == 14
    assert trend[0].label == "01/07"
    assert trend[-1].label == "01/20"
    assert trend[-1].hours == 8.5


def test_filters_combine():
    views = [
        view(date(2026, 2, 4), AttendanceStatus.PRESENT, 9, "EMP-202"),
        view(date(2026, 2, 3), AttendanceStatus.PARTIAL, 4, "EMP-202"),
        view(date(2026, 2, 2), AttendanceStatus.PRESENT, 8, "EMP-303"),
    ]

    assert len(filter_views(views, RecordFilter(search="emp-202"))) == 2
    assert len(filter_views(views, RecordFilter(search="partial"))) == 1
    assert len(filter_views(views, RecordFilter(search="2026-02-02"))) == 1
    assert len(filter_views(views, RecordFilter(start_date=date(2026, 2, 3), end_date=date(2026, 2, 4)))) == 2
    assert len(filter_views(views, RecordFilter(status=AttendanceStatus.PRESENT, min_hours=8.5))) == 1
    assert filter_views(views, RecordFilter()) == views


def test_present_streak_counts_back_from_latest():
    views = [
        view(date(2026, 2, 2), AttendanceStatus.PARTIAL, 5),
        view(date(2026, 2, 4), AttendanceStatus.PRESENT, 9),
        view(date(2026, 2, 3), AttendanceStatus.PRESENT, 8),
    ]
    assert present_streak(views) == 2
    assert present_streak([]) == 0
