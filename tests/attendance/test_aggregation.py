from __future__ import annotations

import itertools
from datetime import date, datetime, timedelta

from src.hr_attendance.hr_attendance.attendance.aggregation import (
    calculate_net_ms,
    classify,
    format_duration,
    to_view,
)
from src.hr_attendance.hr_attendance.attendance.model import DailyRecord, Session
from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus

DAY = date(2026, 2, 2)


def at(hour: int, minute: int = 0, second: int = 0) -> datetime:
    return datetime(2026, 2, 2, hour, minute, second)


def record(sessions, status=AttendanceStatus.PRESENT) -> DailyRecord:
    return DailyRecord(id="r1", employee_id="E1", date=DAY, sessions=list(sessions), status=status)


def test_net_ms_is_order_independent():
    sessions = [
        Session(at(9), at(12)),
        Session(at(13), at(15, 30)),
        Session(at(16), at(18, 10)),
    ]
    expected = calculate_net_ms(sessions)

    for perm in itertools.permutations(sessions):
        assert calculate_net_ms(list(perm)) == expected
    assert expected == int(timedelta(hours=7, minutes=40).total_seconds() * 1000)


def test_open_session_contributes_nothing():
    sessions = [Session(at(9), at(12)), Session(at(13), None)]
    assert calculate_net_ms(sessions) == 3 * 3_600_000


def test_format_duration():
    assert format_duration(0) == "--"
    assert format_duration(-5) == "--"
    assert format_duration(59_999) == "0h 0m"
    assert format_duration((9 * 60 + 10) * 60_000) == "9h 10m"


def test_no_sessions_with_default_status_is_absent():
    assert classify(0, False, AttendanceStatus.PRESENT) == AttendanceStatus.ABSENT
    assert to_view(record([])).status == AttendanceStatus.ABSENT


def test_exactly_eight_hours_is_present():
    view = to_view(record([Session(at(9), at(17))]))
    assert view.status == AttendanceStatus.PRESENT


def test_one_second_short_of_eight_hours_is_partial():
    view = to_view(record([Session(at(9), at(16, 59, 59))]))
    assert view.status == AttendanceStatus.PARTIAL
    assert view.work_hours == "7h 59m"


def test_leave_is_preserved_even_with_sessions():
    view = to_view(record([Session(at(9), at(18))], status=AttendanceStatus.LEAVE))
    assert view.status == AttendanceStatus.LEAVE


def test_stored_partial_is_rederived_from_sessions():
    view = to_view(record([Session(at(8), at(17))], status=AttendanceStatus.PARTIAL))
    assert view.status == AttendanceStatus.PRESENT


def test_full_day_scenario():
    view = to_view(record([Session(at(9, 5), at(18, 15))]))

    assert view.entry == "09:05"
    assert view.exit == "18:15"
    assert view.work_hours == "9h 10m"
    assert view.status == AttendanceStatus.PRESENT


def test_half_day_scenario():
    view = to_view(record([Session(at(9), at(13, 30))]))

    assert view.work_hours == "4h 30m"
    assert view.status == AttendanceStatus.PARTIAL


def test_entry_exit_use_chronological_order():
    # stored out of order
    view = to_view(record([Session(at(13), at(18)), Session(at(9), at(12))]))

    assert view.entry == "09:00"
    assert view.exit == "18:00"
    assert view.session_count == 2
    assert view.status == AttendanceStatus.PRESENT


def test_open_last_session_has_placeholder_exit():
    view = to_view(record([Session(at(9), at(12)), Session(at(13), None)]))

    assert view.entry == "09:00"
    assert view.exit == "--:--"
    assert view.is_open is True
    assert view.work_hours == "3h 0m"


def test_empty_record_placeholders():
    view = to_view(record([], status=AttendanceStatus.ABSENT))

    assert view.entry == "--:--"
    assert view.exit == "--:--"
    assert view.work_hours == "--"
    assert view.work_hours_ms == 0


def test_duration_floors_sub_millisecond_remainders():
    start = datetime(2026, 2, 2, 9, 0, 0, 999)
    session = Session(start, start + timedelta(hours=8, microseconds=-1))

    assert session.duration_ms == 28_799_999
    assert Session(start, start + timedelta(milliseconds=291)).duration_ms == 291
    assert to_view(record([session])).status == AttendanceStatus.PARTIAL
