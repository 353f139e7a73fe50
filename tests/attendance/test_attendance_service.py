from __future__ import annotations

import random
import threading
from datetime import datetime

import pytest

from src.hr_attendance.hr_attendance.attendance.service import AttendanceService
from src.hr_attendance.hr_attendance.attendance.store import AttendanceStore
from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus
from src.hr_attendance.hr_attendance.core.exceptions import (
    AlreadyCheckedIn,
    NoActiveShift,
    NoOpenSession,
    ValidationError,
)
from src.hr_attendance.hr_attendance.storage.memory import InMemoryStorage


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 2, 2, hour, minute)


def open_sessions(store: AttendanceStore):
    return [sum(1 for s in r.sessions if s.is_open) for r in store.load()]


def test_first_check_in_creates_one_record_with_one_open_session(attendance_service, attendance_store):
    view = attendance_service.check_in("E1", now=at(9, 5))

    records = attendance_store.load()
    assert len(records) == 1
    assert records[0].employee_id == "E1"
    assert records[0].status == AttendanceStatus.PRESENT
    assert len(records[0].sessions) == 1
    assert records[0].sessions[0].is_open
    assert view.is_open and view.entry == "09:05" and view.exit == "--:--"


def test_second_check_in_without_check_out_fails(attendance_service, attendance_store, storage):
    attendance_service.check_in("E1", now=at(9))
    before = storage.snapshot()

    with pytest.raises(AlreadyCheckedIn) as exc:
        attendance_service.check_in("E1", now=at(9, 30))

    assert str(exc.value) == "Already checked in"
    assert storage.snapshot() == before
    assert open_sessions(attendance_store) == [1]


def test_check_out_without_check_in_fails(attendance_service):
    with pytest.raises(NoActiveShift):
        attendance_service.check_out("E1", now=at(18))


def test_check_out_twice_fails(attendance_service):
    attendance_service.check_in("E1", now=at(9))
    attendance_service.check_out("E1", now=at(18))

    with pytest.raises(NoOpenSession):
        attendance_service.check_out("E1", now=at(18, 5))


def test_blank_employee_id_rejected(attendance_service):
    with pytest.raises(ValidationError):
        attendance_service.check_in("  ", now=at(9))


def test_full_day_end_to_end(attendance_service):
    attendance_service.check_in("E1", now=at(9, 5))
    attendance_service.check_out("E1", now=at(18, 15))

    view = attendance_service.records_for("E1")[0]
    assert (view.entry, view.exit, view.work_hours, view.status) == ("09:05", "18:15", "9h 10m", AttendanceStatus.PRESENT)


def test_half_day_end_to_end(attendance_service):
    attendance_service.check_in("E2", now=at(9))
    attendance_service.check_out("E2", now=at(13, 30))

    view = attendance_service.today_record("E2")
    assert view.work_hours == "4h 30m"
    assert view.status == AttendanceStatus.PARTIAL


def test_lunch_break_re_entry(attendance_service, attendance_store):
    attendance_service.check_in("E1", now=at(9))
    attendance_service.check_out("E1", now=at(12))
    assert open_sessions(attendance_store) == [0]

    attendance_service.check_in("E1", now=at(13))
    assert open_sessions(attendance_store) == [1]
    attendance_service.check_out("E1", now=at(18))

    view = attendance_service.today_record("E1")
    assert view.session_count == 2
    assert view.work_hours == "8h 0m"
    assert view.status == AttendanceStatus.PRESENT
    assert len(attendance_store.load()) == 1


def test_employees_are_independent(attendance_service):
    attendance_service.check_in("E1", now=at(9))
    attendance_service.check_in("E2", now=at(9, 1))

    assert {v.employee_id for v in attendance_service.all_records()} == {"E1", "E2"}


def test_today_record_none_before_check_in(attendance_service):
    assert attendance_service.today_record("E1") is None


def test_queries_sorted_newest_first(fixed_now):
    store = AttendanceStore(InMemoryStorage(), roster=["E1", "E2"], rng=random.Random(5), clock=lambda: fixed_now)
    svc = AttendanceService(store, clock=lambda: fixed_now)
    svc.check_in("E1", now=fixed_now)

    mine = svc.records_for("E1")
    dates = [v.date for v in mine]
    assert dates == sorted(dates, reverse=True)
    assert mine[0].date == fixed_now.date()
    assert all(v.employee_id == "E1" for v in mine)
    assert len(svc.all_records()) == len(mine) * 2 - 1


def test_subscribe_user_pushes_now_and_on_change(attendance_service):
    pushes = []
    unsubscribe = attendance_service.subscribe_user("E1", pushes.append)
    assert pushes == [[]]

    attendance_service.check_in("E1", now=at(9))
    assert len(pushes) == 2
    assert pushes[-1][0].is_open

    unsubscribe()
    attendance_service.check_out("E1", now=at(17))
    assert len(pushes) == 2


def test_subscribe_all_sees_every_employee(attendance_service):
    pushes = []
    attendance_service.subscribe_all(pushes.append)

    attendance_service.check_in("E1", now=at(9))
    attendance_service.check_in("E2", now=at(9))

    assert len(pushes) == 3
    assert len(pushes[-1]) == 2


def test_failed_mutation_does_not_notify(attendance_service):
    pushes = []
    attendance_service.subscribe_all(pushes.append)

    with pytest.raises(NoActiveShift):
        attendance_service.check_out("E1", now=at(18))

    assert len(pushes) == 1


def test_failing_subscriber_does_not_break_check_in(attendance_service, attendance_store):
    calls = []

    def broken(sender, **kw):
        raise RuntimeError("listener down")

    attendance_store.subscribe(broken)
    attendance_store.subscribe(lambda sender, **kw: calls.append(kw["source"]))

    view = attendance_service.check_in("E1", now=at(9))

    assert view.is_open
    assert calls == ["local"]
    assert open_sessions(attendance_store) == [1]


def test_concurrent_check_ins_open_one_session(attendance_service, attendance_store):
    workers = 8
    barrier = threading.Barrier(workers)
    succeeded, rejected = [], []

    def worker():
        barrier.wait()
        try:
            attendance_service.check_in("E1", now=at(9))
            succeeded.append(1)
        except AlreadyCheckedIn:
            rejected.append(1)

    threads = [threading.Thread(target=worker) for _ in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(succeeded) == 1
    assert len(rejected) == workers - 1
    assert open_sessions(attendance_store) == [1]
