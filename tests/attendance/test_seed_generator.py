from __future__ import annotations

import random
from datetime import date, datetime, time, timedelta

from src.hr_attendance.hr_attendance.attendance.seed import generate_history
from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus

# Monday; the 30 preceding days (2026-01-03 .. 2026-02-01) hold 20 weekdays
TODAY = date(2026, 2, 2)


class ConstantRandom(random.Random):
    def __init__(self, value: float):
        super().__init__(0)
        self._value = value

    def random(self) -> float:
        return self._value


def test_weekdays_only_within_last_30_days():
    records = generate_history(["E1", "E2"], today=TODAY, rng=random.Random(1))

    assert len(records) == 20 * 2
    for r in records:
        assert r.date.weekday() < 5
        assert TODAY - timedelta(days=30) <= r.date < TODAY


def test_one_record_per_employee_and_day():
    records = generate_history(["E1", "E2", "E3"], today=TODAY, rng=random.Random(2))
    keys = [(r.employee_id, r.date) for r in records]

    assert len(keys) == len(set(keys))
    assert all(r.id == f"hist_{r.employee_id}_{r.date.isoformat()}" for r in records)


def test_worked_days_fall_in_time_windows():
    records = generate_history(["E1"], today=TODAY, rng=random.Random(3))
    worked = [r for r in records if r.sessions]

    assert worked
    for r in worked:
        assert len(r.sessions) == 1
        s = r.sessions[0]
        assert time(8, 45) <= s.check_in.time() <= time(9, 44)
        assert time(17, 30) <= s.check_out.time() <= time(18, 59)
        assert s.check_in.date() == s.check_out.date() == r.date
        expected = AttendanceStatus.PRESENT if s.duration_ms >= 8 * 3_600_000 else AttendanceStatus.PARTIAL
        assert r.status == expected
        assert r.last_updated == s.check_out


def test_low_draw_marks_absent():
    records = generate_history(["E1"], today=TODAY, rng=ConstantRandom(0.01))

    assert records
    assert all(r.status == AttendanceStatus.ABSENT and r.sessions == [] for r in records)
    assert all(r.last_updated == datetime.combine(r.date, time.min) for r in records)


def test_second_band_marks_leave():
    records = generate_history(["E1"], today=TODAY, rng=ConstantRandom(0.07))

    assert all(r.status == AttendanceStatus.LEAVE and r.sessions == [] for r in records)


def test_same_seed_same_history():
    a = generate_history(["E1", "E2"], today=TODAY, rng=random.Random(99))
    b = generate_history(["E1", "E2"], today=TODAY, rng=random.Random(99))

    assert [r.to_dict() for r in a] == [r.to_dict() for r in b]


def test_draw_at_absent_threshold_is_leave():
    records = generate_history(["E1"], today=TODAY, rng=ConstantRandom(0.05))

    assert all(r.status == AttendanceStatus.LEAVE and r.sessions == [] for r in records)


def test_draw_at_leave_threshold_is_a_worked_day():
    records = generate_history(["E1"], today=TODAY, rng=ConstantRandom(0.10))

    assert records
    for r in records:
        assert len(r.sessions) == 1
        assert r.status in (AttendanceStatus.PRESENT, AttendanceStatus.PARTIAL)
