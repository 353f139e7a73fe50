from __future__ import annotations

from datetime import datetime

import pytest

from src.hr_attendance.hr_attendance.attendance.service import AttendanceService
from src.hr_attendance.hr_attendance.attendance.store import AttendanceStore
from src.hr_attendance.hr_attendance.employees.service import ProfileService
from src.hr_attendance.hr_attendance.employees.store import AuditLogStore, EmployeeStore
from src.hr_attendance.hr_attendance.storage.memory import InMemoryStorage


@pytest.fixture
def fixed_now() -> datetime:
    # Monday
    return datetime(2026, 2, 2, 9, 5, 0)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def attendance_store(storage, fixed_now) -> AttendanceStore:
    # Empty roster: seeding runs but produces no history
    return AttendanceStore(storage, roster=[], clock=lambda: fixed_now)


@pytest.fixture
def attendance_service(attendance_store, fixed_now) -> AttendanceService:
    return AttendanceService(attendance_store, clock=lambda: fixed_now)


@pytest.fixture
def profile_service(storage, fixed_now) -> ProfileService:
    return ProfileService(EmployeeStore(storage), AuditLogStore(storage), clock=lambda: fixed_now)
