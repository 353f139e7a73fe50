from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .attendance.store import AttendanceStore
from .employees.service import ProfileService
from .employees.store import AuditLogStore, EmployeeStore
from .leaves.service import LeaveService
from .leaves.store import LeaveStore
from .storage.base import KeyValueStorage
from .storage.json_file import JsonFileStorage
from .storage.memory import InMemoryStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage

    attendance_store: AttendanceStore
    employee_store: EmployeeStore
    audit_store: AuditLogStore
    leave_store: LeaveStore

    attendance_service: AttendanceService
    profile_service: ProfileService
    leave_service: LeaveService


def build_storage(settings) -> KeyValueStorage:
    backend = str(getattr(settings, "STORAGE_BACKEND", "json")).lower()
    if backend == "memory":
        return InMemoryStorage()
    if backend == "json":
        return JsonFileStorage(getattr(settings, "DATA_DIR", "data"))
    if backend == "mysql":
        from .storage.bootstrap import ensure_kv_table
        from .storage.connection import DBConfig, DatabaseConnection
        from .storage.mysql_storage import MySQLKeyValueStorage

        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        ensure_kv_table(conn)
        return MySQLKeyValueStorage(conn)
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def build_container(*, storage: KeyValueStorage, random_seed: Optional[int] = None) -> Container:
    employee_store = EmployeeStore(storage)
    audit_store = AuditLogStore(storage)
    leave_store = LeaveStore(storage)

    profile_service = ProfileService(employee_store, audit_store)
    roster = profile_service.roster_ids()

    attendance_store = AttendanceStore(storage, roster=roster, rng=random.Random(random_seed))
    attendance_service = AttendanceService(attendance_store)
    leave_service = LeaveService(leave_store, profile_service)

    logger.debug("Container ready (%s, %d employees)", type(storage).__name__, len(roster))

    return Container(
        storage=storage,
        attendance_store=attendance_store,
        employee_store=employee_store,
        audit_store=audit_store,
        leave_store=leave_store,
        attendance_service=attendance_service,
        profile_service=profile_service,
        leave_service=leave_service,
    )
