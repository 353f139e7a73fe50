from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import parse_iso_datetime, to_iso
from ..core.enums import Role

# python attribute -> persisted key
FIELD_KEYS = {
    "id": "id",
    "employee_id": "employeeId",
    "full_name": "fullName",
    "email": "email",
    "role": "role",
    "position": "position",
    "department": "department",
    "join_date": "joinDate",
    "salary": "salary",
    "phone": "phone",
    "address": "address",
    "avatar": "avatar",
    "manager_name": "managerName",
    "updated_at": "updatedAt",
    "updated_by": "updatedBy",
}


@dataclass(frozen=True)
class EmployeeProfile:
    """Domain entity: an employee directory entry.

    Note: plain data object, no storage access.
    """

    id: str
    employee_id: str
    full_name: str
    email: str
    role: Role
    position: str
    department: str
    join_date: str
    salary: int
    phone: str = ""
    address: str = ""
    avatar: str = ""
    manager_name: Optional[str] = None
    updated_at: Optional[datetime] = None
    updated_by: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_dict(self) -> dict:
        out = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Role):
                value = value.value
            elif isinstance(value, datetime):
                value = to_iso(value)
            out[FIELD_KEYS[f.name]] = value
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "EmployeeProfile":
        kwargs = {attr: data[key] for attr, key in FIELD_KEYS.items() if key in data}
        kwargs["role"] = Role(kwargs.get("role", Role.EMPLOYEE.value))
        kwargs["salary"] = int(kwargs.get("salary") or 0)
        kwargs["updated_at"] = parse_iso_datetime(kwargs.get("updated_at"))
        return cls(**kwargs)


@dataclass(frozen=True)
class ProfileUpdateResult:
    message: str
    profile: EmployeeProfile
    changed_fields: dict
