from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..common.datetime_utils import now_local, to_iso
from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import EmployeeProfile, ProfileUpdateResult
from .store import AuditLogStore, EmployeeStore

logger = logging.getLogger(__name__)

# Only an ADMIN may change these.
RESTRICTED_FIELDS = (
    "full_name",
    "email",
    "role",
    "department",
    "position",
    "salary",
    "employee_id",
    "join_date",
)
SELF_SERVICE_FIELDS = ("phone", "address", "avatar")
UPDATABLE_FIELDS = RESTRICTED_FIELDS + SELF_SERVICE_FIELDS + ("manager_name",)
CREATE_FIELDS = tuple(f for f in UPDATABLE_FIELDS if f not in ("employee_id", "avatar"))

AVATAR_URL = "https://images.unsplash.com/photo-{n}?auto=format&fit=crop&q=80&w=200"


class ProfileService:
    """Use cases: employee directory and role-checked profile edits."""

    def __init__(
        self,
        employees: EmployeeStore,
        audit: AuditLogStore,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._employees = employees
        self._audit = audit
        self._clock = clock

    def list_employees(self) -> List[EmployeeProfile]:
        return self._employees.load()

    def find(self, ref: str) -> Optional[EmployeeProfile]:
        """Look up by internal id or employee id."""
        for p in self._employees.load():
            if p.id == ref or p.employee_id == ref:
                return p
        return None

    def get(self, ref: str) -> EmployeeProfile:
        profile = self.find(ref)
        if not profile:
            raise NotFoundError("Employee not found.")
        return profile

    def roster_ids(self) -> List[str]:
        return [p.employee_id for p in self._employees.load()]

    def audit_logs(self, employee_id: Optional[str] = None) -> List[dict]:
        logs = self._audit.load()
        if employee_id:
            logs = [entry for entry in logs if entry.get("employeeId") == employee_id]
        return logs

    def search(self, term: str = "", department: str = "", role: Optional[str] = None) -> List[EmployeeProfile]:
        """Directory filter: ``term`` matches name, email, position or department."""
        needle = (term or "").strip().lower()
        wanted_role = self._coerce("role", role) if role else None
        out = []
        for p in self._employees.load():
            haystack = (p.full_name, p.email, p.position, p.department)
            if needle and not any(needle in value.lower() for value in haystack):
                continue
            if department and p.department != department:
                continue
            if wanted_role and p.role != wanted_role:
                continue
            out.append(p)
        return out

    def departments(self) -> List[str]:
        return list(dict.fromkeys(p.department for p in self._employees.load()))

    def _require_admin(self, actor_id: str, action: str) -> EmployeeProfile:
        actor = self.get(actor_id)
        if not actor.is_admin:
            raise AuthorizationError(f"Only administrators can {action}.")
        return actor

    def add_employee(self, actor_id: str, data: Mapping[str, Any]) -> EmployeeProfile:
        actor = self._require_admin(actor_id, "add employees")

        unknown = sorted(set(data) - set(CREATE_FIELDS))
        if unknown:
            raise ValidationError(f"Unknown profile fields: {', '.join(unknown)}")
        values = {k: self._coerce(k, v) for k, v in data.items() if v is not None}
        for name in ("position", "department"):
            values[name] = require_non_empty(values.get(name), name)
        for name in ("full_name", "email"):
            values[name] = self._coerce(name, values.get(name))
        values.setdefault("role", Role.EMPLOYEE)
        values.setdefault("salary", 0)
        values.setdefault("join_date", self._clock().date().isoformat())

        with self._employees.transaction() as profiles:
            n = len(profiles)
            profile = EmployeeProfile(
                id=_next_free(str, n + 1, {p.id for p in profiles}),
                employee_id=_next_free(lambda i: f"EMP-{i}", 100 + n + 1, {p.employee_id for p in profiles}),
                avatar=AVATAR_URL.format(n=1500000000000 + n),
                updated_at=self._clock(),
                updated_by=actor.id,
                **values,
            )
            profiles.insert(0, profile)

        logger.info("Employee %s added by %s", profile.employee_id, actor.employee_id)
        return profile

    def remove_employee(self, actor_id: str, ref: str) -> EmployeeProfile:
        actor = self._require_admin(actor_id, "remove employees")
        with self._employees.transaction() as profiles:
            idx = next((i for i, p in enumerate(profiles) if ref in (p.id, p.employee_id)), None)
            if idx is None:
                raise NotFoundError("Employee not found.")
            removed = profiles.pop(idx)

        logger.info("Employee %s removed by %s", removed.employee_id, actor.employee_id)
        return removed

    @staticmethod
    def _coerce(field_name: str, value: Any) -> Any:
        if field_name == "role":
            try:
                return Role(value)
            except ValueError:
                raise ValidationError(f"Invalid role: {value!r}")
        if field_name == "salary":
            try:
                return int(value)
            except (TypeError, ValueError):
                raise ValidationError("Salary must be a whole number")
        if field_name in ("full_name", "email", "employee_id"):
            return require_non_empty(value, field_name)
        return value

    @staticmethod
    def _diff(original: EmployeeProfile, cleaned: Mapping[str, Any], allowed) -> Dict[str, dict]:
        changed: Dict[str, dict] = {}
        for key in allowed:
            if key in cleaned and cleaned[key] != getattr(original, key):
                old = getattr(original, key)
                new = cleaned[key]
                changed[key] = {
                    "old": old.value if isinstance(old, Role) else old,
                    "new": new.value if isinstance(new, Role) else new,
                }
        return changed

    def update_profile(self, actor_id: str, target_id: str, updates: Mapping[str, Any]) -> ProfileUpdateResult:
        unknown = sorted(set(updates) - set(UPDATABLE_FIELDS))
        if unknown:
            raise ValidationError(f"Unknown profile fields: {', '.join(unknown)}")
        cleaned = {k: self._coerce(k, v) for k, v in updates.items() if v is not None}

        now = self._clock()
        with self._employees.transaction() as profiles:
            actor = _lookup(profiles, actor_id)
            original = _lookup(profiles, target_id)
            idx = profiles.index(original)

            if not actor.is_admin:
                touched = [f for f in RESTRICTED_FIELDS if f in cleaned and cleaned[f] != getattr(original, f)]
                if touched:
                    raise AuthorizationError("You do not have permission to edit restricted fields.")

            changed = self._diff(original, cleaned, UPDATABLE_FIELDS if actor.is_admin else SELF_SERVICE_FIELDS)
            if not changed:
                return ProfileUpdateResult(message="No changes detected.", profile=original, changed_fields={})

            updated = replace(
                original,
                **{k: cleaned[k] for k in changed},
                updated_at=now,
                updated_by=actor.id,
            )
            profiles[idx] = updated
            # audit first: a failed audit write aborts the profile write
            self._audit.append(
                {
                    "id": f"log_{int(now.timestamp() * 1000)}",
                    "employeeId": original.employee_id,
                    "changedFields": changed,
                    "updatedBy": actor.id,
                    "timestamp": to_iso(now),
                }
            )

        logger.info("Profile %s updated by %s: %s", original.employee_id, actor.employee_id, ", ".join(changed))
        return ProfileUpdateResult(message="Profile updated successfully", profile=updated, changed_fields=changed)


def _lookup(profiles: List[EmployeeProfile], ref: str) -> EmployeeProfile:
    for p in profiles:
        if ref in (p.id, p.employee_id):
            return p
    raise NotFoundError("Employee not found.")


def _next_free(fmt: Callable[[int], str], start: int, taken) -> str:
    i = start
    while fmt(i) in taken:
        i += 1
    return fmt(i)
