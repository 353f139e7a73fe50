from __future__ import annotations

import copy
import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

from ..core.constants import AUDIT_LOG_KEY, EMPLOYEES_DB_KEY
from ..storage.base import KeyValueStorage
from ..storage.table import JsonTableStore
from .model import EmployeeProfile
from .roster import DEMO_EMPLOYEES

logger = logging.getLogger(__name__)


class EmployeeStore(JsonTableStore):
    """Employee directory. An empty store is initialized with ``initial`` rows."""

    def __init__(self, storage: KeyValueStorage, *, initial: Optional[Sequence[dict]] = None):
        super().__init__(storage, key=EMPLOYEES_DB_KEY, signal_name="profile_updated")
        self._initial = list(DEMO_EMPLOYEES if initial is None else initial)

    def load(self) -> List[EmployeeProfile]:
        with self._lock:
            rows = self._read_rows()
            if rows is None:
                rows = copy.deepcopy(self._initial)
                self._write_rows(rows)
                logger.info("Initialized employee directory with %d profiles", len(rows))
            return [EmployeeProfile.from_dict(r) for r in rows]

    @contextmanager
    def transaction(self) -> Iterator[List[EmployeeProfile]]:
        """Read-mutate-write under the store lock.

        Nothing is written when the block raises or leaves the list unchanged.
        """
        with self._lock:
            profiles = self.load()
            before = [p.to_dict() for p in profiles]
            yield profiles
            rows = [p.to_dict() for p in profiles]
            if rows == before:
                return
            self._write_rows(rows)
        self.emit()


class AuditLogStore(JsonTableStore):
    """Append-only list of profile change entries."""

    def __init__(self, storage: KeyValueStorage):
        super().__init__(storage, key=AUDIT_LOG_KEY, signal_name="audit_update")

    def load(self) -> List[dict]:
        with self._lock:
            return self._read_rows() or []

    def append(self, entry: dict) -> None:
        with self._lock:
            rows = self._read_rows() or []
            rows.append(entry)
            self._write_rows(rows)
        self.emit()
