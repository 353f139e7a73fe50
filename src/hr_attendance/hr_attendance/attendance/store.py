from __future__ import annotations

import json
import logging
import random
from contextlib import contextmanager
from datetime import date, datetime
from typing import Callable, Iterator, List, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import ATTENDANCE_DB_KEY, ATTENDANCE_SEEDED_KEY
from ..storage.base import KeyValueStorage
from ..storage.table import JsonTableStore
from .model import DailyRecord
from .seed import generate_history

logger = logging.getLogger(__name__)


class AttendanceStore(JsonTableStore):
    """Session Store: owns every DailyRecord, keyed by (employee_id, date).

    On first load the seed generator runs once and the seeded flag is written;
    once the flag is set the generator never runs again.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        roster: Sequence[str] = (),
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        super().__init__(storage, key=ATTENDANCE_DB_KEY, signal_name="attendance_update")
        self._roster = list(roster)
        self._rng = rng or random.Random()
        self._clock = clock

    def is_seeded(self) -> bool:
        raw = self._storage.get(ATTENDANCE_SEEDED_KEY)
        return bool(raw and json.loads(raw) is True)

    def _mark_seeded(self) -> None:
        self._storage.set(ATTENDANCE_SEEDED_KEY, json.dumps(True))

    def seed(self, *, today: Optional[date] = None) -> bool:
        """Generate history if the store was never seeded. Returns True if it ran."""
        with self._lock:
            if self.is_seeded():
                return False
            if self._storage.get(ATTENDANCE_DB_KEY) is not None:
                # flag lost but history present: repair the flag, keep the data
                logger.warning("Seeded flag missing while %s holds data; restoring flag", ATTENDANCE_DB_KEY)
                self._mark_seeded()
                return False
            today = today or self._clock().date()
            history = generate_history(self._roster, today=today, rng=self._rng)
            self._write_rows([r.to_dict() for r in history])
            self._mark_seeded()
            logger.info("Seeded %d attendance records for %d employees", len(history), len(self._roster))
            return True

    def load(self) -> List[DailyRecord]:
        with self._lock:
            self.seed()
            rows = self._read_rows() or []
            return [DailyRecord.from_dict(r) for r in rows]

    def save(self, records: Sequence[DailyRecord], *, source: str = "local") -> None:
        with self._lock:
            self._write_rows([r.to_dict() for r in records])
        self.emit(source=source)

    @contextmanager
    def transaction(self) -> Iterator[List[DailyRecord]]:
        """Read-full-set, let the caller mutate it, write-full-set.

        Nothing is written when the block raises.
        """
        with self._lock:
            records = self.load()
            yield records
            self._write_rows([r.to_dict() for r in records])
        self.emit()

    @staticmethod
    def find(records: Sequence[DailyRecord], employee_id: str, day: date) -> Optional[DailyRecord]:
        for r in records:
            if r.employee_id == employee_id and r.date == day:
                return r
        return None
