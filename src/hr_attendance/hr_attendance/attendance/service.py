from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, List, Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import AlreadyCheckedIn, NoActiveShift, NoOpenSession
from .aggregation import to_view
from .model import AttendanceView, DailyRecord, Session
from .store import AttendanceStore

logger = logging.getLogger(__name__)

ViewsCallback = Callable[[List[AttendanceView]], None]


class AttendanceService:
    """Use cases: check-in/check-out and the two record queries.

    Per employee per day the sessions form a two-state machine: no open
    session / one open session. ``check_in`` opens, ``check_out`` closes.
    """

    def __init__(self, store: AttendanceStore, *, clock: Callable[[], datetime] = now_local):
        self._store = store
        self._clock = clock

    def check_in(self, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceView:
        employee_id = require_non_empty(employee_id, "Employee ID")
        now = now or self._clock()
        today = now.date()

        with self._store.transaction() as records:
            record = self._store.find(records, employee_id, today)
            if record:
                if record.open_session() is not None:
                    raise AlreadyCheckedIn(employee_id)
                record.sessions.append(Session(check_in=now))
                record.last_updated = now
            else:
                record = DailyRecord(
                    id=f"att_{int(now.timestamp() * 1000)}_{employee_id}",
                    employee_id=employee_id,
                    date=today,
                    sessions=[Session(check_in=now)],
                    status=AttendanceStatus.PRESENT,
                    last_updated=now,
                )
                records.append(record)

        logger.info("Check-in %s at %s (session %d)", employee_id, now.isoformat(), len(record.sessions))
        return to_view(record)

    def check_out(self, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceView:
        employee_id = require_non_empty(employee_id, "Employee ID")
        now = now or self._clock()
        today = now.date()

        with self._store.transaction() as records:
            record = self._store.find(records, employee_id, today)
            if not record:
                raise NoActiveShift(employee_id)
            session = record.open_session()
            if session is None:
                raise NoOpenSession(employee_id)
            session.check_out = now
            record.last_updated = now

        logger.info("Check-out %s at %s", employee_id, now.isoformat())
        return to_view(record)

    def all_records(self) -> List[AttendanceView]:
        return self._sorted_views(self._store.load())

    def records_for(self, employee_id: str) -> List[AttendanceView]:
        return self._sorted_views(r for r in self._store.load() if r.employee_id == employee_id)

    def today_record(self, employee_id: str, *, today: Optional[date] = None) -> Optional[AttendanceView]:
        today = today or self._clock().date()
        record = self._store.find(self._store.load(), employee_id, today)
        return to_view(record) if record else None

    def subscribe_all(self, callback: ViewsCallback) -> Callable[[], None]:
        """Push all views now and after every change. Returns the unsubscribe callable."""
        return self._subscribe(callback, self.all_records)

    def subscribe_user(self, employee_id: str, callback: ViewsCallback) -> Callable[[], None]:
        return self._subscribe(callback, lambda: self.records_for(employee_id))

    def _subscribe(self, callback: ViewsCallback, query: Callable[[], List[AttendanceView]]) -> Callable[[], None]:
        def handle_update(sender, **kwargs) -> None:
            callback(query())

        unsubscribe = self._store.subscribe(handle_update)
        callback(query())
        return unsubscribe

    @staticmethod
    def _sorted_views(records) -> List[AttendanceView]:
        return sorted((to_view(r) for r in records), key=lambda v: v.date, reverse=True)
