from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List

from ..core.constants import LEAVES_DB_KEY
from ..storage.base import KeyValueStorage
from ..storage.table import JsonTableStore
from .model import LeaveRequest


class LeaveStore(JsonTableStore):
    def __init__(self, storage: KeyValueStorage):
        super().__init__(storage, key=LEAVES_DB_KEY, signal_name="leaves_update")

    def load(self) -> List[LeaveRequest]:
        with self._lock:
            return [LeaveRequest.from_dict(r) for r in self._read_rows() or []]

    @contextmanager
    def transaction(self) -> Iterator[List[LeaveRequest]]:
        with self._lock:
            requests = self.load()
            yield requests
            self._write_rows([r.to_dict() for r in requests])
        self.emit()
