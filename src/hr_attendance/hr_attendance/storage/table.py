from __future__ import annotations

import json
import logging
import threading
from typing import Any, Callable, List, Optional

from blinker import NamedSignal

from .base import KeyValueStorage

logger = logging.getLogger(__name__)


class JsonTableStore:
    """Whole-table store: one JSON array under one storage key.

    Every mutation reads the full set, mutates it and writes the full set back
    under ``_lock``. After each write the ``changed`` signal fires with the
    keyword ``source`` ("local" or "external").
    """

    def __init__(self, storage: KeyValueStorage, *, key: str, signal_name: str):
        self._storage = storage
        self._key = key
        self._lock = threading.RLock()
        self.changed = NamedSignal(signal_name)

    @property
    def key(self) -> str:
        return self._key

    def _read_rows(self) -> Optional[List[dict]]:
        raw = self._storage.get(self._key)
        if raw is None:
            return None
        rows = json.loads(raw)
        if not isinstance(rows, list):
            logger.warning("Storage key %s does not hold a list; treating as empty", self._key)
            return []
        return rows

    def _write_rows(self, rows: List[dict]) -> None:
        self._storage.set(self._key, json.dumps(rows, ensure_ascii=False))

    def emit(self, *, source: str = "local") -> None:
        """Call every subscriber; a failing one is logged and does not stop the rest."""
        for receiver in list(self.changed.receivers_for(self)):
            try:
                receiver(self, source=source)
            except Exception:
                logger.exception("Subscriber %r of %s failed", receiver, self.changed.name)

    def notify_external_change(self) -> None:
        """Hook for another process having rewritten the underlying storage."""
        logger.debug("External change reported for %s", self._key)
        self.emit(source="external")

    def subscribe(self, callback: Callable[..., Any]) -> Callable[[], None]:
        """Connect ``callback(sender, source=...)``; returns the unsubscribe callable."""
        self.changed.connect(callback, weak=False)
        logger.debug("Subscriber attached to %s (%d total)", self.changed.name, len(self.changed.receivers))

        def unsubscribe() -> None:
            self.changed.disconnect(callback)
            logger.debug("Subscriber detached from %s", self.changed.name)

        return unsubscribe
