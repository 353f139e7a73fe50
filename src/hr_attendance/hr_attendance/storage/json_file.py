from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from .base import KeyValueStorage

logger = logging.getLogger(__name__)


class JsonFileStorage(KeyValueStorage):
    """One ``<key>.json`` file per key under a data directory."""

    def __init__(self, db_path: str | Path = "data"):
        self.db_path = Path(db_path)
        self.db_path.mkdir(parents=True, exist_ok=True)

    def _get_file_path(self, key: str) -> Path:
        return self.db_path / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        file_path = self._get_file_path(key)
        if not file_path.exists():
            return None
        text = file_path.read_text(encoding="utf-8")
        try:
            json.loads(text)
        except json.JSONDecodeError:
            logger.warning("Ignoring corrupt storage file %s", file_path)
            return None
        return text

    def set(self, key: str, value: str) -> None:
        file_path = self._get_file_path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.db_path, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, file_path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def delete(self, key: str) -> None:
        file_path = self._get_file_path(key)
        if file_path.exists():
            file_path.unlink()
