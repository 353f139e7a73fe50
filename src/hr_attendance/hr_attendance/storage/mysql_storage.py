from __future__ import annotations

from typing import Optional

from .base import KeyValueStorage
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchone


class MySQLKeyValueStorage(KeyValueStorage):
    """Key-value rows in the ``kv_store`` table (see ``bootstrap.ensure_kv_table``)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT v FROM kv_store WHERE k=%s", (key,))
            r = fetchone(cur)
            return r["v"] if r else None

    def set(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_store(k, v) VALUES(%s, %s)
                ON DUPLICATE KEY UPDATE v=VALUES(v)
                """,
                (key, value),
            )

    def delete(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM kv_store WHERE k=%s", (key,))
