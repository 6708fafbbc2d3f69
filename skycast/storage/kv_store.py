"""Key-value storage capability injected into components that persist state."""

import sqlite3
import threading
from typing import Protocol

from skycast.models.common import utc_now_iso


class KeyValueStore(Protocol):
    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes) -> None: ...


class MemoryStore:
    """In-process store, used by tests and one-shot API requests."""

    def __init__(self, initial: dict[str, bytes] | None = None):
        self._data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)


class SqliteStore:
    """Store backed by the kv_store table. Run migrations before use."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        self._lock = threading.Lock()

    def get(self, key: str) -> bytes | None:
        with self._lock:
            row = self.conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
        if row is None:
            return None
        return bytes(row[0])

    def set(self, key: str, value: bytes) -> None:
        with self._lock:
            self.conn.execute(
                "INSERT INTO kv_store (key, value, updated_at) "
                "VALUES (?, ?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value, "
                "updated_at = excluded.updated_at",
                (key, sqlite3.Binary(value), utc_now_iso()),
            )
            self.conn.commit()
