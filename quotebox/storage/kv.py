"""
kv.py - Key/value stores
Single responsibility: durable (SQLite) and session-scoped (in-memory)
string storage addressed by key.
"""
import threading
from typing import Protocol

from quotebox.storage.connection import get_connection
from quotebox.storage.schema import initialize_schema
from quotebox.utils.time import now_iso


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class DurableStore:
    """Values survive restarts. sqlite3 errors propagate to the caller."""

    def __init__(self, db_path: str | None = None):
        self.db_path = db_path
        initialize_schema(db_path)

    def get(self, key: str) -> str | None:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def set(self, key: str, value: str) -> None:
        conn = get_connection(self.db_path)
        try:
            with conn:
                conn.execute(
                    "INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)"
                    " ON CONFLICT(key) DO UPDATE SET value = excluded.value,"
                    " updated_at = excluded.updated_at",
                    (key, value, now_iso()),
                )
        finally:
            conn.close()

    def remove(self, key: str) -> None:
        conn = get_connection(self.db_path)
        try:
            with conn:
                conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        finally:
            conn.close()


class SessionStore:
    """Values live as long as the process."""

    def __init__(self):
        self._data: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def remove(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)
