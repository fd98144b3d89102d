"""
Storage port and its backends.

The submission store only needs string get/set/remove by key, so any
key-value backend can sit behind it.
"""

import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class StoragePort(ABC):
    """String-keyed, string-valued persistence."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str):
        """Store (or overwrite) a value."""

    @abstractmethod
    def remove(self, key: str):
        """Delete a key. Missing keys are ignored."""


class InMemoryStorage(StoragePort):
    """Dict-backed storage for tests and single-process use."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str):
        self.data[key] = value

    def remove(self, key: str):
        self.data.pop(key, None)


class SqliteStorage(StoragePort):
    """Key-value rows in the kv_store table."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def get(self, key: str) -> Optional[str]:
        try:
            row = self.conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error as e:
            logger.warning(f"STORAGE | Read failed for '{key}': {e}")
            return None
        if row is None:
            return None
        return row["value"]

    def set(self, key: str, value: str):
        self.conn.execute(
            "INSERT OR REPLACE INTO kv_store (key, value, updated_at) "
            "VALUES (?, ?, datetime('now'))",
            (key, value),
        )
        self.conn.commit()

    def remove(self, key: str):
        self.conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        self.conn.commit()
