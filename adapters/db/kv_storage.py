"""
SQLite implementation of StorageBackend.
"""

import json
import sqlite3
import threading
from typing import Any, List, Optional

from domain.repo_abc import StorageBackend, StorageError

from .database import Database


class SQLiteStorage(StorageBackend):
    """Stores each key's value as a JSON document in the storage table."""

    def __init__(self, db: Database):
        self.db = db
        self._lock = threading.RLock()  # Reentrant lock for thread safety

    def get(self, key: str) -> Optional[Any]:
        """Get the decoded value for key, or None if absent."""
        try:
            rows = self.db.execute_query(
                "SELECT value FROM storage WHERE key = ?", (key,)
            )
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read '{key}': {e}") from e

        if not rows:
            return None

        try:
            return json.loads(rows[0]["value"])
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupt value stored under '{key}': {e}") from e

    def set(self, key: str, value: Any) -> None:
        """Encode value as JSON and upsert it under key."""
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Value for '{key}' is not JSON-serializable: {e}") from e

        with self._lock:
            try:
                self.db.execute_update(
                    """
                    INSERT INTO storage (key, value, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    (key, payload),
                )
            except sqlite3.Error as e:
                raise StorageError(f"Failed to write '{key}': {e}") from e

    def remove(self, key: str) -> None:
        """Delete key if present."""
        with self._lock:
            try:
                self.db.execute_update("DELETE FROM storage WHERE key = ?", (key,))
            except sqlite3.Error as e:
                raise StorageError(f"Failed to remove '{key}': {e}") from e

    def keys(self) -> List[str]:
        """List stored keys."""
        try:
            rows = self.db.execute_query("SELECT key FROM storage ORDER BY key")
        except sqlite3.Error as e:
            raise StorageError(f"Failed to list keys: {e}") from e
        return [row["key"] for row in rows]
