"""
Database connection and schema management.
"""

import logging
import sqlite3
import threading
from typing import Optional

from config import settings

logger = logging.getLogger(__name__)


class Database:
    """SQLite database connection and schema management."""

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or settings.sqlite_db
        self._local = threading.local()
        self._run_migrations()

    def get_connection(self) -> sqlite3.Connection:
        """Get database connection, creating it if necessary."""
        # Use thread-local storage for thread safety
        if getattr(self._local, "connection", None) is None:
            connection = sqlite3.connect(self.db_path, check_same_thread=False)
            connection.row_factory = sqlite3.Row
            # Enable WAL mode for better concurrency
            connection.execute("PRAGMA journal_mode=WAL")
            # Set busy timeout for better handling of concurrent access
            connection.execute("PRAGMA busy_timeout = 10000")
            self._local.connection = connection
        return self._local.connection

    def close(self) -> None:
        """Close database connection."""
        connection = getattr(self._local, "connection", None)
        if connection is None:
            return
        try:
            connection.close()
        except sqlite3.Error as e:
            logger.warning(f"Error closing database connection: {e}")
        finally:
            self._local.connection = None

    def _run_migrations(self) -> None:
        """Run database migrations."""
        # Import here to avoid circular import
        from .migrations import MigrationRunner

        try:
            MigrationRunner(self).run_migrations()
        except sqlite3.Error as e:
            logger.error(f"Error running migrations on {self.db_path}: {e}")
            raise

    def execute_query(self, query: str, params: tuple = ()) -> list:
        """Execute a SELECT query and return results."""
        conn = self.get_connection()
        cursor = conn.execute(query, params)
        return cursor.fetchall()

    def execute_update(self, query: str, params: tuple = ()) -> int:
        """Execute an INSERT/UPDATE/DELETE query and return affected rows."""
        conn = self.get_connection()
        cursor = conn.execute(query, params)
        conn.commit()
        return cursor.rowcount

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
