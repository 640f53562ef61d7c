"""Database migration system."""

import logging
from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from adapters.db.database import Database

__all__ = ["MigrationRunner", "MIGRATIONS"]

logger = logging.getLogger(__name__)

# (name, statements) in the order they must be applied
MIGRATIONS: List[Tuple[str, List[str]]] = [
    (
        "001_create_storage",
        [
            """
            CREATE TABLE IF NOT EXISTS storage (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            """,
        ],
    ),
]


class MigrationRunner:
    """Handles database migrations."""

    def __init__(self, db: "Database", migrations=None):
        self.db = db
        self.migrations = MIGRATIONS if migrations is None else migrations

    def run_migrations(self) -> List[str]:
        """Run all pending migrations and return the names applied."""
        self._create_migrations_table()

        applied = []
        for name, statements in self.migrations:
            if not self._is_migration_applied(name):
                self._run_migration(name, statements)
                applied.append(name)
        return applied

    def _create_migrations_table(self) -> None:
        """Create migrations tracking table."""
        self.db.execute_update(
            """
            CREATE TABLE IF NOT EXISTS migrations (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT UNIQUE NOT NULL,
                applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """
        )

    def _is_migration_applied(self, name: str) -> bool:
        """Check if migration has been applied."""
        result = self.db.execute_query(
            "SELECT id FROM migrations WHERE name = ?", (name,)
        )
        return len(result) > 0

    def _run_migration(self, name: str, statements: List[str]) -> None:
        """Apply a single migration atomically."""
        conn = self.db.get_connection()
        try:
            for stmt in statements:
                if stmt.strip():
                    conn.execute(stmt)
            conn.execute("INSERT INTO migrations (name) VALUES (?)", (name,))
            conn.commit()
            logger.info(f"Applied migration: {name}")
        except Exception as e:
            conn.rollback()
            logger.error(f"Error applying migration {name}: {e}")
            raise
