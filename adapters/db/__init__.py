"""
Database adapters package.

This package contains the SQLite implementation of the storage backend.
"""

from .database import Database
from .kv_storage import SQLiteStorage

__all__ = [
    "Database",
    "SQLiteStorage",
]
