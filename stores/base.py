"""
Shared persistence helpers for the application stores.

Each store owns one record in the storage backend and reads/writes it as a
whole. Storage failures are logged and never raise out of a store: reads
fall back to safe defaults, and a modification whose read fails is abandoned
and reported as False without writing.
"""

import logging
from typing import Any, Callable, Optional, TypeVar

from domain.repo_abc import StorageBackend, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StorageKeys:
    """Storage keys of the persisted records."""

    FAVORITES = "mealplanner_favorites"
    MEAL_PLAN = "mealplanner_meal_plan"
    SHOPPING_LIST = "mealplanner_shopping_list"
    USER_PREFERENCES = "mealplanner_preferences"
    RECENT_SEARCHES = "mealplanner_recent_searches"

    @classmethod
    def all(cls) -> tuple:
        return (
            cls.FAVORITES,
            cls.MEAL_PLAN,
            cls.SHOPPING_LIST,
            cls.USER_PREFERENCES,
            cls.RECENT_SEARCHES,
        )


class JsonRecordStore:
    """Base class for a store persisted under a single storage key."""

    key: str = ""

    def __init__(self, storage: StorageBackend):
        self.storage = storage

    def _read(self, parse: Callable[[Any], T], default: Callable[[], T]) -> T:
        """Read and parse the record; StorageError propagates."""
        data = self.storage.get(self.key)
        if data is None:
            return default()

        try:
            return parse(data)
        except (ValueError, TypeError, AttributeError) as e:
            logger.error(f"Discarding malformed '{self.key}' record: {e}")
            return default()

    def _load(self, parse: Callable[[Any], T], default: Callable[[], T]) -> T:
        """Read and parse the record, falling back to ``default()``."""
        try:
            return self._read(parse, default)
        except StorageError as e:
            logger.error(f"Error reading '{self.key}' from storage: {e}")
            return default()

    def _load_for_update(
        self, parse: Callable[[Any], T], default: Callable[[], T]
    ) -> Optional[T]:
        """
        Read the record before modifying it.

        Returns None when the backend cannot be read, so the caller aborts
        instead of writing a default over the stored record.
        """
        try:
            return self._read(parse, default)
        except StorageError as e:
            logger.error(f"Error reading '{self.key}' for update: {e}")
            return None

    def _save(self, data: Any) -> bool:
        """Write the record; returns False when the backend fails."""
        try:
            self.storage.set(self.key, data)
            return True
        except StorageError as e:
            logger.error(f"Error saving '{self.key}' to storage: {e}")
            return False

    def _remove(self) -> bool:
        try:
            self.storage.remove(self.key)
            return True
        except StorageError as e:
            logger.error(f"Error removing '{self.key}' from storage: {e}")
            return False


def clear_all_storage(storage: StorageBackend) -> bool:
    """Remove every application record from storage."""
    success = True
    for key in StorageKeys.all():
        try:
            storage.remove(key)
        except StorageError as e:
            logger.error(f"Error removing '{key}' from storage: {e}")
            success = False
    return success
