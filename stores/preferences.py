"""
Persisted user preferences and recent search log.
"""

from typing import Any, List

from domain.entities import UserPreferences

from .base import JsonRecordStore, StorageKeys

DEFAULT_RECENT_SEARCHES_LIMIT = 10


class PreferencesStore(JsonRecordStore):
    """Search preferences (diet, cuisine, max time, allergies)."""

    key = StorageKeys.USER_PREFERENCES

    def get(self) -> UserPreferences:
        return self._load(UserPreferences.from_dict, UserPreferences)

    def save(self, preferences: UserPreferences) -> bool:
        return self._save(preferences.to_dict())

    def update(self, key: str, value: Any) -> bool:
        """Set one preference by its stored name (e.g. 'maxTime')."""
        attribute = UserPreferences.FIELD_NAMES.get(key)
        if attribute is None:
            return False

        preferences = self._load_for_update(
            UserPreferences.from_dict, UserPreferences
        )
        if preferences is None:
            return False
        if attribute == "allergies":
            if isinstance(value, str):
                value = [a.strip() for a in value.split(",") if a.strip()]
            value = [str(a) for a in value or []]
        else:
            value = "" if value is None else str(value)
        setattr(preferences, attribute, value)
        return self.save(preferences)


def _parse_searches(data) -> List[str]:
    if not isinstance(data, list):
        raise ValueError("recent searches must be a list")
    return [str(query) for query in data]


class RecentSearchesStore(JsonRecordStore):
    """Most-recent-first search queries, deduplicated and capped."""

    key = StorageKeys.RECENT_SEARCHES

    def __init__(self, storage, limit: int = DEFAULT_RECENT_SEARCHES_LIMIT):
        super().__init__(storage)
        self.limit = limit

    def list(self) -> List[str]:
        return self._load(_parse_searches, list)

    def add(self, query: str) -> bool:
        """Move query to the front of the log; blank queries are ignored."""
        if not query or not query.strip():
            return False

        searches = self._load_for_update(_parse_searches, list)
        if searches is None:
            return False
        searches = [s for s in searches if s != query]
        searches.insert(0, query)
        return self._save(searches[: self.limit])

    def clear(self) -> bool:
        return self._save([])
