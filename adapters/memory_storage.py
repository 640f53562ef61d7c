"""
In-memory implementation of StorageBackend.

Values are round-tripped through JSON so callers get the same copy
semantics as with a persistent backend.
"""

import json
from typing import Any, Dict, Optional

from domain.repo_abc import StorageBackend, StorageError


class InMemoryStorage(StorageBackend):
    """Dictionary-backed storage, useful for tests and ephemeral sessions."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[Any]:
        payload = self._data.get(key)
        if payload is None:
            return None
        return json.loads(payload)

    def set(self, key: str, value: Any) -> None:
        try:
            self._data[key] = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Value for '{key}' is not JSON-serializable: {e}") from e

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return sorted(self._data)

    def __contains__(self, key: str) -> bool:
        return key in self._data
