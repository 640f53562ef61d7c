"""
Abstract interfaces for the Meal Planner domain.

These interfaces define the contract for persistence and recipe lookup
without specifying the implementation details (database, HTTP API, etc.).
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from .entities import Recipe


class StorageError(Exception):
    """Raised by a storage backend when a read or write fails."""


class StorageBackend(ABC):
    """Key-value storage holding one JSON-shaped value per key."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Get the value stored under key, or None if absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove key; removing a missing key is not an error."""
        pass


class RecipeSource(ABC):
    """Abstract source of recipe data."""

    @abstractmethod
    async def get_recipe_by_id(self, recipe_id: int) -> Optional[Recipe]:
        """Get a fully materialized recipe, or None if unavailable."""
        pass

    @abstractmethod
    async def search_recipes(self, query: str = "", **filters) -> List[Recipe]:
        """Search recipes by free text and filters."""
        pass

    @abstractmethod
    async def get_random_recipes(
        self, count: int = 6, tags: str = ""
    ) -> List[Recipe]:
        """Get random recipes, optionally filtered by tags."""
        pass
