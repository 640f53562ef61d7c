"""
Persisted favorite recipes.
"""

import logging
from typing import List, Optional

from domain.entities import FavoriteRecipe, Recipe

from .base import JsonRecordStore, StorageKeys

logger = logging.getLogger(__name__)


def _parse_favorites(data) -> List[FavoriteRecipe]:
    if not isinstance(data, list):
        raise ValueError("favorites must be a list")

    favorites = []
    for item in data:
        try:
            favorites.append(FavoriteRecipe.from_dict(item))
        except (ValueError, TypeError, AttributeError) as e:
            logger.error(f"Skipping malformed favorite: {e}")
    return favorites


class FavoritesStore(JsonRecordStore):
    """Favorited recipe snapshots, unique by recipe id."""

    key = StorageKeys.FAVORITES

    def list(self) -> List[FavoriteRecipe]:
        return self._load(_parse_favorites, list)

    def _favorites_for_update(self) -> Optional[List[FavoriteRecipe]]:
        return self._load_for_update(_parse_favorites, list)

    def _save_favorites(self, favorites: List[FavoriteRecipe]) -> bool:
        return self._save([favorite.to_dict() for favorite in favorites])

    def add(self, recipe: Recipe) -> bool:
        """Save a snapshot of recipe; False if it is already a favorite."""
        favorites = self._favorites_for_update()
        if favorites is None:
            return False
        if any(favorite.id == recipe.id for favorite in favorites):
            logger.debug(f"Recipe {recipe.id} already in favorites")
            return False

        favorites.append(FavoriteRecipe(recipe=recipe.snapshot()))
        return self._save_favorites(favorites)

    def remove(self, recipe_id: int) -> bool:
        favorites = self._favorites_for_update()
        if favorites is None:
            return False
        remaining = [favorite for favorite in favorites if favorite.id != recipe_id]
        if len(remaining) == len(favorites):
            return False
        return self._save_favorites(remaining)

    def contains(self, recipe_id: int) -> bool:
        return any(favorite.id == recipe_id for favorite in self.list())

    def clear(self) -> bool:
        return self._save([])
