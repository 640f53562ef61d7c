"""
FastAPI dependencies providing storage, stores and the recipe client.

Tests replace ``get_storage`` / ``get_recipe_client`` through
``app.dependency_overrides``.
"""

import logging
from typing import Optional

from fastapi import Depends

from adapters.db import Database, SQLiteStorage
from adapters.recipe_api import SpoonacularClient
from config import settings
from domain.repo_abc import StorageBackend
from stores import (
    FavoritesStore,
    MealPlanStore,
    PreferencesStore,
    RecentSearchesStore,
    ShoppingListStore,
)

logger = logging.getLogger(__name__)

# Created lazily on first use
_database: Optional[Database] = None
_storage: Optional[StorageBackend] = None
_recipe_client: Optional[SpoonacularClient] = None


def get_storage() -> StorageBackend:
    """Get the application storage backend."""
    global _database, _storage
    if _storage is None:
        _database = Database(settings.sqlite_db)
        _storage = SQLiteStorage(_database)
        logger.info(f"Using SQLite storage at {settings.sqlite_db}")
    return _storage


def get_recipe_client() -> SpoonacularClient:
    """Get the recipe API client."""
    global _recipe_client
    if _recipe_client is None:
        _recipe_client = SpoonacularClient(
            api_key=settings.spoonacular_api_key,
            base_url=settings.spoonacular_base_url,
            timeout=settings.recipe_api_timeout,
            search_number=settings.search_results_number,
            similar_number=settings.similar_recipes_number,
        )
    return _recipe_client


def get_meal_plan_store(
    storage: StorageBackend = Depends(get_storage),
) -> MealPlanStore:
    return MealPlanStore(storage)


def get_shopping_list_store(
    storage: StorageBackend = Depends(get_storage),
) -> ShoppingListStore:
    return ShoppingListStore(storage)


def get_favorites_store(
    storage: StorageBackend = Depends(get_storage),
) -> FavoritesStore:
    return FavoritesStore(storage)


def get_preferences_store(
    storage: StorageBackend = Depends(get_storage),
) -> PreferencesStore:
    return PreferencesStore(storage)


def get_recent_searches_store(
    storage: StorageBackend = Depends(get_storage),
) -> RecentSearchesStore:
    return RecentSearchesStore(storage, limit=settings.recent_searches_limit)


async def shutdown() -> None:
    """Close the recipe client and database connection."""
    global _database, _storage, _recipe_client
    if _recipe_client is not None:
        await _recipe_client.close()
        _recipe_client = None
    if _database is not None:
        _database.close()
        _database = None
    _storage = None
