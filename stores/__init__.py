"""
Stores package.

Each store persists one application record (meal plan, shopping list,
favorites, preferences, recent searches) through an injected storage
backend.
"""

from .base import StorageKeys, clear_all_storage
from .favorites import FavoritesStore
from .meal_plan import MealPlanStore
from .preferences import PreferencesStore, RecentSearchesStore
from .shopping_list import ShoppingListStore

__all__ = [
    "StorageKeys",
    "clear_all_storage",
    "FavoritesStore",
    "MealPlanStore",
    "PreferencesStore",
    "RecentSearchesStore",
    "ShoppingListStore",
]
