"""
Shared test fixtures and utilities.
"""

import pytest

from adapters.db import Database, SQLiteStorage
from adapters.memory_storage import InMemoryStorage
from stores import (
    FavoritesStore,
    MealPlanStore,
    PreferencesStore,
    RecentSearchesStore,
    ShoppingListStore,
)
from tests.base_test import FailingStorage, FlakyStorage, make_recipe


@pytest.fixture
def storage():
    """Fresh in-memory storage."""
    return InMemoryStorage()


@pytest.fixture
def failing_storage():
    return FailingStorage()


@pytest.fixture
def flaky_storage():
    return FlakyStorage()


@pytest.fixture
def temp_database(tmp_path):
    """Create a temporary SQLite database for testing."""
    db = Database(str(tmp_path / "test_meal_planner.db"))
    yield db
    db.close()


@pytest.fixture
def sqlite_storage(temp_database):
    return SQLiteStorage(temp_database)


@pytest.fixture
def meal_plan_store(storage):
    return MealPlanStore(storage)


@pytest.fixture
def shopping_store(storage):
    return ShoppingListStore(storage)


@pytest.fixture
def favorites_store(storage):
    return FavoritesStore(storage)


@pytest.fixture
def preferences_store(storage):
    return PreferencesStore(storage)


@pytest.fixture
def recent_searches_store(storage):
    return RecentSearchesStore(storage, limit=10)


@pytest.fixture
def pancakes():
    """Standard breakfast recipe."""
    return make_recipe(
        1,
        "Pancakes",
        [
            ("flour", 200, "g", "Baking"),
            ("milk", 300, "ml", "Milk, Eggs, Other Dairy"),
            ("eggs", 2, "", None),
        ],
        calories=450,
        protein=12,
        carbs=60,
        fat=15,
    )


@pytest.fixture
def pasta():
    """Standard dinner recipe."""
    return make_recipe(
        2,
        "Tomato Pasta",
        [
            ("spaghetti", 400, "g", "Pasta and Rice"),
            ("tomatoes", 4, "", "Produce"),
            ("olive oil", 2, "tbsp", "Oil, Vinegar, Salad Dressing"),
        ],
        calories=600,
        protein=18,
        carbs=90,
        fat=20,
    )


@pytest.fixture
def recipe_payload():
    """Recipe as returned by the recipe API."""
    return {
        "id": 716429,
        "title": "Pasta with Garlic",
        "image": "https://img.example/716429.jpg",
        "readyInMinutes": 45,
        "servings": 2,
        "vegetarian": True,
        "extendedIngredients": [
            {
                "id": 1001,
                "name": "butter",
                "amount": 1.0,
                "unit": "tbsp",
                "aisle": "Milk, Eggs, Other Dairy",
            },
            {
                "id": 11215,
                "name": "garlic",
                "amount": 5.0,
                "unit": "cloves",
                "aisle": "Produce",
            },
        ],
        "nutrition": {
            "nutrients": [
                {"name": "Calories", "amount": 543.36, "unit": "kcal"},
                {"name": "Protein", "amount": 16.84, "unit": "g"},
                {"name": "Carbohydrates", "amount": 83.7, "unit": "g"},
                {"name": "Fat", "amount": 16.2, "unit": "g"},
            ]
        },
    }
