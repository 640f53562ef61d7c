"""
Domain package for Meal Planner.

This package contains the core business logic and entities,
independent of external technologies.
"""

from .entities import (
    DAYS,
    MEAL_TYPES,
    AggregatedIngredient,
    Category,
    FavoriteRecipe,
    Ingredient,
    MealPlan,
    Nutrition,
    PlannedMeal,
    Recipe,
    ShoppingItem,
    UserPreferences,
)
from .ingredient_categorizer import IngredientCategorizer, categorize
from .shopping_list_generator import ShoppingListGenerator, generate_from_plan

__all__ = [
    "DAYS",
    "MEAL_TYPES",
    "AggregatedIngredient",
    "Category",
    "FavoriteRecipe",
    "Ingredient",
    "MealPlan",
    "Nutrition",
    "PlannedMeal",
    "Recipe",
    "ShoppingItem",
    "UserPreferences",
    "IngredientCategorizer",
    "categorize",
    "ShoppingListGenerator",
    "generate_from_plan",
]
