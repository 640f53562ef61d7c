"""
API package for Meal Planner.

This package contains FastAPI endpoints and related functionality
for the Meal Planner web API.
"""

from .favorites import router as favorites_router
from .health import router as health_router
from .meal_plan import router as meal_plan_router
from .preferences import router as preferences_router
from .recipes import router as recipes_router
from .shopping import router as shopping_router

__all__ = [
    "favorites_router",
    "health_router",
    "meal_plan_router",
    "preferences_router",
    "recipes_router",
    "shopping_router",
]
