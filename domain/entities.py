"""
Domain entities for the Meal Planner application.

These classes represent the core business concepts and contain only business
logic. They are independent of external technologies (database, API, etc.).

Recipes arrive from the recipe API as JSON-shaped mappings; the entities here
keep the API's field names on the wire (``extendedIngredients``,
``readyInMinutes``) and expose snake_case attributes in Python.
"""

from __future__ import annotations

import copy
import logging
import time
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)

DAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
MEAL_TYPES = ("breakfast", "lunch", "dinner")
TOTAL_SLOTS = len(DAYS) * len(MEAL_TYPES)


def get_current_timestamp() -> str:
    """Get current timestamp in ISO format with timezone."""
    return datetime.now(timezone.utc).isoformat()


def generate_id() -> str:
    """Generate a unique, time-prefixed identifier."""
    return f"{time.time_ns() // 1_000_000:x}{uuid.uuid4().hex[:10]}"


def get_week_dates(start: Optional[date] = None) -> Dict[str, date]:
    """Map each day name to its date in the Monday-based week of ``start``."""
    start = start or date.today()
    monday = start - timedelta(days=start.weekday())
    return {day: monday + timedelta(days=index) for index, day in enumerate(DAYS)}


def _to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class Category(str, Enum):
    """Shopping aisle categories."""

    PRODUCE = "produce"
    MEAT = "meat"
    DAIRY = "dairy"
    GRAINS = "grains"
    PANTRY = "pantry"
    SPICES = "spices"
    OTHER = "other"

    @classmethod
    def coerce(cls, value: Any) -> "Category":
        """Return the matching category, or OTHER for unknown/empty input."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass
class Ingredient:
    """Represents an ingredient line of a recipe."""

    name: str
    amount: Optional[float] = None
    unit: Optional[str] = None
    aisle: Optional[str] = None
    # Remaining API fields (id, image, measures, ...) kept as received
    extra: Dict[str, Any] = field(default_factory=dict)

    KNOWN_FIELDS = ("name", "amount", "unit", "aisle")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Ingredient":
        return cls(
            name=str(data.get("name") or ""),
            amount=_to_float(data.get("amount")),
            unit=data.get("unit"),
            aisle=data.get("aisle"),
            extra={
                key: copy.deepcopy(value)
                for key, value in data.items()
                if key not in cls.KNOWN_FIELDS
            },
        )

    def to_dict(self) -> Dict[str, Any]:
        data = copy.deepcopy(self.extra)
        data.update(
            {
                "name": self.name,
                "amount": self.amount,
                "unit": self.unit,
                "aisle": self.aisle,
            }
        )
        return data

    @property
    def category_hint(self) -> str:
        """Aisle if present, otherwise the ingredient name."""
        return self.aisle or self.name

    def __str__(self) -> str:
        amount = "" if not self.amount else f"{round(self.amount, 2):g}"
        return f"{amount} {self.unit or ''} {self.name}".strip()


# Spoonacular nutrient names mapped to the short keys used in totals
NUTRIENT_ALIASES = {
    "calories": "calories",
    "protein": "protein",
    "carbohydrates": "carbs",
    "carbs": "carbs",
    "fat": "fat",
}


@dataclass
class Nutrition:
    """
    Nutrition facts of a recipe: calories plus other named nutrients.

    ``source`` holds the mapping the facts were parsed from. When present it
    is what ``to_dict`` emits, so the API's nutrient list (units, daily
    percentages, breakdowns) survives storage unchanged.
    """

    calories: Optional[float] = None
    nutrients: Dict[str, float] = field(default_factory=dict)
    source: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Nutrition":
        nutrients: Dict[str, float] = {}
        calories = _to_float(data.get("calories"))

        # Spoonacular form: {"nutrients": [{"name": "Calories", "amount": 1}]}
        for entry in data.get("nutrients") or []:
            if not isinstance(entry, dict):
                continue
            name = str(entry.get("name", "")).strip().lower()
            amount = _to_float(entry.get("amount"))
            if not name or amount is None:
                continue
            key = NUTRIENT_ALIASES.get(name, name)
            if key == "calories":
                if calories is None:
                    calories = amount
            else:
                nutrients.setdefault(key, amount)

        # Flat form: {"calories": 500, "protein": 20}
        for name, value in data.items():
            if name in ("calories", "nutrients"):
                continue
            amount = _to_float(value)
            if amount is not None:
                nutrients[NUTRIENT_ALIASES.get(name.lower(), name)] = amount

        return cls(
            calories=calories, nutrients=nutrients, source=copy.deepcopy(data)
        )

    def to_dict(self) -> Dict[str, Any]:
        if self.source:
            return copy.deepcopy(self.source)
        return {"calories": self.calories, **self.nutrients}

    def get(self, name: str) -> float:
        """Nutrient amount, 0 when absent."""
        if name == "calories":
            return self.calories or 0
        return self.nutrients.get(name) or 0


@dataclass
class Recipe:
    """Represents a recipe record from the recipe data source."""

    id: int
    title: str = ""
    extended_ingredients: Optional[List[Ingredient]] = None
    nutrition: Optional[Nutrition] = None
    image: Optional[str] = None
    ready_in_minutes: Optional[int] = None
    servings: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    KNOWN_FIELDS = (
        "id",
        "title",
        "extendedIngredients",
        "nutrition",
        "image",
        "readyInMinutes",
        "servings",
    )

    def __post_init__(self):
        if self.id is None or isinstance(self.id, bool):
            raise ValueError("recipe id is required")
        try:
            self.id = int(self.id)
        except (TypeError, ValueError):
            raise ValueError(f"recipe id must be numeric, got {self.id!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Recipe":
        """Build a recipe from an API/storage payload (deep-copied)."""
        if not isinstance(data, dict):
            raise ValueError("recipe payload must be an object")
        data = copy.deepcopy(data)

        ingredients = data.get("extendedIngredients")
        if ingredients is not None:
            ingredients = [
                Ingredient.from_dict(item)
                for item in ingredients
                if isinstance(item, dict)
            ]

        nutrition = data.get("nutrition")
        return cls(
            id=data.get("id"),
            title=data.get("title") or "",
            extended_ingredients=ingredients,
            nutrition=(
                Nutrition.from_dict(nutrition)
                if isinstance(nutrition, dict)
                else None
            ),
            image=data.get("image"),
            ready_in_minutes=data.get("readyInMinutes"),
            servings=data.get("servings"),
            extra={
                key: value
                for key, value in data.items()
                if key not in cls.KNOWN_FIELDS and key != "addedAt"
            },
        )

    def to_dict(self) -> Dict[str, Any]:
        data = copy.deepcopy(self.extra)
        data.update(
            {
                "id": self.id,
                "title": self.title,
                "image": self.image,
                "readyInMinutes": self.ready_in_minutes,
                "servings": self.servings,
                "extendedIngredients": (
                    [item.to_dict() for item in self.extended_ingredients]
                    if self.extended_ingredients is not None
                    else None
                ),
                "nutrition": (
                    self.nutrition.to_dict() if self.nutrition else None
                ),
            }
        )
        return data

    def snapshot(self) -> "Recipe":
        """Return a deep, independent copy of this recipe."""
        return Recipe.from_dict(self.to_dict())

    @property
    def calories(self) -> Optional[float]:
        if self.nutrition is None:
            return None
        return self.nutrition.calories

    def __str__(self) -> str:
        return f"Recipe: {self.title}"


@dataclass
class PlannedMeal:
    """A populated slot of the meal plan."""

    day: str
    meal_type: str
    recipe: Recipe

    def __str__(self) -> str:
        return f"{self.day.title()} {self.meal_type}: {self.recipe.title}"


class MealPlan:
    """A fixed 7-day by 3-meal grid of optional recipe snapshots."""

    def __init__(self, days: Optional[Dict[str, Dict[str, Optional[Recipe]]]] = None):
        self.days: Dict[str, Dict[str, Optional[Recipe]]] = {
            day: {meal_type: None for meal_type in MEAL_TYPES} for day in DAYS
        }
        for day, meals in (days or {}).items():
            for meal_type, recipe in meals.items():
                if self.is_valid_slot(day, meal_type):
                    self.days[day][meal_type] = recipe

    @classmethod
    def empty(cls) -> "MealPlan":
        return cls()

    @staticmethod
    def is_valid_day(day: str) -> bool:
        return day in DAYS

    @classmethod
    def is_valid_slot(cls, day: str, meal_type: str) -> bool:
        return cls.is_valid_day(day) and meal_type in MEAL_TYPES

    @classmethod
    def from_dict(cls, data: Any) -> "MealPlan":
        """
        Load a persisted plan.

        Unknown days and meal types are dropped and missing slots are empty.
        A slot holding an unreadable recipe is logged and left empty; the
        other slots still load.
        """
        plan = cls()
        if not isinstance(data, dict):
            return plan
        for day, meals in data.items():
            if not cls.is_valid_day(day) or not isinstance(meals, dict):
                continue
            for meal_type, recipe_data in meals.items():
                if meal_type not in MEAL_TYPES or not recipe_data:
                    continue
                try:
                    plan.days[day][meal_type] = Recipe.from_dict(recipe_data)
                except (ValueError, TypeError, AttributeError) as e:
                    logger.error(
                        f"Dropping unreadable meal {day}/{meal_type}: {e}"
                    )
        return plan

    def to_dict(self) -> Dict[str, Dict[str, Optional[Dict[str, Any]]]]:
        return {
            day: {
                meal_type: recipe.to_dict() if recipe else None
                for meal_type, recipe in meals.items()
            }
            for day, meals in self.days.items()
        }

    def __getitem__(self, day: str) -> Dict[str, Optional[Recipe]]:
        return self.days[day]

    def get_meal(self, day: str, meal_type: str) -> Optional[Recipe]:
        if not self.is_valid_slot(day, meal_type):
            return None
        return self.days[day][meal_type]

    def set_meal(self, day: str, meal_type: str, recipe: Recipe) -> bool:
        """Store a snapshot of ``recipe`` in the slot, replacing any meal."""
        if not self.is_valid_slot(day, meal_type):
            return False
        self.days[day][meal_type] = recipe.snapshot()
        return True

    def clear_meal(self, day: str, meal_type: str) -> bool:
        if not self.is_valid_slot(day, meal_type):
            return False
        self.days[day][meal_type] = None
        return True

    def iter_slots(self) -> Iterator[tuple]:
        """Yield (day, meal_type, recipe-or-None) in traversal order."""
        for day in DAYS:
            for meal_type in MEAL_TYPES:
                yield day, meal_type, self.days[day][meal_type]

    def iter_meals(self) -> Iterator[PlannedMeal]:
        for day, meal_type, recipe in self.iter_slots():
            if recipe is not None:
                yield PlannedMeal(day=day, meal_type=meal_type, recipe=recipe)

    def get_meals_for_day(self, day: str) -> List[Recipe]:
        if not self.is_valid_day(day):
            return []
        return [
            recipe
            for recipe in (self.days[day][meal] for meal in MEAL_TYPES)
            if recipe is not None
        ]

    @property
    def meal_count(self) -> int:
        return sum(1 for _ in self.iter_meals())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MealPlan):
            return NotImplemented
        return self.days == other.days

    def __str__(self) -> str:
        return f"Meal Plan: {self.meal_count}/{TOTAL_SLOTS} meals"


@dataclass
class AggregatedIngredient:
    """An ingredient merged across every recipe of a meal plan."""

    name: str
    category: Category
    amount: float = 0
    unit: str = ""
    checked: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "category": self.category.value,
            "amount": self.amount,
            "unit": self.unit,
            "checked": self.checked,
        }


@dataclass
class ShoppingItem:
    """Represents an item in the shopping list."""

    name: str
    category: Category = Category.OTHER
    checked: bool = False
    id: str = field(default_factory=generate_id)
    added_at: str = field(default_factory=get_current_timestamp)
    amount: Optional[float] = None
    unit: Optional[str] = None

    def __post_init__(self):
        self.category = Category.coerce(self.category)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShoppingItem":
        return cls(
            id=str(data.get("id") or generate_id()),
            name=str(data.get("name") or ""),
            category=Category.coerce(data.get("category")),
            checked=bool(data.get("checked", False)),
            added_at=data.get("addedAt") or get_current_timestamp(),
            amount=_to_float(data.get("amount")),
            unit=data.get("unit"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "checked": self.checked,
            "addedAt": self.added_at,
        }
        if self.amount is not None:
            data["amount"] = self.amount
        if self.unit:
            data["unit"] = self.unit
        return data

    def __str__(self) -> str:
        status = "✓" if self.checked else "○"
        return f"{status} {self.name}"


@dataclass
class FavoriteRecipe:
    """A favorited recipe snapshot with the time it was saved."""

    recipe: Recipe
    added_at: str = field(default_factory=get_current_timestamp)

    @property
    def id(self) -> int:
        return self.recipe.id

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FavoriteRecipe":
        return cls(
            recipe=Recipe.from_dict(data),
            added_at=data.get("addedAt") or get_current_timestamp(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {**self.recipe.to_dict(), "addedAt": self.added_at}


@dataclass
class UserPreferences:
    """Saved search preferences."""

    diet: str = ""
    cuisine: str = ""
    max_time: str = ""
    allergies: List[str] = field(default_factory=list)

    FIELD_NAMES = {
        "diet": "diet",
        "cuisine": "cuisine",
        "maxTime": "max_time",
        "allergies": "allergies",
    }

    @classmethod
    def from_dict(cls, data: Any) -> "UserPreferences":
        if not isinstance(data, dict):
            return cls()
        allergies = data.get("allergies") or []
        return cls(
            diet=str(data.get("diet") or ""),
            cuisine=str(data.get("cuisine") or ""),
            max_time=str(data.get("maxTime") or ""),
            allergies=[str(a) for a in allergies if a],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "diet": self.diet,
            "cuisine": self.cuisine,
            "maxTime": self.max_time,
            "allergies": list(self.allergies),
        }
