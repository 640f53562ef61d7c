"""
Nutrition totals and meal plan summary statistics.
"""

from dataclasses import asdict, dataclass
from typing import Iterable, Optional

from .entities import DAYS, TOTAL_SLOTS, MealPlan, Recipe
from .shopping_list_generator import ShoppingListGenerator


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -int(-value + 0.5)
    return int(value + 0.5)


@dataclass
class NutritionTotals:
    """Summed macro nutrients."""

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0

    def to_dict(self) -> dict:
        return asdict(self)

    def calorie_progress(self, goal: int) -> float:
        """Percentage of ``goal`` reached, capped at 100."""
        if goal <= 0:
            return 100.0
        return min(self.calories / goal * 100, 100.0)


@dataclass
class PlanSummary:
    """Statistics shown alongside the weekly meal plan."""

    total_meals: int
    total_slots: int
    avg_calories_per_day: int
    shopping_items: int

    def to_dict(self) -> dict:
        return asdict(self)


def calculate_total_nutrition(
    recipes: Iterable[Optional[Recipe]],
) -> NutritionTotals:
    """Sum calories, protein, carbs and fat; missing values count as zero."""
    totals = NutritionTotals()
    for recipe in recipes:
        if recipe is None or recipe.nutrition is None:
            continue
        totals.calories += recipe.nutrition.get("calories")
        totals.protein += recipe.nutrition.get("protein")
        totals.carbs += recipe.nutrition.get("carbs")
        totals.fat += recipe.nutrition.get("fat")
    return totals


def daily_nutrition(plan: MealPlan, day: str) -> NutritionTotals:
    """Nutrition totals for one day of the plan (zeros for an invalid day)."""
    return calculate_total_nutrition(plan.get_meals_for_day(day))


def summarize_plan(plan: MealPlan) -> PlanSummary:
    """Meal count, average calories per day, and shopping item count."""
    meals = list(plan.iter_meals())

    total_calories = 0.0
    meals_with_calories = 0
    for meal in meals:
        if meal.recipe.calories:
            total_calories += meal.recipe.calories
            meals_with_calories += 1

    avg_per_day = (
        round_half_up(total_calories / len(DAYS)) if meals_with_calories else 0
    )

    return PlanSummary(
        total_meals=len(meals),
        total_slots=TOTAL_SLOTS,
        avg_calories_per_day=avg_per_day,
        shopping_items=len(ShoppingListGenerator.generate_from_plan(plan)),
    )
