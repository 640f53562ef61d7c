"""
Persisted weekly meal plan.
"""

import logging
from typing import Iterable, List

from domain.entities import MealPlan, PlannedMeal, Recipe
from domain.nutrition import (
    NutritionTotals,
    PlanSummary,
    daily_nutrition,
    summarize_plan,
)

from .base import JsonRecordStore, StorageKeys

logger = logging.getLogger(__name__)


class MealPlanStore(JsonRecordStore):
    """The 7-day by 3-meal plan, stored as recipe snapshots."""

    key = StorageKeys.MEAL_PLAN

    def get(self) -> MealPlan:
        """Get the current plan; an all-empty plan if none is stored."""
        return self._load(MealPlan.from_dict, MealPlan.empty)

    def _save_plan(self, plan: MealPlan) -> bool:
        return self._save(plan.to_dict())

    def set_meal(self, day: str, meal_type: str, recipe: Recipe) -> bool:
        """Put a snapshot of recipe into a slot, replacing any meal there."""
        if not MealPlan.is_valid_slot(day, meal_type):
            logger.warning(f"Invalid meal slot: {day}/{meal_type}")
            return False

        plan = self._load_for_update(MealPlan.from_dict, MealPlan.empty)
        if plan is None:
            return False
        plan.set_meal(day, meal_type, recipe)
        return self._save_plan(plan)

    def clear_meal(self, day: str, meal_type: str) -> bool:
        """Empty a slot. Clearing an empty slot succeeds."""
        if not MealPlan.is_valid_slot(day, meal_type):
            logger.warning(f"Invalid meal slot: {day}/{meal_type}")
            return False

        plan = self._load_for_update(MealPlan.from_dict, MealPlan.empty)
        if plan is None:
            return False
        plan.clear_meal(day, meal_type)
        return self._save_plan(plan)

    def clear_all(self) -> bool:
        """Reset every slot to empty."""
        return self._save_plan(MealPlan.empty())

    def list_meals(self) -> List[PlannedMeal]:
        """Populated slots, monday to sunday, breakfast to dinner."""
        return list(self.get().iter_meals())

    def auto_generate(self, recipes: Iterable[Recipe]) -> int:
        """
        Replace the plan with recipes assigned to slots in traversal order.

        The previous plan is discarded first. Filling stops when either the
        recipes or the 21 slots run out.

        Returns:
            Number of slots filled, or 0 if the plan could not be saved
        """
        plan = MealPlan.empty()
        slots = plan.iter_slots()
        filled = 0

        for recipe in recipes:
            slot = next(slots, None)
            if slot is None:
                break
            day, meal_type, _ = slot
            plan.set_meal(day, meal_type, recipe)
            filled += 1

        if not self._save_plan(plan):
            return 0
        logger.info(f"Generated meal plan with {filled} meals")
        return filled

    def summary(self) -> PlanSummary:
        return summarize_plan(self.get())

    def daily_nutrition(self, day: str) -> NutritionTotals:
        return daily_nutrition(self.get(), day)
