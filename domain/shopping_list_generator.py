"""
Shopping list generation utility.

This module turns a meal plan into a merged, categorized list of
ingredients. Ingredients are merged by their exact name (case-sensitive);
the first occurrence fixes the unit and category and later occurrences only
add to the amount.
"""

from typing import Dict, Iterable, List, Optional

from .entities import AggregatedIngredient, MealPlan, Recipe
from .ingredient_categorizer import IngredientCategorizer


class ShoppingListGenerator:
    """Aggregates recipe ingredients into shopping list entries."""

    @classmethod
    def generate_from_plan(cls, plan: MealPlan) -> List[AggregatedIngredient]:
        """
        Generate aggregated ingredients from every populated slot of a plan.

        Slots are walked monday to sunday, breakfast to dinner.

        Args:
            plan: Meal plan to read

        Returns:
            List of aggregated ingredients in first-encountered order
        """
        return cls.generate_from_recipes(meal.recipe for meal in plan.iter_meals())

    @classmethod
    def generate_from_recipes(
        cls, recipes: Iterable[Optional[Recipe]]
    ) -> List[AggregatedIngredient]:
        """Merge the ingredients of ``recipes`` in the given order."""
        merged: Dict[str, AggregatedIngredient] = {}

        for recipe in recipes:
            if recipe is None or not recipe.extended_ingredients:
                continue

            for ingredient in recipe.extended_ingredients:
                name = ingredient.name
                amount = ingredient.amount or 0

                existing = merged.get(name)
                if existing is not None:
                    existing.amount += amount
                    continue

                merged[name] = AggregatedIngredient(
                    name=name,
                    category=IngredientCategorizer.categorize_ingredient(
                        ingredient.category_hint
                    ),
                    amount=amount,
                    unit=ingredient.unit or "",
                )

        # dicts keep insertion order
        return list(merged.values())


def generate_from_plan(plan: MealPlan) -> List[AggregatedIngredient]:
    """Aggregate a meal plan into categorized shopping entries."""
    return ShoppingListGenerator.generate_from_plan(plan)
