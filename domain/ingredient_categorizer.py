"""
Ingredient categorization utility.

This module maps a free-text aisle hint (or, failing that, an ingredient
name) to one of the fixed shopping categories for better shopping list
organization.
"""

from typing import Dict, List, Optional

from .entities import Category


class IngredientCategorizer:
    """Categorizes ingredients based on aisle/name keywords."""

    # Rules are checked in order; the first rule with a matching keyword wins.
    CATEGORY_RULES = (
        (Category.PRODUCE, ("produce", "vegetable", "fruit")),
        (Category.MEAT, ("meat", "seafood", "poultry")),
        (Category.DAIRY, ("dairy", "cheese", "milk")),
        (Category.GRAINS, ("bread", "bakery", "grain")),
        (Category.SPICES, ("spice", "condiment", "oil")),
        (Category.PANTRY, ("canned", "jar")),
    )

    # Display order of categories on the shopping list
    CATEGORY_ORDER = (
        Category.PRODUCE,
        Category.MEAT,
        Category.DAIRY,
        Category.GRAINS,
        Category.PANTRY,
        Category.SPICES,
        Category.OTHER,
    )

    @classmethod
    def categorize_ingredient(cls, hint: Optional[str]) -> Category:
        """
        Categorize an ingredient from its aisle or name.

        Args:
            hint: Aisle text or ingredient name; None is treated as empty

        Returns:
            The first matching category, or Category.OTHER
        """
        hint_lower = str(hint or "").lower()

        for category, keywords in cls.CATEGORY_RULES:
            if any(keyword in hint_lower for keyword in keywords):
                return category
        return Category.OTHER

    @classmethod
    def categorize_ingredients(cls, ingredients: list) -> Dict[Category, List]:
        """
        Group ingredients by category.

        Args:
            ingredients: Ingredient objects, dicts with 'aisle'/'name' keys,
                or plain strings

        Returns:
            Dictionary mapping categories to lists of ingredients
        """
        categorized: Dict[Category, List] = {}

        for ingredient in ingredients:
            if isinstance(ingredient, dict):
                hint = ingredient.get("aisle") or ingredient.get("name", "")
            elif hasattr(ingredient, "category_hint"):
                hint = ingredient.category_hint
            else:
                hint = str(ingredient)

            category = cls.categorize_ingredient(hint)
            categorized.setdefault(category, []).append(ingredient)

        return categorized

    @classmethod
    def get_category_display_name(cls, category) -> str:
        """
        Get a display-friendly name for a category.

        Args:
            category: Category or its string value

        Returns:
            Display name for the category
        """
        display_names = {
            Category.PRODUCE: "Produce",
            Category.MEAT: "Meat & Seafood",
            Category.DAIRY: "Dairy",
            Category.GRAINS: "Bread & Grains",
            Category.PANTRY: "Pantry",
            Category.SPICES: "Spices & Condiments",
            Category.OTHER: "Other",
        }
        if isinstance(category, Category):
            return display_names[category]
        try:
            return display_names[Category(category)]
        except ValueError:
            return str(category).title()


def categorize(hint: Optional[str]) -> Category:
    """Map an aisle/name hint to a shopping category."""
    return IngredientCategorizer.categorize_ingredient(hint)
