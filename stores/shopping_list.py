"""
Persisted, user-editable shopping list.
"""

import logging
from typing import Dict, Iterable, List, Optional

from domain.entities import (
    AggregatedIngredient,
    Category,
    Recipe,
    ShoppingItem,
)
from domain.ingredient_categorizer import IngredientCategorizer

from .base import JsonRecordStore, StorageKeys

logger = logging.getLogger(__name__)


def _parse_items(data) -> List[ShoppingItem]:
    if not isinstance(data, list):
        raise ValueError("shopping list must be a list")
    return [ShoppingItem.from_dict(item) for item in data if isinstance(item, dict)]


class ShoppingListStore(JsonRecordStore):
    """Shopping items in insertion order, unique by case-insensitive name."""

    key = StorageKeys.SHOPPING_LIST

    def list(self) -> List[ShoppingItem]:
        return self._load(_parse_items, list)

    def _items_for_update(self) -> Optional[List[ShoppingItem]]:
        return self._load_for_update(_parse_items, list)

    def _save_items(self, items: List[ShoppingItem]) -> bool:
        return self._save([item.to_dict() for item in items])

    def get_item(self, item_id: str) -> Optional[ShoppingItem]:
        for item in self.list():
            if item.id == item_id:
                return item
        return None

    def find_by_name(self, name: str) -> Optional[ShoppingItem]:
        """Item whose name matches ignoring case and surrounding spaces."""
        wanted = (name or "").strip().lower()
        for item in self.list():
            if item.name.lower() == wanted:
                return item
        return None

    def add(
        self,
        name: str,
        category=None,
        amount: Optional[float] = None,
        unit: Optional[str] = None,
    ) -> bool:
        """
        Append a new unchecked item.

        Returns False without changes when the name is blank, an item with
        the same name (ignoring case) already exists, or storage fails.
        """
        name = (name or "").strip()
        if not name:
            return False

        items = self._items_for_update()
        if items is None:
            return False
        if any(item.name.lower() == name.lower() for item in items):
            logger.debug(f"Item already in shopping list: {name}")
            return False

        items.append(
            ShoppingItem(
                name=name,
                category=Category.coerce(category),
                amount=amount,
                unit=unit or None,
            )
        )
        return self._save_items(items)

    def toggle(self, item_id: str) -> bool:
        """Flip the checked flag; False if no item has that id."""
        items = self._items_for_update()
        if items is None:
            return False
        for item in items:
            if item.id == item_id:
                item.checked = not item.checked
                return self._save_items(items)
        return False

    def remove(self, item_id: str) -> bool:
        """Delete the item; False if no item has that id."""
        items = self._items_for_update()
        if items is None:
            return False
        remaining = [item for item in items if item.id != item_id]
        if len(remaining) == len(items):
            return False
        return self._save_items(remaining)

    def clear(self) -> bool:
        return self._save([])

    def commit_generated(self, items: Iterable[AggregatedIngredient]) -> int:
        """
        Add generated entries through the regular add path.

        Does not clear the list first; callers that want to replace the list
        call clear() beforehand.

        Returns:
            Number of items actually added
        """
        added = 0
        for entry in items:
            if self.add(
                entry.name,
                entry.category,
                amount=entry.amount,
                unit=entry.unit,
            ):
                added += 1
        return added

    def add_recipe_ingredients(self, recipe: Optional[Recipe]) -> int:
        """Add every ingredient of a recipe; returns the number added."""
        if recipe is None or not recipe.extended_ingredients:
            return 0

        added = 0
        for ingredient in recipe.extended_ingredients:
            category = IngredientCategorizer.categorize_ingredient(
                ingredient.category_hint
            )
            if self.add(ingredient.name, category):
                added += 1
        return added

    def grouped_by_category(self) -> Dict[Category, List[ShoppingItem]]:
        """Items grouped in display order; empty categories are omitted."""
        groups: Dict[Category, List[ShoppingItem]] = {}
        items = self.list()
        for category in IngredientCategorizer.CATEGORY_ORDER:
            members = [item for item in items if item.category == category]
            if members:
                groups[category] = members
        return groups

    def counts(self) -> Dict[str, int]:
        items = self.list()
        checked = sum(1 for item in items if item.checked)
        return {
            "total": len(items),
            "checked": checked,
            "remaining": len(items) - checked,
        }
