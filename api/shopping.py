"""
Shopping list management API endpoints.

This module provides REST API endpoints for the shopping list: manual item
management and generation from the meal plan.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query

from adapters.recipe_api import SpoonacularClient
from domain.ingredient_categorizer import IngredientCategorizer
from domain.shopping_list_generator import generate_from_plan
from stores import MealPlanStore, ShoppingListStore

from .dependencies import (
    get_meal_plan_store,
    get_recipe_client,
    get_shopping_list_store,
)
from .models import ShoppingItemCreate

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/v1/shopping", tags=["shopping"])


def serialize_shopping_list(store: ShoppingListStore) -> Dict[str, Any]:
    """Serialize the shopping list with category groups and counts."""
    groups = store.grouped_by_category()
    return {
        "items": [item.to_dict() for item in store.list()],
        "categories": [
            {
                "category": category.value,
                "display_name": IngredientCategorizer.get_category_display_name(
                    category
                ),
                "items": [item.to_dict() for item in items],
                "count": len(items),
            }
            for category, items in groups.items()
        ],
        **store.counts(),
    }


@router.get(
    "/items",
    response_model=Dict[str, Any],
    summary="Get shopping list",
    description="Get all shopping list items grouped by category",
)
def get_shopping_list(
    store: ShoppingListStore = Depends(get_shopping_list_store),
) -> Dict[str, Any]:
    return serialize_shopping_list(store)


@router.post(
    "/items",
    response_model=Dict[str, Any],
    summary="Add item to shopping list",
)
def add_item(
    item: ShoppingItemCreate,
    store: ShoppingListStore = Depends(get_shopping_list_store),
) -> Dict[str, Any]:
    logger.info(f"Adding shopping item: {item.name}")
    if not store.add(item.name, item.category):
        if not item.name.strip():
            raise HTTPException(
                status_code=400, detail="Item name cannot be blank"
            )
        if store.find_by_name(item.name) is not None:
            raise HTTPException(
                status_code=409,
                detail=f"Item '{item.name}' already exists in shopping list",
            )
        raise HTTPException(
            status_code=500, detail="Failed to save shopping list"
        )
    return {"status": "added", **serialize_shopping_list(store)}


@router.post(
    "/items/{item_id}/toggle",
    response_model=Dict[str, Any],
    summary="Toggle item checked state",
)
def toggle_item(
    item_id: str,
    store: ShoppingListStore = Depends(get_shopping_list_store),
) -> Dict[str, Any]:
    if not store.toggle(item_id):
        raise HTTPException(
            status_code=404, detail=f"Item with ID {item_id} not found"
        )
    item = store.get_item(item_id)
    return {"status": "toggled", "item": item.to_dict() if item else None}


@router.delete(
    "/items/{item_id}",
    response_model=Dict[str, Any],
    summary="Remove item from shopping list",
)
def remove_item(
    item_id: str,
    store: ShoppingListStore = Depends(get_shopping_list_store),
) -> Dict[str, Any]:
    if not store.remove(item_id):
        raise HTTPException(
            status_code=404, detail=f"Item with ID {item_id} not found"
        )
    return {"status": "removed", "item_id": item_id}


@router.delete(
    "/items",
    response_model=Dict[str, Any],
    summary="Clear shopping list",
)
def clear_shopping_list(
    store: ShoppingListStore = Depends(get_shopping_list_store),
) -> Dict[str, Any]:
    if not store.clear():
        raise HTTPException(
            status_code=500, detail="Failed to clear shopping list"
        )
    return {"status": "cleared"}


@router.get(
    "/preview",
    response_model=Dict[str, Any],
    summary="Preview generated list",
    description="Aggregate ingredients from the meal plan without saving",
)
def preview_from_plan(
    plan_store: MealPlanStore = Depends(get_meal_plan_store),
) -> Dict[str, Any]:
    items = generate_from_plan(plan_store.get())
    return {"items": [item.to_dict() for item in items], "total": len(items)}


@router.post(
    "/generate",
    response_model=Dict[str, Any],
    summary="Generate list from meal plan",
    description="Aggregate the meal plan's ingredients into the shopping "
    "list, replacing it unless replace=false",
)
def generate_from_meal_plan(
    replace: bool = Query(True, description="Clear the list first"),
    plan_store: MealPlanStore = Depends(get_meal_plan_store),
    store: ShoppingListStore = Depends(get_shopping_list_store),
) -> Dict[str, Any]:
    items = generate_from_plan(plan_store.get())
    if not items:
        raise HTTPException(
            status_code=400, detail="No meals in your meal plan"
        )

    if replace and not store.clear():
        raise HTTPException(
            status_code=500, detail="Failed to clear shopping list"
        )

    added = store.commit_generated(items)
    logger.info(f"Generated shopping list: {added}/{len(items)} items added")
    return {
        "status": "generated",
        "generated": len(items),
        "added": added,
        **serialize_shopping_list(store),
    }


@router.post(
    "/recipes/{recipe_id}",
    response_model=Dict[str, Any],
    summary="Add recipe ingredients",
    description="Fetch a recipe and add its ingredients to the list",
)
async def add_recipe_ingredients(
    recipe_id: int,
    store: ShoppingListStore = Depends(get_shopping_list_store),
    client: SpoonacularClient = Depends(get_recipe_client),
) -> Dict[str, Any]:
    if not client.is_configured():
        raise HTTPException(status_code=503, detail="Recipe API not configured")

    recipe = await client.get_recipe_by_id(recipe_id)
    if recipe is None or not recipe.extended_ingredients:
        raise HTTPException(
            status_code=404,
            detail=f"No ingredients found for recipe {recipe_id}",
        )

    added = store.add_recipe_ingredients(recipe)
    return {"status": "added", "added": added, "recipe_id": recipe_id}
