"""
Meal plan API endpoints.

This module provides REST API endpoints for the weekly meal plan:
viewing, filling and clearing slots, auto-generation and summaries.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from adapters.recipe_api import SpoonacularClient
from config import settings
from domain.entities import (
    DAYS,
    MEAL_TYPES,
    TOTAL_SLOTS,
    MealPlan,
    Recipe,
    get_week_dates,
)
from stores import MealPlanStore

from .dependencies import get_meal_plan_store, get_recipe_client
from .models import AutoGenerateRequest, RecipePayload

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/v1/meal-plan", tags=["meal-plan"])


def validate_slot(day: str, meal_type: str) -> None:
    """Reject unknown days or meal types."""
    if not MealPlan.is_valid_day(day):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid day: {day}. Must be one of: {', '.join(DAYS)}",
        )
    if meal_type not in MEAL_TYPES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid meal type: {meal_type}. "
            f"Must be one of: {', '.join(MEAL_TYPES)}",
        )


def payload_to_recipe(payload: RecipePayload) -> Recipe:
    try:
        return Recipe.from_dict(payload.to_recipe_dict())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid recipe: {e}")


def serialize_meals(store: MealPlanStore) -> list:
    return [
        {
            "day": meal.day,
            "meal_type": meal.meal_type,
            "recipe": meal.recipe.to_dict(),
        }
        for meal in store.list_meals()
    ]


@router.get(
    "/",
    response_model=Dict[str, Any],
    summary="Get meal plan",
    description="Get the full 7-day meal plan with summary statistics",
)
def get_meal_plan(
    store: MealPlanStore = Depends(get_meal_plan_store),
) -> Dict[str, Any]:
    plan = store.get()
    week = get_week_dates()
    return {
        "plan": plan.to_dict(),
        "summary": store.summary().to_dict(),
        "week": {day: value.isoformat() for day, value in week.items()},
    }


@router.get(
    "/meals",
    response_model=Dict[str, Any],
    summary="List planned meals",
    description="List populated slots in day and meal order",
)
def list_meals(
    store: MealPlanStore = Depends(get_meal_plan_store),
) -> Dict[str, Any]:
    meals = serialize_meals(store)
    return {"meals": meals, "total": len(meals)}


@router.get(
    "/summary",
    response_model=Dict[str, Any],
    summary="Meal plan summary",
)
def get_summary(
    store: MealPlanStore = Depends(get_meal_plan_store),
) -> Dict[str, Any]:
    return store.summary().to_dict()


@router.get(
    "/nutrition/{day}",
    response_model=Dict[str, Any],
    summary="Daily nutrition",
    description="Calories and macros for one day of the plan",
)
def get_daily_nutrition(
    day: str,
    store: MealPlanStore = Depends(get_meal_plan_store),
) -> Dict[str, Any]:
    if not MealPlan.is_valid_day(day):
        raise HTTPException(status_code=400, detail=f"Invalid day: {day}")

    totals = store.daily_nutrition(day)
    return {
        "day": day,
        "totals": totals.to_dict(),
        "calorie_goal": settings.daily_calorie_goal,
        "calorie_progress": round(
            totals.calorie_progress(settings.daily_calorie_goal), 1
        ),
    }


@router.put(
    "/{day}/{meal_type}",
    response_model=Dict[str, Any],
    summary="Set meal",
    description="Put a recipe into a meal slot, replacing any meal there",
)
def set_meal(
    day: str,
    meal_type: str,
    recipe: RecipePayload,
    store: MealPlanStore = Depends(get_meal_plan_store),
) -> Dict[str, Any]:
    validate_slot(day, meal_type)
    entity = payload_to_recipe(recipe)

    logger.info(f"Setting {day}/{meal_type} to recipe {entity.id}")
    if not store.set_meal(day, meal_type, entity):
        raise HTTPException(status_code=500, detail="Failed to save meal plan")

    return {"status": "updated", "day": day, "meal_type": meal_type}


@router.post(
    "/{day}/{meal_type}/recipes/{recipe_id}",
    response_model=Dict[str, Any],
    summary="Add recipe by ID",
    description="Fetch a recipe from the recipe API and put it into a slot",
)
async def add_recipe_by_id(
    day: str,
    meal_type: str,
    recipe_id: int,
    store: MealPlanStore = Depends(get_meal_plan_store),
    client: SpoonacularClient = Depends(get_recipe_client),
) -> Dict[str, Any]:
    validate_slot(day, meal_type)
    if not client.is_configured():
        raise HTTPException(status_code=503, detail="Recipe API not configured")

    recipe = await client.get_recipe_by_id(recipe_id)
    if recipe is None:
        raise HTTPException(
            status_code=404, detail=f"Recipe with ID {recipe_id} not found"
        )

    if not store.set_meal(day, meal_type, recipe):
        raise HTTPException(status_code=500, detail="Failed to save meal plan")

    return {
        "status": "updated",
        "day": day,
        "meal_type": meal_type,
        "recipe": recipe.to_dict(),
    }


@router.delete(
    "/{day}/{meal_type}",
    response_model=Dict[str, Any],
    summary="Remove meal",
)
def clear_meal(
    day: str,
    meal_type: str,
    store: MealPlanStore = Depends(get_meal_plan_store),
) -> Dict[str, Any]:
    validate_slot(day, meal_type)
    if not store.clear_meal(day, meal_type):
        raise HTTPException(status_code=500, detail="Failed to save meal plan")
    return {"status": "cleared", "day": day, "meal_type": meal_type}


@router.delete(
    "/",
    response_model=Dict[str, Any],
    summary="Clear meal plan",
)
def clear_meal_plan(
    store: MealPlanStore = Depends(get_meal_plan_store),
) -> Dict[str, Any]:
    if not store.clear_all():
        raise HTTPException(status_code=500, detail="Failed to clear meal plan")
    return {"status": "cleared"}


@router.post(
    "/generate",
    response_model=Dict[str, Any],
    summary="Auto-generate meal plan",
    description="Replace the plan with the given recipes, or with random "
    "recipes from the recipe API when none are given",
)
async def generate_meal_plan(
    request: Optional[AutoGenerateRequest] = Body(None),
    store: MealPlanStore = Depends(get_meal_plan_store),
    client: SpoonacularClient = Depends(get_recipe_client),
) -> Dict[str, Any]:
    request = request or AutoGenerateRequest()

    if request.recipes is not None:
        recipes = [payload_to_recipe(payload) for payload in request.recipes]
    else:
        if not client.is_configured():
            raise HTTPException(
                status_code=503, detail="Recipe API not configured"
            )
        recipes = await client.get_random_recipes(TOTAL_SLOTS, request.tags)

    if not recipes:
        raise HTTPException(status_code=502, detail="No recipes returned")

    filled = store.auto_generate(recipes)
    if filled == 0:
        raise HTTPException(status_code=500, detail="Failed to save meal plan")

    return {
        "status": "generated",
        "meals_added": filled,
        "summary": store.summary().to_dict(),
    }
