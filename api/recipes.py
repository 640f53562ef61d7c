"""
Recipe API endpoints.

This module proxies recipe search and lookup to the recipe data source
and records searches in the recent-search log.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from adapters.recipe_api import SpoonacularClient
from stores import FavoritesStore, RecentSearchesStore

from .dependencies import (
    get_favorites_store,
    get_recent_searches_store,
    get_recipe_client,
)

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


def require_configured(client: SpoonacularClient) -> None:
    if not client.is_configured():
        raise HTTPException(status_code=503, detail="Recipe API not configured")


@router.get(
    "/search",
    response_model=Dict[str, Any],
    summary="Search recipes",
    description="Search recipes with optional filters",
)
async def search_recipes(
    query: str = Query("", max_length=200, description="Search query"),
    cuisine: Optional[str] = Query(None, description="Cuisine filter"),
    diet: Optional[str] = Query(None, description="Diet filter"),
    max_ready_time: Optional[int] = Query(
        None, ge=1, le=1440, description="Maximum ready time in minutes"
    ),
    client: SpoonacularClient = Depends(get_recipe_client),
    searches: RecentSearchesStore = Depends(get_recent_searches_store),
    favorites: FavoritesStore = Depends(get_favorites_store),
) -> Dict[str, Any]:
    require_configured(client)
    logger.info(f"Searching recipes with query: {query}")

    filters = {
        "cuisine": cuisine,
        "diet": diet,
        "maxReadyTime": max_ready_time,
    }
    recipes = await client.search_recipes(
        query, **{key: value for key, value in filters.items() if value}
    )
    searches.add(query)

    return {
        "recipes": [
            {**recipe.to_dict(), "favorite": favorites.contains(recipe.id)}
            for recipe in recipes
        ],
        "total": len(recipes),
        "query": query,
    }


@router.get(
    "/random",
    response_model=Dict[str, Any],
    summary="Random recipes",
)
async def random_recipes(
    count: int = Query(6, ge=1, le=21, description="Number of recipes"),
    tags: str = Query("", max_length=200, description="Comma-separated tags"),
    client: SpoonacularClient = Depends(get_recipe_client),
) -> Dict[str, Any]:
    require_configured(client)
    recipes = await client.get_random_recipes(count, tags)
    return {
        "recipes": [recipe.to_dict() for recipe in recipes],
        "total": len(recipes),
    }


@router.get(
    "/{recipe_id}",
    response_model=Dict[str, Any],
    summary="Get recipe by ID",
)
async def get_recipe(
    recipe_id: int,
    client: SpoonacularClient = Depends(get_recipe_client),
    favorites: FavoritesStore = Depends(get_favorites_store),
) -> Dict[str, Any]:
    require_configured(client)
    recipe = await client.get_recipe_by_id(recipe_id)
    if recipe is None:
        raise HTTPException(
            status_code=404, detail=f"Recipe with ID {recipe_id} not found"
        )
    return {
        "recipe": recipe.to_dict(),
        "favorite": favorites.contains(recipe.id),
    }


@router.get(
    "/{recipe_id}/similar",
    response_model=Dict[str, Any],
    summary="Similar recipes",
)
async def similar_recipes(
    recipe_id: int,
    client: SpoonacularClient = Depends(get_recipe_client),
) -> Dict[str, Any]:
    require_configured(client)
    recipes = await client.get_similar_recipes(recipe_id)
    return {
        "recipes": [recipe.to_dict() for recipe in recipes],
        "total": len(recipes),
    }
