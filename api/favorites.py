"""
Favorite recipes API endpoints.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from domain.entities import Recipe
from stores import FavoritesStore

from .dependencies import get_favorites_store
from .models import RecipePayload

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/v1/favorites", tags=["favorites"])


@router.get(
    "/",
    response_model=Dict[str, Any],
    summary="List favorites",
)
def list_favorites(
    store: FavoritesStore = Depends(get_favorites_store),
) -> Dict[str, Any]:
    favorites = [favorite.to_dict() for favorite in store.list()]
    return {"favorites": favorites, "total": len(favorites)}


@router.post(
    "/",
    response_model=Dict[str, Any],
    summary="Add favorite",
)
def add_favorite(
    recipe: RecipePayload,
    store: FavoritesStore = Depends(get_favorites_store),
) -> Dict[str, Any]:
    try:
        entity = Recipe.from_dict(recipe.to_recipe_dict())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid recipe: {e}")

    if not store.add(entity):
        raise HTTPException(
            status_code=409,
            detail=f"Recipe {entity.id} is already in favorites",
        )
    logger.info(f"Added recipe {entity.id} to favorites")
    return {"status": "added", "recipe_id": entity.id}


@router.get(
    "/{recipe_id}",
    response_model=Dict[str, Any],
    summary="Check favorite",
)
def is_favorite(
    recipe_id: int,
    store: FavoritesStore = Depends(get_favorites_store),
) -> Dict[str, Any]:
    return {"recipe_id": recipe_id, "favorite": store.contains(recipe_id)}


@router.delete(
    "/{recipe_id}",
    response_model=Dict[str, Any],
    summary="Remove favorite",
)
def remove_favorite(
    recipe_id: int,
    store: FavoritesStore = Depends(get_favorites_store),
) -> Dict[str, Any]:
    if not store.remove(recipe_id):
        raise HTTPException(
            status_code=404, detail=f"Recipe {recipe_id} is not a favorite"
        )
    return {"status": "removed", "recipe_id": recipe_id}


@router.delete(
    "/",
    response_model=Dict[str, Any],
    summary="Clear favorites",
)
def clear_favorites(
    store: FavoritesStore = Depends(get_favorites_store),
) -> Dict[str, Any]:
    if not store.clear():
        raise HTTPException(status_code=500, detail="Failed to clear favorites")
    return {"status": "cleared"}
