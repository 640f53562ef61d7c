"""
User preferences and recent search API endpoints.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from domain.entities import UserPreferences
from stores import PreferencesStore, RecentSearchesStore

from .dependencies import get_preferences_store, get_recent_searches_store
from .models import PreferencesUpdate

# Create router
router = APIRouter(prefix="/api/v1/preferences", tags=["preferences"])


@router.get("/", response_model=Dict[str, Any], summary="Get preferences")
def get_preferences(
    store: PreferencesStore = Depends(get_preferences_store),
) -> Dict[str, Any]:
    return store.get().to_dict()


@router.put("/", response_model=Dict[str, Any], summary="Save preferences")
def save_preferences(
    update: PreferencesUpdate,
    store: PreferencesStore = Depends(get_preferences_store),
) -> Dict[str, Any]:
    preferences = UserPreferences(
        diet=update.diet,
        cuisine=update.cuisine,
        max_time=update.max_time,
        allergies=update.allergies,
    )
    if not store.save(preferences):
        raise HTTPException(status_code=500, detail="Failed to save preferences")
    return preferences.to_dict()


@router.get(
    "/recent-searches",
    response_model=Dict[str, Any],
    summary="Recent searches",
)
def get_recent_searches(
    store: RecentSearchesStore = Depends(get_recent_searches_store),
) -> Dict[str, Any]:
    return {"searches": store.list()}


@router.delete(
    "/recent-searches",
    response_model=Dict[str, Any],
    summary="Clear recent searches",
)
def clear_recent_searches(
    store: RecentSearchesStore = Depends(get_recent_searches_store),
) -> Dict[str, Any]:
    if not store.clear():
        raise HTTPException(
            status_code=500, detail="Failed to clear recent searches"
        )
    return {"status": "cleared"}
