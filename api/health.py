"""
Health check API endpoints.

This module provides health check and system status endpoints
for monitoring and diagnostics.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from adapters.recipe_api import SpoonacularClient
from domain.repo_abc import StorageBackend, StorageError
from stores import StorageKeys

from .dependencies import get_recipe_client, get_storage

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get(
    "/",
    response_model=Dict[str, Any],
    summary="Basic health check",
    description="Check if the API is running and responsive",
)
async def health_check() -> Dict[str, Any]:
    """
    Basic health check endpoint.

    Returns basic system information and status.
    """
    return {
        "status": "healthy",
        "service": "meal-planner-api",
        "version": "1.0.0",
        "message": "Meal Planner API is running",
    }


@router.get(
    "/detailed",
    response_model=Dict[str, Any],
    summary="Detailed health check",
    description="Health check including storage and recipe API configuration",
)
def detailed_health_check(
    storage: StorageBackend = Depends(get_storage),
    client: SpoonacularClient = Depends(get_recipe_client),
) -> Dict[str, Any]:
    """
    Detailed health check endpoint.

    Returns comprehensive system status including:
    - Storage readability of every record
    - Recipe API configuration
    """
    health_status = {
        "status": "healthy",
        "service": "meal-planner-api",
        "version": "1.0.0",
        "checks": {},
    }

    try:
        present = [key for key in StorageKeys.all() if storage.get(key) is not None]
        health_status["checks"]["storage"] = {
            "status": "healthy",
            "records": present,
        }
    except StorageError as e:
        logger.error(f"Storage health check failed: {e}")
        health_status["checks"]["storage"] = {
            "status": "unhealthy",
            "error": str(e),
        }
        health_status["status"] = "degraded"

    configured = client.is_configured()
    health_status["checks"]["recipe_api"] = {
        "status": "healthy" if configured else "unconfigured",
        "base_url": client.base_url,
    }
    if not configured:
        health_status["status"] = "degraded"

    return health_status
