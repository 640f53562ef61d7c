"""
Meal Planner FastAPI application.

This is the main entry point for the Meal Planner API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import (
    favorites_router,
    health_router,
    meal_plan_router,
    preferences_router,
    recipes_router,
    shopping_router,
)
from api.dependencies import shutdown
from api.middleware import LoggingMiddleware
from config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Meal Planner API started successfully")

    yield

    # Close the recipe client and database connections
    await shutdown()
    logger.info("Meal Planner API stopped")


app = FastAPI(
    title="Meal Planner API",
    description="Weekly meal planning, favorites and shopping list management",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)

# Include API routers
app.include_router(health_router)
app.include_router(meal_plan_router)
app.include_router(shopping_router)
app.include_router(favorites_router)
app.include_router(recipes_router)
app.include_router(preferences_router)


@app.get("/")
def read_root():
    """Root endpoint with API information."""
    return {
        "message": "Meal Planner API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health/",
        "meal_plan": "/api/v1/meal-plan/",
        "shopping": "/api/v1/shopping/items",
        "favorites": "/api/v1/favorites/",
        "recipes": "/api/v1/recipes/search",
        "preferences": "/api/v1/preferences/",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
