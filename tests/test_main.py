import inspect

from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from config import Settings
from main import app

client = TestClient(app)


def test_read_root():
    """Test the root endpoint returns proper API information."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()

    # Verify API information structure
    assert data["message"] == "Meal Planner API"
    assert data["version"] == "1.0.0"
    assert data["docs"] == "/docs"
    assert data["health"] == "/api/v1/health/"
    assert data["meal_plan"] == "/api/v1/meal-plan/"
    assert data["shopping"] == "/api/v1/shopping/items"
    assert data["favorites"] == "/api/v1/favorites/"


def test_health_check():
    """Test the basic health check endpoint."""
    response = client.get("/api/v1/health/")
    assert response.status_code == 200
    data = response.json()

    assert data["status"] == "healthy"
    assert data["service"] == "meal-planner-api"
    assert data["version"] == "1.0.0"


def test_routes_registered():
    """Every router is mounted under /api/v1."""
    paths = {route.path for route in app.routes}

    for path in (
        "/api/v1/meal-plan/{day}/{meal_type}",
        "/api/v1/meal-plan/generate",
        "/api/v1/shopping/items",
        "/api/v1/shopping/generate",
        "/api/v1/favorites/",
        "/api/v1/recipes/search",
        "/api/v1/preferences/recent-searches",
    ):
        assert path in paths


def test_settings_from_environment(monkeypatch):
    """Test settings are read from environment variables."""
    monkeypatch.setenv("SPOONACULAR_API_KEY", "abc123")
    monkeypatch.setenv("RECENT_SEARCHES_LIMIT", "5")

    settings = Settings(_env_file=None)

    assert settings.spoonacular_api_key == "abc123"
    assert settings.recent_searches_limit == 5
    assert settings.daily_calorie_goal == 2000


def test_store_only_endpoints_are_sync():
    """Endpoints that never await run in the thread pool, not on the loop."""
    endpoints = {
        route.endpoint.__name__: route.endpoint
        for route in app.routes
        if isinstance(route, APIRoute)
    }

    for name in (
        "get_meal_plan",
        "set_meal",
        "clear_meal",
        "get_shopping_list",
        "add_item",
        "generate_from_meal_plan",
        "list_favorites",
        "add_favorite",
        "save_preferences",
        "detailed_health_check",
    ):
        assert not inspect.iscoroutinefunction(endpoints[name]), name

    for name in ("add_recipe_by_id", "generate_meal_plan", "search_recipes"):
        assert inspect.iscoroutinefunction(endpoints[name]), name
