"""
Application configuration using environment variables.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Storage settings
    sqlite_db: str = Field(default="meal_planner.db", alias="SQLITE_DB")

    # Recipe API (Spoonacular) settings
    spoonacular_api_key: str = Field(default="", alias="SPOONACULAR_API_KEY")
    spoonacular_base_url: str = Field(
        default="https://api.spoonacular.com", alias="SPOONACULAR_BASE_URL"
    )
    recipe_api_timeout: float = Field(default=10.0, alias="RECIPE_API_TIMEOUT")
    search_results_number: int = Field(
        default=12, alias="SEARCH_RESULTS_NUMBER"
    )
    similar_recipes_number: int = Field(
        default=4, alias="SIMILAR_RECIPES_NUMBER"
    )

    # Planner settings
    recent_searches_limit: int = Field(
        default=10, alias="RECENT_SEARCHES_LIMIT"
    )
    daily_calorie_goal: int = Field(default=2000, alias="DAILY_CALORIE_GOAL")

    # FastAPI settings
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    api_reload: bool = Field(default=False, alias="API_RELOAD")
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5500"],
        alias="CORS_ORIGINS",
    )

    # Development settings
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "populate_by_name": True,
    }


# Global settings instance
settings = Settings()
