"""
HTTP client for the Spoonacular recipe API.

Errors never propagate: failed requests are logged and reported as an empty
result (None for a single recipe, [] for lists). No retries or caching.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from domain.entities import Recipe
from domain.repo_abc import RecipeSource

logger = logging.getLogger(__name__)

PLACEHOLDER_KEYS = ("", "YOUR_API_KEY_HERE")


class SpoonacularClient(RecipeSource):
    """Async client for recipe search and lookup."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.spoonacular.com",
        timeout: float = 10.0,
        search_number: int = 12,
        similar_number: int = 4,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client; pass ``client`` to supply a transport."""
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.search_number = search_number
        self.similar_number = similar_number
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    def is_configured(self) -> bool:
        """Check whether a real API key is set."""
        if self.api_key in PLACEHOLDER_KEYS:
            logger.error("Spoonacular API key not configured")
            return False
        return True

    async def _get(
        self, path: str, params: Optional[Dict[str, Any]] = None
    ) -> Optional[Any]:
        """GET a JSON document, or None on any HTTP/decoding failure."""
        query = {"apiKey": self.api_key}
        query.update(
            {key: value for key, value in (params or {}).items() if value is not None}
        )

        try:
            response = await self.client.get(f"{self.base_url}{path}", params=query)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Recipe API error: {e.response.status_code} "
                f"{e.response.reason_phrase} for {path}"
            )
        except httpx.HTTPError as e:
            logger.error(f"Recipe API request failed for {path}: {e}")
        except ValueError as e:
            logger.error(f"Recipe API returned invalid JSON for {path}: {e}")
        return None

    @staticmethod
    def _parse_recipes(items: Any) -> List[Recipe]:
        recipes = []
        for item in items or []:
            try:
                recipes.append(Recipe.from_dict(item))
            except ValueError as e:
                logger.warning(f"Skipping malformed recipe from API: {e}")
        return recipes

    async def search_recipes(self, query: str = "", **filters) -> List[Recipe]:
        """
        Search recipes.

        Args:
            query: Free-text query
            **filters: Extra API parameters (cuisine, diet, maxReadyTime, ...)

        Returns:
            Matching recipes, [] on failure
        """
        params = {
            "query": query or "",
            "number": self.search_number,
            "addRecipeInformation": "true",
            "fillIngredients": "true",
        }
        params.update(filters)

        data = await self._get("/recipes/complexSearch", params)
        if not isinstance(data, dict):
            return []
        return self._parse_recipes(data.get("results"))

    async def get_recipe_by_id(self, recipe_id: int) -> Optional[Recipe]:
        """Get full recipe details including nutrition."""
        data = await self._get(
            f"/recipes/{recipe_id}/information", {"includeNutrition": "true"}
        )
        if not isinstance(data, dict):
            return None
        try:
            return Recipe.from_dict(data)
        except ValueError as e:
            logger.error(f"Malformed recipe {recipe_id} from API: {e}")
            return None

    async def get_similar_recipes(self, recipe_id: int) -> List[Recipe]:
        data = await self._get(
            f"/recipes/{recipe_id}/similar", {"number": self.similar_number}
        )
        if not isinstance(data, list):
            return []
        return self._parse_recipes(data)

    async def get_random_recipes(
        self, count: int = 6, tags: str = ""
    ) -> List[Recipe]:
        data = await self._get(
            "/recipes/random", {"number": count, "tags": tags or None}
        )
        if not isinstance(data, dict):
            return []
        return self._parse_recipes(data.get("recipes"))

    async def get_recipes_by_cuisine(
        self, cuisine: str, count: int = 12
    ) -> List[Recipe]:
        return await self.search_recipes("", cuisine=cuisine, number=count)

    async def get_recipes_by_diet(self, diet: str, count: int = 12) -> List[Recipe]:
        return await self.search_recipes("", diet=diet, number=count)
