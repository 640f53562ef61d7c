"""
Pydantic models for API validation.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IngredientPayload(BaseModel):
    """An ingredient line as sent by the recipe API."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., max_length=200, description="Ingredient name")
    amount: Optional[float] = Field(None, description="Quantity")
    unit: Optional[str] = Field(None, max_length=50, description="Unit")
    aisle: Optional[str] = Field(None, max_length=200, description="Aisle")


class RecipePayload(BaseModel):
    """A recipe record; unknown fields are kept as part of the snapshot."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int = Field(..., description="Recipe ID")
    title: str = Field(default="", max_length=500, description="Recipe title")
    extended_ingredients: Optional[List[IngredientPayload]] = Field(
        None, alias="extendedIngredients", description="Recipe ingredients"
    )
    nutrition: Optional[Dict[str, Any]] = Field(
        None, description="Nutrition facts"
    )

    @field_validator("extended_ingredients")
    @classmethod
    def validate_ingredients(cls, v):
        """Validate ingredients list."""
        if v is not None and len(v) > 100:
            raise ValueError("Too many ingredients (max 100)")
        return v

    def to_recipe_dict(self) -> Dict[str, Any]:
        """Dump using the recipe API's field names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ShoppingItemCreate(BaseModel):
    """Model for creating a shopping list item."""

    name: str = Field(
        ..., min_length=1, max_length=100, description="Item name"
    )
    category: Optional[str] = Field(
        None, max_length=50, description="Item category"
    )


class AutoGenerateRequest(BaseModel):
    """Recipes to fill the plan with; fetched at random when omitted."""

    recipes: Optional[List[RecipePayload]] = Field(
        None, description="Recipes in slot order"
    )
    tags: str = Field(default="", max_length=200, description="Random recipe tags")

    @field_validator("recipes")
    @classmethod
    def validate_recipes(cls, v):
        """Validate recipes list."""
        if v is not None and len(v) > 50:
            raise ValueError("Too many recipes (max 50)")
        return v


class PreferencesUpdate(BaseModel):
    """Model for replacing user preferences."""

    diet: str = Field(default="", max_length=50)
    cuisine: str = Field(default="", max_length=50)
    max_time: str = Field(default="", alias="maxTime", max_length=10)
    allergies: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("allergies")
    @classmethod
    def validate_allergies(cls, v):
        """Validate allergies list."""
        if len(v) > 20:
            raise ValueError("Too many allergies (max 20)")
        return v
