"""
Input validation schemas using Pydantic.

The *Input models validate API request bodies; the *Record models validate the
persisted JSON documents before anything reaches the catalog.
"""
from decimal import Decimal
from typing import List

from pydantic import AliasChoices, BaseModel, Field, field_validator

from grocery.utilities.constants import DEFAULT_SERVINGS, DEFAULT_UNIT


def _strip(v):
    if isinstance(v, str):
        return v.strip()
    return v


class IngredientInput(BaseModel):
    """Schema for a new catalog ingredient."""
    name: str = Field(..., min_length=1, max_length=100)
    price_per_unit: Decimal = Field(..., ge=0)
    unit: str = Field(DEFAULT_UNIT, max_length=20)

    @field_validator('name', 'unit', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return _strip(v)


class PriceUpdateInput(BaseModel):
    price_per_unit: Decimal = Field(..., ge=0)


class RecipeLineInput(BaseModel):
    """Schema for one ingredient line of a recipe."""
    ingredient_name: str = Field(..., min_length=1, max_length=100)
    quantity: Decimal = Field(..., gt=0)

    @field_validator('ingredient_name', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)


class RecipeInput(BaseModel):
    """Schema for recipe input validation."""
    name: str = Field(..., min_length=1, max_length=200)
    servings: int = Field(DEFAULT_SERVINGS, ge=1)
    ingredients: List[RecipeLineInput] = Field(default_factory=list)

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        return _strip(v)


class GroceryListRequest(BaseModel):
    """Recipe names to combine, in selection order."""
    recipes: List[str] = Field(default_factory=list)


# --- Persisted documents ----------------------------------------------------
class IngredientRecord(BaseModel):
    name: str = Field(..., min_length=1, validation_alias=AliasChoices('name', 'Name'))
    price_per_unit: Decimal = Field(
        ..., ge=0, validation_alias=AliasChoices('pricePerUnit', 'PricePerUnit', 'price_per_unit')
    )
    unit: str = Field(DEFAULT_UNIT, validation_alias=AliasChoices('unit', 'Unit'))

    @field_validator('name', 'unit', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        return "" if v is None else _strip(v)

    @field_validator('unit')
    @classmethod
    def default_unit(cls, v):
        return v or DEFAULT_UNIT


class RecipeLineRecord(BaseModel):
    ingredient_name: str = Field(
        ..., min_length=1, validation_alias=AliasChoices('ingredientName', 'IngredientName', 'ingredient_name')
    )
    quantity: Decimal = Field(..., gt=0, validation_alias=AliasChoices('quantity', 'Quantity'))

    @field_validator('ingredient_name', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)


class RecipeRecord(BaseModel):
    name: str = Field(..., min_length=1, validation_alias=AliasChoices('name', 'Name'))
    servings: int = Field(DEFAULT_SERVINGS, ge=1, validation_alias=AliasChoices('servings', 'Servings'))
    ingredients: List[RecipeLineRecord] = Field(
        default_factory=list, validation_alias=AliasChoices('ingredients', 'Ingredients')
    )

    @field_validator('name', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)

    @field_validator('ingredients', mode='before')
    @classmethod
    def null_ingredients(cls, v):
        return [] if v is None else v
