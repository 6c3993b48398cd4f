"""Pydantic schemas for pantry records and engine results."""

from pantry.schemas.enums import FoodCategory, ItemSource
from pantry.schemas.imports import ImportResult
from pantry.schemas.inventory import FoodItem
from pantry.schemas.matching import RecipeMatchResult
from pantry.schemas.recipe import Recipe, RecipeIngredient
from pantry.schemas.recommendations import MealSuggestion, PairingSuggestion, Substitute
from pantry.schemas.shopping import ShoppingListItem


__all__ = [
    "FoodCategory",
    "FoodItem",
    "ImportResult",
    "ItemSource",
    "MealSuggestion",
    "PairingSuggestion",
    "Recipe",
    "RecipeIngredient",
    "RecipeMatchResult",
    "ShoppingListItem",
    "Substitute",
]
