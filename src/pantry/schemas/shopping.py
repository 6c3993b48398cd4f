"""Shopping list schemas."""

from __future__ import annotations

from pantry.schemas.base import DerivedResult
from pantry.schemas.enums import FoodCategory


class ShoppingListItem(DerivedResult):
    """A missing ingredient with the aisle it belongs to."""

    item: str
    category: FoodCategory = FoodCategory.OTHER
