"""Constants for shopping list generation."""

from __future__ import annotations

from typing import Final

from pantry.schemas.enums import FoodCategory


# Category for ingredients the category table does not list
DEFAULT_CATEGORY: Final[FoodCategory] = FoodCategory.OTHER
