"""Shopping list generation.

Maps missing ingredient names to a coarse shopping category. Input order and
duplicates are preserved: the list mirrors exactly what was passed in.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ValidationError

from pantry.core.exceptions import RuleTableError
from pantry.data import SHOPPING_CATEGORIES_FILE, load_yaml_table
from pantry.observability.logging import get_logger
from pantry.schemas.enums import FoodCategory
from pantry.schemas.shopping import ShoppingListItem
from pantry.services.shopping.constants import DEFAULT_CATEGORY


logger = get_logger(__name__)


class _CategoryFile(BaseModel):
    categories: dict[str, FoodCategory] = {}


class ShoppingListService:
    """Stateless name -> category lookup for shopping lists."""

    def __init__(self, categories: Mapping[str, FoodCategory | str]) -> None:
        """Initialize the service.

        Args:
            categories: Ingredient name to category; names match case-insensitively.
        """
        self._categories: Mapping[str, FoodCategory] = MappingProxyType(
            {
                name.strip().lower(): FoodCategory.parse(category)
                for name, category in categories.items()
            }
        )

    def category_for(self, item: str) -> FoodCategory:
        """Shopping category for one ingredient name."""
        return self._categories.get(item.strip().lower(), DEFAULT_CATEGORY)

    def generate_shopping_list(self, missing_items: Iterable[str]) -> list[ShoppingListItem]:
        """Categorise missing ingredient names, one row per input name."""
        shopping_list = [
            ShoppingListItem(item=item, category=self.category_for(item))
            for item in missing_items
        ]
        logger.debug("Generated shopping list", items=len(shopping_list))
        return shopping_list


def load_shopping_list_service(path: Path | str | None = None) -> ShoppingListService:
    """Build the service from the packaged category table, or ``path``.

    Raises:
        RuleTableError: If the table cannot be read or lists an unknown category.
    """
    data = load_yaml_table(SHOPPING_CATEGORIES_FILE, path)
    try:
        parsed = _CategoryFile.model_validate(data)
    except ValidationError as e:
        raise RuleTableError(f"Invalid shopping categories: {e}", path=path) from e

    logger.info("Shopping categories loaded", entries=len(parsed.categories))
    return ShoppingListService(parsed.categories)
