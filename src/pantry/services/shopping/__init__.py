"""Shopping service package.

Turns the missing items of a recipe match into a categorised shopping list.
"""

from __future__ import annotations

from pantry.services.shopping.service import (
    ShoppingListService,
    load_shopping_list_service,
)


__all__ = ["ShoppingListService", "load_shopping_list_service"]
