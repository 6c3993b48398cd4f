"""In-memory pantry record store.

Stands in for the app's persistence layer: simple CRUD over inventory items
and recipes, plus the additive quantity update used when a receipt is
rescanned. The engine only ever reads snapshots from here through
``get_all_food_items`` and ``get_all_recipes``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from pydantic import ValidationError

from pantry.core.exceptions import RecordNotFoundError
from pantry.data import SEED_PANTRY_FILE, SEED_RECIPES_FILE, load_yaml_table
from pantry.observability.logging import get_logger
from pantry.schemas.enums import FoodCategory, ItemSource
from pantry.schemas.imports import ImportResult
from pantry.schemas.inventory import FoodItem, coerce_quantity
from pantry.schemas.recipe import Recipe


logger = get_logger(__name__)

# A scan always means at least one unit was seen
DEFAULT_SCANNED_QUANTITY = 1.0


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"


def _now() -> datetime:
    return datetime.now(UTC)


def _describe(error: ValidationError) -> str:
    """One-line summary of a validation error for import reports."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(loc) for loc in detail["loc"]) or "record"
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)


class InMemoryPantryRepository:
    """Dict-backed store for food items and recipes.

    Records are frozen models, so snapshots can share them safely; every
    snapshot is a new list.
    """

    def __init__(self) -> None:
        self._food_items: dict[str, FoodItem] = {}
        self._recipes: dict[str, Recipe] = {}

    # =========================================================================
    # Food Items
    # =========================================================================

    def get_all_food_items(self) -> list[FoodItem]:
        """Current inventory snapshot, ordered by name."""
        return sorted(self._food_items.values(), key=lambda item: item.key)

    def get_food_item(self, item_id: str) -> FoodItem:
        """Fetch one item.

        Raises:
            RecordNotFoundError: If no item has this id.
        """
        try:
            return self._food_items[item_id]
        except KeyError:
            raise RecordNotFoundError("FoodItem", item_id) from None

    def add_food_item(self, item: FoodItem | Mapping[str, Any]) -> str:
        """Store a new item and return its id.

        Raises:
            pydantic.ValidationError: If a raw mapping is not a valid item.
        """
        item = item if isinstance(item, FoodItem) else FoodItem.model_validate(item)
        item_id = _new_id("fi")
        now = _now()
        self._food_items[item_id] = item.model_copy(
            update={
                "id": item_id,
                "source": item.source or ItemSource.MANUAL,
                "created_at": now,
                "updated_at": now,
            }
        )
        logger.debug("Food item added", id=item_id, name=item.name)
        return item_id

    def update_food_item(self, item_id: str, **changes: Any) -> FoodItem:
        """Apply field changes to an item and return the updated record.

        Raises:
            RecordNotFoundError: If no item has this id.
            pydantic.ValidationError: If the changes produce an invalid item.
        """
        current = self.get_food_item(item_id)
        data = current.model_dump(by_alias=False)
        data.update(changes)
        data.update(id=item_id, updated_at=_now())
        updated = FoodItem.model_validate(data)
        self._food_items[item_id] = updated
        return updated

    def record_scanned_item(
        self,
        name: str,
        quantity: float | str | None,
        unit: str | None = None,
    ) -> FoodItem:
        """Add a scanned quantity to the item with the same name.

        The name is matched case-insensitively and the quantities are summed,
        treating an unknown existing quantity as zero. A scan without a usable
        positive quantity counts as one unit, so rescanning never takes an item
        out of stock. The stored unit is kept unless ``unit`` is given. A name not yet in the pantry creates a new
        ``Other`` item.
        """
        amount = coerce_quantity(quantity) or DEFAULT_SCANNED_QUANTITY
        key = name.strip().lower()
        existing_id = next(
            (item_id for item_id, item in self._food_items.items() if item.key == key),
            None,
        )

        if existing_id is None:
            item_id = self.add_food_item(
                FoodItem(
                    name=name,
                    category=FoodCategory.OTHER,
                    quantity=amount,
                    unit=unit,
                    source=ItemSource.SCANNED,
                )
            )
            logger.info("Scanned item added", name=name, quantity=amount)
            return self._food_items[item_id]

        existing = self._food_items[existing_id]
        total = (existing.quantity or 0.0) + amount
        logger.info("Scanned item merged", name=existing.name, quantity=total)
        return self.update_food_item(
            existing_id, quantity=total, unit=unit or existing.unit
        )

    def delete_food_item(self, item_id: str) -> None:
        """Remove an item.

        Raises:
            RecordNotFoundError: If no item has this id.
        """
        if self._food_items.pop(item_id, None) is None:
            raise RecordNotFoundError("FoodItem", item_id)
        logger.debug("Food item deleted", id=item_id)

    # =========================================================================
    # Recipes
    # =========================================================================

    def get_all_recipes(self) -> list[Recipe]:
        """Current catalog snapshot, ordered by title."""
        return sorted(self._recipes.values(), key=lambda recipe: recipe.title.lower())

    def get_recipe(self, recipe_id: str) -> Recipe:
        """Fetch one recipe.

        Raises:
            RecordNotFoundError: If no recipe has this id.
        """
        try:
            return self._recipes[recipe_id]
        except KeyError:
            raise RecordNotFoundError("Recipe", recipe_id) from None

    def add_recipe(self, recipe: Recipe | Mapping[str, Any]) -> str:
        """Store a new recipe and return its id.

        Raises:
            pydantic.ValidationError: If a raw mapping is not a valid recipe.
        """
        recipe = recipe if isinstance(recipe, Recipe) else Recipe.model_validate(recipe)
        recipe_id = _new_id("r")
        now = _now()
        self._recipes[recipe_id] = recipe.model_copy(
            update={"id": recipe_id, "created_at": now, "updated_at": now}
        )
        logger.debug("Recipe added", id=recipe_id, title=recipe.title)
        return recipe_id

    def delete_recipe(self, recipe_id: str) -> None:
        """Remove a recipe.

        Raises:
            RecordNotFoundError: If no recipe has this id.
        """
        if self._recipes.pop(recipe_id, None) is None:
            raise RecordNotFoundError("Recipe", recipe_id)
        logger.debug("Recipe deleted", id=recipe_id)

    def import_recipes(self, records: Iterable[Any]) -> ImportResult:
        """Validate and store raw recipe records one at a time.

        A record that fails validation is reported in the result and skipped;
        the rest of the batch is still imported.
        """
        ids: list[str] = []
        errors: list[str] = []

        for index, record in enumerate(records, start=1):
            if not isinstance(record, Mapping):
                errors.append(f"Recipe {index}: expected an object, got {type(record).__name__}")
                continue
            try:
                ids.append(self.add_recipe(record))
            except ValidationError as e:
                errors.append(f"Recipe {index}: {_describe(e)}")

        if errors:
            logger.warning("Some recipes were not imported", failed=len(errors))
        logger.info("Recipes imported", imported=len(ids), failed=len(errors))

        return ImportResult(
            success=bool(ids),
            imported=len(ids),
            failed=len(errors),
            errors=tuple(errors),
            ids=tuple(ids),
        )

    # =========================================================================
    # Seed Data
    # =========================================================================

    def seed_recipes(self) -> ImportResult:
        """Load the packaged starter catalog into an empty store.

        Does nothing when the store already holds recipes.
        """
        if self._recipes:
            logger.debug("Catalog not empty, skipping recipe seed")
            return ImportResult(success=True)

        data = load_yaml_table(SEED_RECIPES_FILE)
        return self.import_recipes(data.get("recipes") or [])

    def seed_sample_pantry(self) -> int:
        """Add the packaged sample inventory; returns the number of items added."""
        data = load_yaml_table(SEED_PANTRY_FILE)
        added = 0
        for record in data.get("items") or []:
            try:
                self.add_food_item(record)
            except ValidationError:
                logger.exception("Skipping invalid sample pantry item", record=record)
                continue
            added += 1
        logger.info("Sample pantry seeded", items=added)
        return added
