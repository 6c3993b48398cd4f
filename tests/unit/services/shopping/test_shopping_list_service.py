"""Unit tests for ShoppingListService."""

from __future__ import annotations

from pathlib import Path

import pytest

from pantry.core.exceptions import RuleTableError
from pantry.schemas.enums import FoodCategory
from pantry.services.shopping import ShoppingListService, load_shopping_list_service


pytestmark = pytest.mark.unit


class TestGenerateShoppingList:
    """Tests for generate_shopping_list."""

    def test_known_and_unknown_items(self, shopping_service: ShoppingListService) -> None:
        """Should categorise known items and fall back to Other."""
        result = shopping_service.generate_shopping_list(["rice", "unknown_item"])

        assert [(row.item, row.category) for row in result] == [
            ("rice", FoodCategory.STAPLE),
            ("unknown_item", FoodCategory.OTHER),
        ]

    def test_preserves_order_and_duplicates(
        self, shopping_service: ShoppingListService
    ) -> None:
        """Should return one row per input name."""
        result = shopping_service.generate_shopping_list(["fish", "onion", "fish"])
        assert [row.item for row in result] == ["fish", "onion", "fish"]

    def test_lookup_is_case_insensitive(
        self, shopping_service: ShoppingListService
    ) -> None:
        """Should keep the caller's spelling but match ignoring case."""
        [row] = shopping_service.generate_shopping_list(["Coconut Oil"])
        assert row.item == "Coconut Oil"
        assert row.category == FoodCategory.OIL

    def test_empty(self, shopping_service: ShoppingListService) -> None:
        """Should return an empty list for no input."""
        assert shopping_service.generate_shopping_list([]) == []

    def test_serialises_category_value(
        self, shopping_service: ShoppingListService
    ) -> None:
        """Should expose the category's display value."""
        [row] = shopping_service.generate_shopping_list(["milk"])
        assert row.model_dump() == {"item": "milk", "category": "Dairy"}


class TestLoadShoppingListService:
    """Tests for loading the category table."""

    def test_unknown_category_is_rejected(self, tmp_path: Path) -> None:
        """Should refuse categories outside the fixed set."""
        path = tmp_path / "categories.yaml"
        path.write_text("categories:\n  rice: Grain\n")

        with pytest.raises(RuleTableError):
            load_shopping_list_service(path)

    def test_direct_construction_parses_labels(self) -> None:
        """Should accept category labels in any case."""
        service = ShoppingListService({"Ghee": "dairy"})
        assert service.category_for("ghee") == FoodCategory.DAIRY
