"""Shared test fixtures for the pantry engine tests.

Provides the packaged lookup tables, the stateless engine services built from
them, and small helpers for building inventory snapshots.
"""

from __future__ import annotations

import os


# Select config/environments/test before any Settings are created
os.environ.setdefault("APP_ENV", "test")

from collections.abc import Callable  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402

from pantry.database.repositories import InMemoryPantryRepository  # noqa: E402
from pantry.schemas.inventory import FoodItem  # noqa: E402
from pantry.services.matching import MatchingService  # noqa: E402
from pantry.services.pairings import (  # noqa: E402
    PairingRules,
    PairingService,
    load_pairing_rules,
)
from pantry.services.shopping import (  # noqa: E402
    ShoppingListService,
    load_shopping_list_service,
)
from pantry.services.substitution import (  # noqa: E402
    SubstitutionTable,
    load_substitution_table,
)


@pytest.fixture(scope="session")
def substitution_table() -> SubstitutionTable:
    """Packaged substitution table."""
    return load_substitution_table()


@pytest.fixture(scope="session")
def pairing_rules() -> PairingRules:
    """Packaged pairing rule table."""
    return load_pairing_rules()


@pytest.fixture
def matching_service(substitution_table: SubstitutionTable) -> MatchingService:
    """Matching service with the default near-match threshold."""
    return MatchingService(substitution_table)


@pytest.fixture
def pairing_service(pairing_rules: PairingRules) -> PairingService:
    """Pairing service over the packaged rules."""
    return PairingService(pairing_rules)


@pytest.fixture
def shopping_service() -> ShoppingListService:
    """Shopping list service over the packaged category table."""
    return load_shopping_list_service()


@pytest.fixture
def repository() -> InMemoryPantryRepository:
    """Empty in-memory pantry store."""
    return InMemoryPantryRepository()


@pytest.fixture
def make_inventory() -> Callable[..., list[FoodItem]]:
    """Build an inventory from ``name=quantity`` pairs.

    Example:
        make_inventory(rice=2, coconut=None) -> rice x2, coconut (unknown qty)
    """

    def _make(*names: str, **quantities: Any) -> list[FoodItem]:
        items = [FoodItem(name=name) for name in names]
        items.extend(
            FoodItem(name=name.replace("_", " "), quantity=quantity)
            for name, quantity in quantities.items()
        )
        return items

    return _make
