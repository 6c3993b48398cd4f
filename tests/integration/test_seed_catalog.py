"""Integration tests over the packaged starter catalog and sample pantry."""

from __future__ import annotations

import pytest

from pantry.assistant import PantryAssistant
from pantry.core.config import Settings
from pantry.factory import create_assistant
from pantry.schemas.enums import FoodCategory


pytestmark = pytest.mark.integration


@pytest.fixture
def assistant() -> PantryAssistant:
    """Assistant seeded with the starter catalog and sample pantry."""
    settings = Settings(seed={"load_recipes": True, "load_sample_pantry": True})
    return create_assistant(settings, configure_logging=False)


def recipe_id(assistant: PantryAssistant, title: str) -> str:
    return next(
        r.id for r in assistant.repository.get_all_recipes() if r.title == title
    )


def test_cook_now(assistant: PantryAssistant) -> None:
    """Should find the fully stocked dishes in catalog order."""
    titles = [r.recipe.title for r in assistant.cook_now()]
    assert titles == ["Egg Roast", "Matta Rice"]


def test_near_matches(assistant: PantryAssistant) -> None:
    """Should rank nearly stocked dishes, substituting onion for shallots."""
    near = assistant.near_matches()

    assert [r.recipe.title for r in near] == [
        "Kerala Fish Curry",
        "Rasam",
        "Chicken Curry",
    ]
    fish_curry = near[0]
    assert "shallots" in fish_curry.available_items
    assert fish_curry.missing_items == ("fish", "kudampuli")


def test_every_recipe_is_scored_once(assistant: PantryAssistant) -> None:
    """Should return one result per catalog recipe, best first."""
    results = assistant.match_all()
    scores = [r.score for r in results]

    assert len(results) == 14
    assert scores == sorted(scores, reverse=True)


def test_scanning_completes_a_recipe(assistant: PantryAssistant) -> None:
    """Should move fish curry to cook-now once its missing items are scanned."""
    assistant.repository.record_scanned_item("Fish", 500, "g")
    assistant.repository.record_scanned_item("kudampuli", 3, "pcs")

    titles = [r.recipe.title for r in assistant.cook_now()]
    assert "Kerala Fish Curry" in titles


def test_shopping_list(assistant: PantryAssistant) -> None:
    """Should categorise the missing chicken curry ingredients."""
    rows = assistant.shopping_list_for(recipe_id(assistant, "Chicken Curry"))
    assert [(r.item, r.category) for r in rows] == [
        ("chicken", FoodCategory.PROTEIN),
        ("garam masala", FoodCategory.OTHER),
    ]


def test_complete_meal_for_appam(assistant: PantryAssistant) -> None:
    """Should pick curries and a side from the catalog."""
    meal = assistant.complete_meal_for(recipe_id(assistant, "Appam"))

    assert meal.main is not None
    assert meal.main.title == "Appam"
    assert meal.side is not None
    assert meal.side.title == "Coconut Chutney"
    assert [s.recipe.title for s in meal.suggestions] == [
        "Vegetable Stew",
        "Kerala Fish Curry",
        "Chicken Curry",
        "Egg Roast",
    ]


def test_pairings_for_fish_curry(assistant: PantryAssistant) -> None:
    """Should suggest staples for a curry, rice first."""
    pairings = assistant.pairings_for(recipe_id(assistant, "Kerala Fish Curry"))
    assert [p.recipe.title for p in pairings] == [
        "Matta Rice",
        "Appam",
        "Puttu",
        "Kerala Porotta",
    ]


def test_timing_for_one_recipe(assistant: PantryAssistant) -> None:
    """Should report total time for a single dish."""
    assert assistant.timing_advice([recipe_id(assistant, "Appam")]) == (
        "Total time: 35 minutes"
    )
