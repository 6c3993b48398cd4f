"""Pantry assistant facade.

Reads fresh inventory and catalog snapshots from the record store before each
call and hands them to the stateless engine services. This is the surface the
app's screens talk to.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from fractions import Fraction
from typing import TYPE_CHECKING

from pantry.observability.logging import (
    bind_context,
    get_context,
    get_logger,
    unbind_context,
)


if TYPE_CHECKING:
    from pantry.database.repositories import InMemoryPantryRepository
    from pantry.schemas.matching import RecipeMatchResult
    from pantry.schemas.recommendations import MealSuggestion, PairingSuggestion
    from pantry.schemas.shopping import ShoppingListItem
    from pantry.services.matching import MatchingService
    from pantry.services.pairings import PairingService
    from pantry.services.shopping import ShoppingListService
    from pantry.services.substitution import SubstitutionTable

logger = get_logger(__name__)


@contextmanager
def _operation(name: str) -> Iterator[None]:
    """Bind ``operation`` for the block, restoring any outer binding after."""
    outer = get_context().get("operation")
    bind_context(operation=name)
    try:
        yield
    finally:
        if outer is None:
            unbind_context("operation")
        else:
            bind_context(operation=outer)


class PantryAssistant:
    """Answers "what can I cook?" style questions against the record store."""

    def __init__(
        self,
        repository: InMemoryPantryRepository,
        substitutions: SubstitutionTable,
        matching: MatchingService,
        pairing: PairingService,
        shopping: ShoppingListService,
    ) -> None:
        self.repository = repository
        self.substitutions = substitutions
        self.matching = matching
        self.pairing = pairing
        self.shopping = shopping

    def match_all(self) -> list[RecipeMatchResult]:
        """Score the whole catalog against the current inventory."""
        with _operation("match_all"):
            return self.matching.match_recipes_to_inventory(
                self.repository.get_all_recipes(),
                self.repository.get_all_food_items(),
            )

    def cook_now(self) -> list[RecipeMatchResult]:
        """Recipes that can be cooked with what is in stock."""
        with _operation("cook_now"):
            return self.matching.get_cook_now_recipes(self.match_all())

    def near_matches(self, threshold: float | Fraction | None = None) -> list[RecipeMatchResult]:
        """Recipes missing only a few ingredients."""
        with _operation("near_matches"):
            return self.matching.get_near_match_recipes(self.match_all(), threshold)

    def shopping_list_for(self, recipe_id: str) -> list[ShoppingListItem]:
        """What to buy to cook one recipe.

        Raises:
            RecordNotFoundError: If the recipe does not exist.
        """
        with _operation("shopping_list"):
            recipe = self.repository.get_recipe(recipe_id)
            result = self.matching.match_recipes_to_inventory(
                [recipe], self.repository.get_all_food_items()
            )[0]
            return self.shopping.generate_shopping_list(result.missing_items)

    def substitutes_for(self, ingredient: str) -> list[str]:
        """Names that may stand in for ``ingredient``."""
        return self.substitutions.get_substitute_suggestions(ingredient)

    def pairings_for(self, recipe_id: str) -> list[PairingSuggestion]:
        """Traditional accompaniments for a recipe from the catalog.

        Main dishes are paired with curries; anything else that classifies as
        a curry is paired with staples.

        Raises:
            RecordNotFoundError: If the recipe does not exist.
        """
        with _operation("pairings"):
            return list(self.complete_meal_for(recipe_id).suggestions)

    def complete_meal_for(self, recipe_id: str) -> MealSuggestion:
        """Build a meal around a recipe.

        Raises:
            RecordNotFoundError: If the recipe does not exist.
        """
        with _operation("complete_meal"):
            recipe = self.repository.get_recipe(recipe_id)
            return self.pairing.suggest_complete_meal(
                recipe, self.repository.get_all_recipes()
            )

    def timing_advice(self, recipe_ids: Sequence[str]) -> str:
        """Cooking time plan for several recipes made together.

        Raises:
            RecordNotFoundError: If any recipe does not exist.
        """
        recipes = [self.repository.get_recipe(recipe_id) for recipe_id in recipe_ids]
        return self.pairing.get_timing_advice(recipes)
