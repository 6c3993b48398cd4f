"""Recipe-to-inventory matching engine and bucketing policy.

Provides methods for:
- Scoring every recipe in a catalog against an inventory snapshot
- Substitution-aware ingredient resolution
- Cook-now (complete) and near-match (above threshold) filters

All methods are pure: inputs are never mutated and the same inputs always
produce the same results.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from fractions import Fraction
from typing import TYPE_CHECKING

from pantry.observability.logging import get_logger
from pantry.schemas.matching import RecipeMatchResult
from pantry.services.matching.constants import COMPLETE, DEFAULT_NEAR_MATCH_THRESHOLD


if TYPE_CHECKING:
    from pantry.schemas.inventory import FoodItem
    from pantry.schemas.recipe import Recipe
    from pantry.services.substitution import SubstitutionTable

logger = get_logger(__name__)


def build_inventory_lookup(inventory: Iterable[FoodItem]) -> dict[str, FoodItem]:
    """Index inventory items by lower-cased name.

    Duplicate names are legal in the pantry store; the item that comes last
    in ``inventory`` wins, the same as the store's name-ordered snapshot
    would present it.
    """
    lookup: dict[str, FoodItem] = {}
    for item in inventory:
        lookup[item.key] = item
    return lookup


def _to_fraction(threshold: float | Fraction) -> Fraction:
    # str() keeps 0.7 as 7/10 instead of its binary approximation
    value = threshold if isinstance(threshold, Fraction) else Fraction(str(threshold))
    if not 0 <= value <= 1:
        msg = f"threshold must be between 0 and 1, got {threshold}"
        raise ValueError(msg)
    return value


class MatchingService:
    """Stateless matching engine.

    Construct once at start-up with the substitution table and reuse for every
    request; the service holds no per-call state.
    """

    def __init__(
        self,
        substitutions: SubstitutionTable,
        near_match_threshold: float = DEFAULT_NEAR_MATCH_THRESHOLD,
    ) -> None:
        """Initialize the service.

        Args:
            substitutions: Table consulted when an ingredient is not in stock.
            near_match_threshold: Default lower bound for near matches.
        """
        self._substitutions = substitutions
        self._near_match_threshold = _to_fraction(near_match_threshold)

    @property
    def near_match_threshold(self) -> Fraction:
        """Default near-match threshold as an exact fraction."""
        return self._near_match_threshold

    # =========================================================================
    # Matching
    # =========================================================================

    def match_recipes_to_inventory(
        self,
        recipes: Sequence[Recipe],
        inventory: Sequence[FoodItem],
    ) -> list[RecipeMatchResult]:
        """Score every recipe against the inventory.

        Args:
            recipes: Recipe catalog snapshot.
            inventory: Inventory snapshot.

        Returns:
            One result per recipe, best score first. Recipes with equal scores
            keep their catalog order.
        """
        lookup = build_inventory_lookup(inventory)
        results = [self.match_recipe(recipe, lookup) for recipe in recipes]
        # sorted() is stable, also with reverse=True
        results = sorted(results, key=lambda r: r.ratio, reverse=True)

        logger.debug(
            "Matched recipes to inventory",
            recipes=len(results),
            inventory_items=len(lookup),
            complete=sum(1 for r in results if r.is_complete),
        )
        return results

    def match_recipe(
        self,
        recipe: Recipe,
        lookup: Mapping[str, FoodItem],
    ) -> RecipeMatchResult:
        """Score one recipe against an inventory lookup.

        A recipe without required ingredients scores 0 with empty item lists:
        there is nothing to confirm it can be cooked.
        """
        available: list[str] = []
        missing: list[str] = []

        for ingredient in recipe.required_ingredients:
            if self.is_available(ingredient.name, lookup):
                available.append(ingredient.name)
            else:
                missing.append(ingredient.name)

        required = len(available) + len(missing)
        score = len(available) / required if required else 0.0

        return RecipeMatchResult(
            recipe=recipe,
            score=score,
            available_items=tuple(available),
            missing_items=tuple(missing),
        )

    def is_available(self, ingredient: str, lookup: Mapping[str, FoodItem]) -> bool:
        """Resolve an ingredient directly, then through its listed substitutes."""
        if self._in_stock(ingredient, lookup):
            return True
        return any(
            self._in_stock(substitute.name, lookup)
            for substitute in self._substitutions.substitutes_for(ingredient)
        )

    @staticmethod
    def _in_stock(name: str, lookup: Mapping[str, FoodItem]) -> bool:
        item = lookup.get(name.strip().lower())
        return item is not None and item.in_stock

    # =========================================================================
    # Bucketing
    # =========================================================================

    def get_cook_now_recipes(
        self,
        match_results: Iterable[RecipeMatchResult],
    ) -> list[RecipeMatchResult]:
        """Results whose required ingredients are all covered."""
        return [result for result in match_results if result.ratio == COMPLETE]

    def get_near_match_recipes(
        self,
        match_results: Iterable[RecipeMatchResult],
        threshold: float | Fraction | None = None,
    ) -> list[RecipeMatchResult]:
        """Results scoring at least ``threshold`` but not yet complete.

        Args:
            match_results: Output of ``match_recipes_to_inventory``.
            threshold: Inclusive lower bound; defaults to the configured value.

        Raises:
            ValueError: If ``threshold`` is outside [0, 1].
        """
        lower = (
            self._near_match_threshold if threshold is None else _to_fraction(threshold)
        )
        return [result for result in match_results if lower <= result.ratio < COMPLETE]
