"""Pairing engine for traditional main/curry combinations.

Provides methods for:
- Curries (and other accompaniments) for a selected staple
- Staples for a selected curry
- Main dish / curry classification
- Complete meal suggestions and cooking time advice

The engine only recommends dishes present in the catalog it is given; a dish
with no rule entry simply has no suggestions.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from pantry.observability.logging import get_logger
from pantry.schemas.recommendations import MealSuggestion, PairingSuggestion
from pantry.services.pairings.constants import (
    CURRY_PAIRING_REASON,
    DEFAULT_PAIRING_SCORE,
    MAIN_PAIRING_REASON,
)


if TYPE_CHECKING:
    from pantry.schemas.recipe import Recipe
    from pantry.services.pairings.rules import PairingRules

logger = get_logger(__name__)


class PairingService:
    """Stateless pairing engine over a ``PairingRules`` table."""

    def __init__(self, rules: PairingRules) -> None:
        """Initialize the service.

        Args:
            rules: Validated pairing rule table.
        """
        self._rules = rules

    @property
    def rules(self) -> PairingRules:
        """The rule table this service reads from."""
        return self._rules

    def normalize_recipe_name(self, title: str) -> str:
        """Canonical dish key for a recipe title."""
        return self._rules.normalize_dish_name(title)

    # =========================================================================
    # Pairing
    # =========================================================================

    def suggest_pairings_for_main(
        self,
        main_recipe: Recipe,
        catalog: Sequence[Recipe],
    ) -> list[PairingSuggestion]:
        """Catalog recipes that traditionally accompany a staple, best first."""
        key = self.normalize_recipe_name(main_recipe.title)
        rule = self._rules.mains.get(key)
        if rule is None:
            logger.debug("No pairing rule for main", dish=key)
            return []

        return self._collect(
            candidates=rule.curries,
            weights=rule.score,
            catalog=catalog,
            reason=MAIN_PAIRING_REASON.format(title=main_recipe.title),
        )

    def suggest_pairings_for_curry(
        self,
        curry_recipe: Recipe,
        catalog: Sequence[Recipe],
    ) -> list[PairingSuggestion]:
        """Catalog staples that traditionally go with a curry, best first."""
        key = self.normalize_recipe_name(curry_recipe.title)
        rule = self._rules.curries.get(key)
        if rule is None:
            logger.debug("No pairing rule for curry", dish=key)
            return []

        return self._collect(
            candidates=rule.mains,
            weights=rule.score,
            catalog=catalog,
            reason=CURRY_PAIRING_REASON.format(title=curry_recipe.title),
        )

    def _collect(
        self,
        candidates: Sequence[str],
        weights: Mapping[str, float],
        catalog: Sequence[Recipe],
        reason: str,
    ) -> list[PairingSuggestion]:
        suggestions = []
        for recipe in catalog:
            key = self.normalize_recipe_name(recipe.title)
            if key in candidates:
                suggestions.append(
                    PairingSuggestion(
                        recipe=recipe,
                        pairing_score=weights.get(key, DEFAULT_PAIRING_SCORE),
                        reason=reason,
                    )
                )
        return sorted(suggestions, key=lambda s: s.pairing_score, reverse=True)

    # =========================================================================
    # Classification
    # =========================================================================

    def is_main_dish(self, recipe: Recipe) -> bool:
        """True for staples such as appam or rice.

        A title can match both this and ``is_curry`` ("Rice and Sambar").
        """
        title = self.normalize_recipe_name(recipe.title)
        return (
            any(keyword in title for keyword in self._rules.main_keywords)
            or len(recipe.compatible_curries) > 0
        )

    def is_curry(self, recipe: Recipe) -> bool:
        """True for curries, stews, sambar, rasam and the like."""
        title = self.normalize_recipe_name(recipe.title)
        return (
            any(keyword in title for keyword in self._rules.curry_keywords)
            or len(recipe.compatible_mains) > 0
        )

    # =========================================================================
    # Meals
    # =========================================================================

    def suggest_complete_meal(
        self,
        selected: Recipe,
        catalog: Sequence[Recipe],
    ) -> MealSuggestion:
        """Place ``selected`` in a meal and suggest what to serve with it.

        A recipe that classifies as both a main dish and a curry is treated as
        a main dish.
        """
        if self.is_main_dish(selected):
            rule = self._rules.mains.get(self.normalize_recipe_name(selected.title))
            side = None
            if rule is not None:
                side = next(
                    (
                        recipe
                        for recipe in catalog
                        if recipe is not selected
                        and self.normalize_recipe_name(recipe.title) in rule.sides
                    ),
                    None,
                )
            return MealSuggestion(
                main=selected,
                side=side,
                suggestions=tuple(self.suggest_pairings_for_main(selected, catalog)),
            )

        if self.is_curry(selected):
            return MealSuggestion(
                curry=selected,
                suggestions=tuple(self.suggest_pairings_for_curry(selected, catalog)),
            )

        return MealSuggestion()

    @staticmethod
    def get_timing_advice(recipes: Sequence[Recipe]) -> str:
        """Rough plan for cooking the given dishes together."""
        if not recipes:
            return ""
        if len(recipes) == 1:
            return f"Total time: {recipes[0].total_minutes} minutes"

        total_prep = sum(recipe.prep_minutes for recipe in recipes)
        max_cook = max(recipe.cook_minutes for recipe in recipes)
        return (
            f"Prep all ingredients first ({total_prep} min), then cook in parallel. "
            f"Total time: ~{total_prep + max_cook} minutes"
        )
