"""Recipe-to-inventory match result schema."""

from __future__ import annotations

from fractions import Fraction

from pydantic import Field

from pantry.schemas.base import DerivedResult
from pantry.schemas.recipe import Recipe


class RecipeMatchResult(DerivedResult):
    """How well the current inventory covers one recipe.

    ``available_items`` and ``missing_items`` partition the recipe's required
    ingredients, in recipe order, using the names as written in the recipe.
    """

    recipe: Recipe
    score: float = Field(..., ge=0.0, le=1.0)
    available_items: tuple[str, ...] = ()
    missing_items: tuple[str, ...] = ()

    @property
    def required_count(self) -> int:
        """Number of required ingredients the score was computed over."""
        return len(self.available_items) + len(self.missing_items)

    @property
    def ratio(self) -> Fraction:
        """Exact form of ``score``; zero for a recipe with no required ingredients."""
        if self.required_count == 0:
            return Fraction(0)
        return Fraction(len(self.available_items), self.required_count)

    @property
    def is_complete(self) -> bool:
        """True when every required ingredient is covered."""
        return self.required_count > 0 and not self.missing_items
