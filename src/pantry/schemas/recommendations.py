"""Recommendation schemas for substitutions and dish pairings."""

from __future__ import annotations

from pydantic import Field

from pantry.schemas.base import DerivedResult
from pantry.schemas.recipe import Recipe


class Substitute(DerivedResult):
    """One acceptable stand-in for an ingredient."""

    name: str = Field(..., min_length=1, description="Substitute ingredient name")
    note: str | None = Field(
        default=None,
        description="Caution shown to the user, e.g. a flavour change",
    )


class PairingSuggestion(DerivedResult):
    """A catalog recipe that traditionally accompanies the selected dish."""

    recipe: Recipe
    pairing_score: float = Field(..., ge=0.0, le=1.0)
    reason: str


class MealSuggestion(DerivedResult):
    """A selected dish placed in a meal, plus what to serve with it."""

    main: Recipe | None = None
    curry: Recipe | None = None
    side: Recipe | None = None
    suggestions: tuple[PairingSuggestion, ...] = ()
