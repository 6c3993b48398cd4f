"""Recipe catalog schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from pantry.observability.logging import get_logger
from pantry.schemas.base import DomainRecord
from pantry.schemas.inventory import coerce_quantity, parse_number


logger = get_logger(__name__)


def _dedupe(values: Any) -> Any:
    """Drop blank and repeated labels, keeping first-seen order."""
    if isinstance(values, str) or not hasattr(values, "__iter__"):
        return values
    seen: dict[str, None] = {}
    for value in values:
        if isinstance(value, str) and value.strip():
            seen.setdefault(value.strip(), None)
    return tuple(seen)


class RecipeIngredient(DomainRecord):
    """One line of a recipe's ingredient list."""

    name: str = Field(..., min_length=1)
    amount: float | None = None
    unit: str | None = None
    optional: bool = Field(
        default=False,
        description="Optional ingredients are excluded from match scoring",
    )

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> float | None:
        return coerce_quantity(value, field="amount")


class Recipe(DomainRecord):
    """A recipe from the catalog.

    ``compatible_mains`` and ``compatible_curries`` are pairing hints written
    by the recipe author. They are independent of the pairing rule table and
    only feed the main/curry classification heuristics.
    """

    id: str | None = None
    title: str = Field(..., min_length=1)
    region: str = ""
    tags: tuple[str, ...] = ()
    ingredients: tuple[RecipeIngredient, ...] = ()
    steps: tuple[str, ...] = ()
    prep_minutes: int = 0
    cook_minutes: int = 0
    servings: int = 1
    calories_per_serving: int | None = Field(default=None, ge=0)
    compatible_mains: tuple[str, ...] = ()
    compatible_curries: tuple[str, ...] = ()
    notes: str | None = None
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("tags", "compatible_mains", "compatible_curries", mode="before")
    @classmethod
    def _dedupe_labels(cls, value: Any) -> Any:
        if value is None:
            return ()
        return _dedupe(value)

    @field_validator("ingredients", "steps", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @field_validator("prep_minutes", "cook_minutes", mode="before")
    @classmethod
    def _coerce_minutes(cls, value: Any, info: ValidationInfo) -> int:
        # Unreadable times count as zero; negatives clamp; fractions round
        number = coerce_quantity(value, field=info.field_name)
        return 0 if number is None else round(number)

    @field_validator("servings", mode="before")
    @classmethod
    def _coerce_servings(cls, value: Any) -> int:
        number = parse_number(value, field="servings")
        if number is None or round(number) <= 0:
            return 1
        return round(number)

    @field_validator("calories_per_serving", mode="before")
    @classmethod
    def _coerce_calories(cls, value: Any) -> int | None:
        number = parse_number(value, field="calories_per_serving")
        if number is None:
            return None
        if number < 0:
            logger.warning(
                "Negative value treated as absent",
                field="calories_per_serving",
                value=value,
            )
            return None
        return round(number)

    @property
    def required_ingredients(self) -> tuple[RecipeIngredient, ...]:
        """Ingredients that count toward match scoring."""
        return tuple(ing for ing in self.ingredients if not ing.optional)

    @property
    def total_minutes(self) -> int:
        """Prep plus cook time."""
        return self.prep_minutes + self.cook_minutes
