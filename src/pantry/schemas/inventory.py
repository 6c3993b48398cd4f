"""Inventory schemas.

A ``FoodItem`` is one pantry entry. Quantities coming from manual entry or
receipt scans are normalised here, at the boundary, so that the matching
engine only ever sees ``None`` (quantity unknown) or a non-negative number.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any

from pydantic import Field, field_validator

from pantry.observability.logging import get_logger
from pantry.schemas.base import DomainRecord
from pantry.schemas.enums import FoodCategory, ItemSource


logger = get_logger(__name__)


def parse_number(value: Any, *, field: str) -> float | None:
    """Read a raw numeric value.

    ``None``, booleans, non-numeric strings, NaN and infinities become ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        logger.warning("Unparseable value treated as absent", field=field, value=value)
        return None
    if not math.isfinite(number):
        logger.warning("Non-finite value treated as absent", field=field, value=value)
        return None
    return number


def coerce_quantity(value: Any, *, field: str = "quantity") -> float | None:
    """Normalise a raw quantity.

    - anything ``parse_number`` cannot read becomes ``None`` (quantity unknown)
    - negative numbers are clamped to ``0`` (out of stock)
    """
    number = parse_number(value, field=field)
    if number is None:
        return None
    if number < 0:
        logger.warning("Negative value clamped to zero", field=field, value=value)
        return 0.0
    return number


class FoodItem(DomainRecord):
    """A single item in the user's pantry."""

    id: str | None = Field(default=None, description="Store-assigned identifier")
    name: str = Field(..., min_length=1, description="Item name, compared case-insensitively")
    category: FoodCategory = Field(default=FoodCategory.OTHER)
    quantity: float | None = Field(
        default=None,
        description="Amount on hand; None means unknown, 0 means out of stock",
    )
    unit: str | None = Field(default=None, description="Free-text unit (g, ml, pcs)")
    best_by: date | None = Field(default=None)
    source: ItemSource | None = Field(default=None)
    created_at: datetime | None = Field(default=None)
    updated_at: datetime | None = Field(default=None)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, value: Any) -> FoodCategory:
        return FoodCategory.parse(value)

    @field_validator("quantity", mode="before")
    @classmethod
    def _coerce_quantity(cls, value: Any) -> float | None:
        return coerce_quantity(value)

    @property
    def key(self) -> str:
        """Lookup key used by the matching engine."""
        return self.name.lower()

    @property
    def in_stock(self) -> bool:
        """True unless a quantity is recorded and equals zero."""
        return self.quantity is None or self.quantity > 0
