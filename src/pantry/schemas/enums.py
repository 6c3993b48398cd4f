"""Enumeration types for pantry schemas."""

from __future__ import annotations

from enum import StrEnum


class FoodCategory(StrEnum):
    """Coarse grouping for inventory items and shopping list rows."""

    STAPLE = "Staple"
    SPICE = "Spice"
    VEGETABLE = "Vegetable"
    PROTEIN = "Protein"
    DAIRY = "Dairy"
    OIL = "Oil"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: object) -> FoodCategory:
        """Resolve a category case-insensitively, falling back to ``OTHER``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return cls.OTHER


class ItemSource(StrEnum):
    """How an inventory item entered the pantry."""

    MANUAL = "manual"
    SCANNED = "scanned"
