"""Constants for recipe matching and bucketing."""

from __future__ import annotations

from fractions import Fraction
from typing import Final


# Lowest completeness (inclusive) for a recipe to be shown as a near match
DEFAULT_NEAR_MATCH_THRESHOLD: Final[float] = 0.7

COMPLETE: Final[Fraction] = Fraction(1)
