"""Constants for the pairing engine."""

from __future__ import annotations

from typing import Final


# Weight for a dish listed in a rule entry without an explicit score
DEFAULT_PAIRING_SCORE: Final[float] = 0.5

MAIN_PAIRING_REASON: Final[str] = "Traditional pairing with {title}"
CURRY_PAIRING_REASON: Final[str] = "Traditional pairing for {title}"
