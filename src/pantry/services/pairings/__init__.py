"""Pairings service package.

Recommends traditional staple/curry combinations from a static rule table.
"""

from __future__ import annotations

from pantry.services.pairings.rules import PairingRules, load_pairing_rules
from pantry.services.pairings.service import PairingService


__all__ = ["PairingRules", "PairingService", "load_pairing_rules"]
