"""Matching service package.

Scores recipes against the current inventory and buckets the results into
cook-now and near-match lists.
"""

from __future__ import annotations

from pantry.services.matching.service import MatchingService, build_inventory_lookup


__all__ = ["MatchingService", "build_inventory_lookup"]
