"""Substitution service package.

Provides the curated ingredient substitution table used by the matching
engine and by the substitute suggestions shown to users.
"""

from __future__ import annotations

from pantry.services.substitution.service import (
    SubstitutionTable,
    load_substitution_table,
)


__all__ = ["SubstitutionTable", "load_substitution_table"]
