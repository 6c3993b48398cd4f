"""Curated ingredient substitution table.

The table maps a canonical (lower-case) ingredient name to an ordered list of
substitutes. Resolution is one-directional: an entry ``X -> [Y]`` lets ``Y``
stand in for a missing ``X``, but having ``X`` never satisfies a recipe that
requires ``Y`` unless ``Y``'s own entry lists ``X``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ValidationError

from pantry.core.exceptions import RuleTableError
from pantry.data import SUBSTITUTIONS_FILE, load_yaml_table
from pantry.observability.logging import get_logger
from pantry.schemas.recommendations import Substitute


logger = get_logger(__name__)


class _SubstitutionFile(BaseModel):
    """On-disk shape: substitutes are plain names or ``{name, note}``."""

    substitutions: dict[str, list[str | Substitute]] = {}


class SubstitutionTable:
    """Read-only ingredient -> substitutes lookup.

    Keys are matched case-insensitively. Unknown ingredients have no
    substitutes; lookups never raise.
    """

    def __init__(self, entries: Mapping[str, Sequence[Substitute | str]]) -> None:
        """Initialize the table.

        Args:
            entries: Ingredient name to substitutes, in preference order.
        """
        table: dict[str, tuple[Substitute, ...]] = {}
        for ingredient, substitutes in entries.items():
            table[ingredient.strip().lower()] = tuple(
                sub if isinstance(sub, Substitute) else Substitute(name=sub)
                for sub in substitutes
            )
        self._entries: Mapping[str, tuple[Substitute, ...]] = MappingProxyType(table)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SubstitutionTable:
        """Build a table from the parsed YAML document.

        Raises:
            RuleTableError: If the document does not match the table shape.
        """
        try:
            parsed = _SubstitutionFile.model_validate(data)
        except ValidationError as e:
            raise RuleTableError(f"Invalid substitution table: {e}") from e
        return cls(parsed.substitutions)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, ingredient: object) -> bool:
        return isinstance(ingredient, str) and ingredient.strip().lower() in self._entries

    def substitutes_for(self, ingredient: str) -> tuple[Substitute, ...]:
        """Substitutes for ``ingredient`` with their caution notes."""
        return self._entries.get(ingredient.strip().lower(), ())

    def get_substitute_suggestions(self, ingredient: str) -> list[str]:
        """Names that may stand in for ``ingredient``, in preference order."""
        return [sub.name for sub in self.substitutes_for(ingredient)]


def load_substitution_table(path: Path | str | None = None) -> SubstitutionTable:
    """Load the packaged table, or the file at ``path`` when given."""
    table = SubstitutionTable.from_mapping(load_yaml_table(SUBSTITUTIONS_FILE, path))
    logger.info("Substitution table loaded", entries=len(table))
    return table
