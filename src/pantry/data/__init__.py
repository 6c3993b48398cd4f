"""Packaged lookup tables and seed data.

Tables are plain YAML so they can be reviewed, tested and replaced without
touching code; ``DataSettings`` can point any of them at an external file.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from pantry.core.exceptions import RuleTableError
from pantry.observability.logging import get_logger


logger = get_logger(__name__)

SUBSTITUTIONS_FILE = "substitutions.yaml"
PAIRING_RULES_FILE = "pairing_rules.yaml"
SHOPPING_CATEGORIES_FILE = "shopping_categories.yaml"
SEED_RECIPES_FILE = "seed_recipes.yaml"
SEED_PANTRY_FILE = "seed_pantry.yaml"


def load_yaml_table(filename: str, path: Path | str | None = None) -> dict[str, Any]:
    """Read a lookup table as a mapping.

    Args:
        filename: Name of the packaged table under ``pantry.data``.
        path: Optional external file that replaces the packaged table.

    Raises:
        RuleTableError: If the file is missing, unreadable, not YAML, or not a
            mapping at the top level.
    """
    source = Path(path) if path is not None else None
    try:
        if source is not None:
            text = source.read_text(encoding="utf-8")
        else:
            text = resources.files(__package__).joinpath(filename).read_text(
                encoding="utf-8"
            )
        data = yaml.safe_load(text) or {}
    except (OSError, yaml.YAMLError) as e:
        location = source or filename
        raise RuleTableError(f"Could not read table {location}: {e}", path=source) from e

    if not isinstance(data, dict):
        raise RuleTableError(
            f"Table {source or filename} must be a mapping, got {type(data).__name__}",
            path=source,
        )

    logger.debug("Loaded table", table=filename, path=str(source) if source else None)
    return data
