"""Exceptions raised at the edges of the pantry engine.

The matching, bucketing, pairing and shopping-list operations never raise on
well-formed input. These exceptions cover loading the static lookup tables
and addressing records in the pantry store.
"""

from __future__ import annotations

from pathlib import Path


class PantryError(Exception):
    """Base exception for pantry errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RuleTableError(PantryError):
    """Raised when a static lookup table cannot be loaded.

    This occurs at start-up when a table file is missing, is not valid YAML,
    or does not match the expected structure.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class RecordNotFoundError(PantryError):
    """Raised when a record id is not present in the pantry store."""

    def __init__(self, resource: str, identifier: str) -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} with identifier '{identifier}' not found")
