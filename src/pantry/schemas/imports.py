"""Result object reported by record import into the pantry store."""

from __future__ import annotations

from pydantic import Field

from pantry.schemas.base import DerivedResult


class ImportResult(DerivedResult):
    """Outcome of importing a batch of records.

    A bad record is counted in ``failed`` and described in ``errors``; it never
    stops the rest of the batch from being imported.
    """

    success: bool
    imported: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)
    errors: tuple[str, ...] = ()
    ids: tuple[str, ...] = Field(default=(), description="Ids of imported records")
