"""Repository layer for pantry records."""

from pantry.database.repositories.pantry import InMemoryPantryRepository


__all__ = ["InMemoryPantryRepository"]
