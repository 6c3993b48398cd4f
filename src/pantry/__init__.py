"""Pantry recipe matching and pairing engine."""

__version__ = "0.1.0"
