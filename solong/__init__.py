"""Tile-map collecting game: map loading and validation, movement rules and small helpers."""

__version__ = "0.1.0"