"""Core domain models for wangtiles.

Pure value types with no I/O: grid coordinates, directions, edge colors
and tiles.

Usage:
    from wangtiles.core import Position, Direction, Color, Tile
"""

from .types import Position, Direction
from .tile import Color, Tile, compatible

__all__ = [
    "Position",
    "Direction",
    "Color",
    "Tile",
    "compatible",
]
