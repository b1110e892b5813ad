"""
wangtiles - Wang tile grid generation by backtracking search.

Fills a square grid centred on the origin with square tiles whose touching
edges share colors, choosing tiles from a small fixed palette.

Example usage:
    from wangtiles import generate_tiling, generate_tiles

    tiling = generate_tiling(4)     # {Position: Tile} for the 7x7 square
    records = generate_tiles(4)     # JSON-ready dicts for front ends
"""

__version__ = "0.1.0"

from .core import Color, Direction, Position, Tile, compatible
from .generation import (
    DEFAULT_PALETTE,
    NoTilingError,
    SearchCancelledError,
    SolverState,
    SpiralCursor,
    TilingError,
    WangTiler,
    generate_tiling,
)
from .export import InvalidSizeError, TileRecord, generate_tiles

__all__ = [
    "__version__",
    "Color",
    "Direction",
    "Position",
    "Tile",
    "compatible",
    "DEFAULT_PALETTE",
    "SpiralCursor",
    "WangTiler",
    "SolverState",
    "generate_tiling",
    "TilingError",
    "NoTilingError",
    "SearchCancelledError",
    "InvalidSizeError",
    "TileRecord",
    "generate_tiles",
]
