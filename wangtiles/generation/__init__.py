"""Wang tiling generation: spiral traversal, palette and backtracking solver."""

from .spiral import SpiralCursor
from .palette import DEFAULT_PALETTE, create_default_palette
from .solver import WangTiler, SolverState, SearchFrame
from .tiling import (
    generate_tiling,
    TilingError,
    NoTilingError,
    SearchCancelledError,
)

__all__ = [
    "SpiralCursor",
    "DEFAULT_PALETTE",
    "create_default_palette",
    "WangTiler",
    "SolverState",
    "SearchFrame",
    "generate_tiling",
    "TilingError",
    "NoTilingError",
    "SearchCancelledError",
]
