"""
Tiling generation entry point.

Wraps the backtracking solver with the built-in palette and turns the solver's
terminal states into a result or a recoverable exception.
"""

from typing import Callable, Sequence

from wangtiles.core.tile import Tile
from wangtiles.core.types import Position
from wangtiles.logging_config import get_logger
from .palette import DEFAULT_PALETTE
from .solver import WangTiler, SolverState

logger = get_logger(__name__)


class TilingError(Exception):
    """Base exception for tiling generation failures."""

    pass


class NoTilingError(TilingError):
    """Raised when the search exhausts every branch without completing the grid."""

    def __init__(self, size: int, placements: int):
        self.size = size
        self.placements = placements
        super().__init__(
            f"No tiling exists for size {size} with this palette "
            f"(search exhausted after {placements} placements)"
        )


class SearchCancelledError(TilingError):
    """Raised when the search is stopped before reaching a result."""

    def __init__(self, size: int, placements: int):
        self.size = size
        self.placements = placements
        super().__init__(f"Tiling search for size {size} cancelled after {placements} placements")


def generate_tiling(
    size: int,
    palette: Sequence[Tile] | None = None,
    *,
    max_steps: int | None = None,
    should_cancel: Callable[[], bool] | None = None,
    progress_callback: Callable[[int, int], None] | None = None,
) -> dict[Position, Tile]:
    """
    Fill the square of cells strictly inside (-|size|, |size|) with matching tiles.

    Args:
        size: Half-extent of the square. 0 gives an empty tiling; negative
              values behave like their absolute value.
        palette: Tiles to use, in search order (None = built-in palette)
        max_steps: Give up after this many placements (None = unbounded)
        should_cancel: Polled between search steps; True stops the search
        progress_callback: Optional callback(assigned_cells, total_cells)

    Returns:
        Dict mapping every Position in the square to its Tile.

    Raises:
        NoTilingError: If no complete tiling can be built from the palette
        SearchCancelledError: If max_steps or should_cancel stopped the search
    """
    tiles = DEFAULT_PALETTE if palette is None else palette
    tiler = WangTiler(tiles, size, progress_callback=progress_callback)

    logger.debug(f"Generating tiling | size={size} | palette={len(tiler.palette)} tiles")
    state = tiler.solve(max_steps=max_steps, should_cancel=should_cancel)

    if state == SolverState.COMPLETE:
        return tiler.placed
    if state == SolverState.CANCELLED:
        raise SearchCancelledError(size, tiler.placements)
    raise NoTilingError(size, tiler.placements)
