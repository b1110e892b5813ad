"""
Backtracking solver for Wang tilings.

The solver fills every cell strictly inside (-|size|, |size|) on both axes
with a tile from the palette, so that every pair of touching edges matches.

The algorithm (depth-first search with chronological backtracking):
1. Pull the next cell from the spiral cursor
2. If the cell lies outside the target extent, the tiling is complete
3. Filter the palette to tiles compatible with already placed neighbors
4. Place the first untried candidate and descend into the next cell
5. If a cell runs out of candidates, undo the parent's placement and let
   the parent try its next candidate

Search frames live on an explicit stack rather than the Python call stack,
so large grids cannot hit the recursion limit and the search can be
cancelled between steps. Each frame owns its own clone of the spiral cursor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Sequence
import time

from wangtiles.core.tile import Tile
from wangtiles.core.types import Direction, Position
from wangtiles.logging_config import get_logger, log_solver_result
from .spiral import SpiralCursor

logger = get_logger(__name__)


class SolverState(Enum):
    """The current state of the backtracking solver."""
    RUNNING = auto()      # Still searching, more steps needed
    COMPLETE = auto()     # Every cell inside the extent is assigned
    EXHAUSTED = auto()    # Every branch failed; no tiling exists from the palette
    CANCELLED = auto()    # Stopped by should_cancel() or max_steps


@dataclass
class SearchFrame:
    """
    One node of the search tree.

    Attributes:
        position: The cell this frame is assigning
        cursor: Spiral continuation positioned just past this cell
        candidates: Compatible palette tiles, in palette order
        next_index: Index of the next candidate to try
    """
    position: Position
    cursor: SpiralCursor
    candidates: list[Tile] = field(default_factory=list)
    next_index: int = 0

    @property
    def exhausted(self) -> bool:
        return self.next_index >= len(self.candidates)


class WangTiler:
    """
    Explicit-stack backtracking solver.

    Usage:
        tiler = WangTiler(palette, size=4)
        while True:
            state = tiler.step()
            if state != SolverState.RUNNING:
                break

    Or for bulk solving:
        state = tiler.solve()  # COMPLETE, EXHAUSTED or CANCELLED
        tiles = tiler.placed
    """

    def __init__(
        self,
        palette: Sequence[Tile],
        size: int,
        progress_callback: Callable[[int, int], None] | None = None,
    ):
        """
        Initialize the solver.

        Args:
            palette: Tiles to choose from. Order decides which valid tiling is found.
            size: Half-extent of the square to fill. Negative values act like abs(size).
            progress_callback: Optional callback(assigned_cells, total_cells),
                               called after every placement.
        """
        self.palette = list(palette)
        self.size = size
        self.progress_callback = progress_callback

        self._placed: dict[Position, Tile] = {}
        self._stack: list[SearchFrame] = []
        self._state: SolverState | None = None
        self._started = False
        self.placements = 0
        self.backtracks = 0

    @property
    def half_extent(self) -> int:
        return abs(self.size)

    @property
    def total_cells(self) -> int:
        """Number of cells the finished tiling contains."""
        side = max(0, 2 * self.half_extent - 1)
        return side * side

    @property
    def placed(self) -> dict[Position, Tile]:
        """Copy of the current assignment."""
        return dict(self._placed)

    @property
    def depth(self) -> int:
        """Number of frames on the search stack."""
        return len(self._stack)

    @property
    def state(self) -> SolverState:
        return self._state if self._state is not None else SolverState.RUNNING

    def in_extent(self, position: Position) -> bool:
        return position.within(self.half_extent)

    def candidates_at(self, position: Position) -> list[Tile]:
        """
        Palette tiles that fit the already placed neighbors of position.

        Unassigned neighbors impose no constraint. Palette order is preserved.
        """
        neighbors = {
            direction: self._placed.get(position + direction)
            for direction in Direction
        }
        return [
            tile for tile in self.palette
            if tile.compatible_with(
                up=neighbors[Direction.UP],
                down=neighbors[Direction.DOWN],
                left=neighbors[Direction.LEFT],
                right=neighbors[Direction.RIGHT],
            )
        ]

    def _open_frame(self, cursor: SpiralCursor) -> bool:
        """
        Pull the next cell from cursor and push a frame for it.

        Returns False when the cell is outside the extent (search is done).
        """
        position = next(cursor)
        if not self.in_extent(position):
            return False

        candidates = self.candidates_at(position)
        self._stack.append(SearchFrame(position=position, cursor=cursor, candidates=candidates))
        return True

    def _finish(self, state: SolverState) -> SolverState:
        self._state = state
        if state != SolverState.COMPLETE:
            self._placed.clear()
        self._stack.clear()
        return state

    def step(self) -> SolverState:
        """
        Perform one unit of search work.

        Either places the next candidate of the deepest frame (descending one
        level), or, when that frame has no candidates left, pops it so its
        parent can try its next candidate.

        Returns the solver state after this step.
        """
        if self._state is not None:
            return self._state

        if not self._started:
            # First step: open the root frame at the origin
            self._started = True
            if not self._open_frame(SpiralCursor()):
                return self._finish(SolverState.COMPLETE)
            return SolverState.RUNNING

        frame = self._stack[-1]

        # Undo whatever this frame placed on its previous attempt
        if self._placed.pop(frame.position, None) is not None:
            self.backtracks += 1

        if frame.exhausted:
            self._stack.pop()
            if not self._stack:
                return self._finish(SolverState.EXHAUSTED)
            return SolverState.RUNNING

        tile = frame.candidates[frame.next_index]
        frame.next_index += 1
        self._placed[frame.position] = tile
        self.placements += 1

        if self.progress_callback is not None:
            self.progress_callback(len(self._placed), self.total_cells)

        if not self._open_frame(frame.cursor.clone()):
            return self._finish(SolverState.COMPLETE)
        return SolverState.RUNNING

    def solve(
        self,
        max_steps: int | None = None,
        should_cancel: Callable[[], bool] | None = None,
    ) -> SolverState:
        """
        Run the solver to completion.

        Args:
            max_steps: Give up after this many placements (None = unbounded)
            should_cancel: Polled between steps; returning True stops the search

        Returns COMPLETE, EXHAUSTED or CANCELLED. On anything but COMPLETE the
        assignment is cleared.
        """
        start = time.perf_counter()
        state = self.state
        while state == SolverState.RUNNING:
            if should_cancel is not None and should_cancel():
                state = self._finish(SolverState.CANCELLED)
                break
            if max_steps is not None and self._started and self.placements >= max_steps:
                state = self._finish(SolverState.CANCELLED)
                break
            state = self.step()

        duration_ms = int((time.perf_counter() - start) * 1000)
        log_solver_result(
            logger, state.name, self.size, len(self._placed), self.placements, duration_ms
        )
        return state

    def reset(self):
        """Reset the solver for a new run."""
        self._placed.clear()
        self._stack.clear()
        self._state = None
        self._started = False
        self.placements = 0
        self.backtracks = 0
