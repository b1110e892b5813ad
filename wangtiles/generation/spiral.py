"""
Spiral traversal order for the backtracking solver.

The solver assigns cells in an outward square spiral starting at the origin:

    (0,0) (0,1) (1,1) (1,0) (1,-1) (0,-1) (-1,-1) (-1,0) (-1,1) (-1,2) ...

Runs go up, right, down, left, and the run length grows by one after every
second turn (1, 1, 2, 2, 3, 3, ...). Visiting cells in this order means each
new cell usually touches one or two already placed tiles, which is what lets
the solver prune bad partial assignments early.

The cursor is an infinite iterator. It cannot be rewound; to explore an
alternate branch, clone it and advance the clone.
"""

from __future__ import annotations

from wangtiles.core.types import Direction, Position


class SpiralCursor:
    """
    Lazy, infinite iterator over spiral positions.

    Usage:
        cursor = SpiralCursor()
        first = next(cursor)            # Position(0, 0)
        branch = cursor.clone()         # independent continuation
        next(branch) == next(cursor)    # True, both yield Position(0, 1)
    """

    __slots__ = ("direction", "run_length", "step", "position")

    def __init__(
        self,
        direction: Direction = Direction.UP,
        run_length: int = 1,
        step: int = 0,
        position: Position = Position(0, 0),
    ):
        self.direction = direction
        self.run_length = run_length
        self.step = step
        self.position = position

    def __iter__(self) -> SpiralCursor:
        return self

    def __next__(self) -> Position:
        """Return the current position, then move one unit along the spiral."""
        current = self.position
        self.position = current + self.direction
        self.step += 1
        if self.step == self.run_length:
            self.step = 0
            self._turn()
        return current

    def _turn(self) -> None:
        # Runs lengthen when leaving a horizontal run (right or left).
        if self.direction in (Direction.RIGHT, Direction.LEFT):
            self.run_length += 1
        self.direction = self.direction.clockwise

    def clone(self) -> SpiralCursor:
        """Copy the cursor so the copy can be advanced independently."""
        return SpiralCursor(
            direction=self.direction,
            run_length=self.run_length,
            step=self.step,
            position=self.position,
        )

    def __repr__(self) -> str:
        return (
            f"SpiralCursor(direction={self.direction.name}, run_length={self.run_length}, "
            f"step={self.step}, position=({self.position.x}, {self.position.y}))"
        )
