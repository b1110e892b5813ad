"""Tile and edge-color model for wangtiles.

A Wang tile is a square whose four edges each carry a color. Two tiles may sit
next to each other only when the edges they share have the same color. Tiles
are immutable values, so the solver copies and compares them freely.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .types import Direction


class Color(Enum):
    """Edge colors. The value is the wire encoding consumed by front ends."""

    R = "R"
    G = "G"
    B = "B"
    W = "W"

    @property
    def display_name(self) -> str:
        """Human readable color name (also the rich style name)."""
        return _COLOR_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


_COLOR_NAMES: dict[Color, str] = {
    Color.R: "red",
    Color.G: "green",
    Color.B: "blue",
    Color.W: "white",
}


class Tile(BaseModel):
    """A tile with one color per edge."""

    model_config = ConfigDict(frozen=True)

    top: Color
    bottom: Color
    left: Color
    right: Color

    def edge(self, direction: Direction) -> Color:
        """Get the color of the edge facing the given direction."""
        if direction is Direction.UP:
            return self.top
        if direction is Direction.DOWN:
            return self.bottom
        if direction is Direction.LEFT:
            return self.left
        return self.right

    def fits_against(self, neighbor: Tile | None, direction: Direction) -> bool:
        """Check the shared edge with a neighbor lying in the given direction.

        An absent neighbor imposes no constraint.
        """
        if neighbor is None:
            return True
        return self.edge(direction) == neighbor.edge(direction.opposite)

    def compatible_with(
        self,
        up: Tile | None = None,
        down: Tile | None = None,
        left: Tile | None = None,
        right: Tile | None = None,
    ) -> bool:
        """Check this tile against its (possibly absent) four neighbors."""
        return (
            self.fits_against(up, Direction.UP)
            and self.fits_against(down, Direction.DOWN)
            and self.fits_against(left, Direction.LEFT)
            and self.fits_against(right, Direction.RIGHT)
        )

    def __str__(self) -> str:
        return f"[t:{self.top} b:{self.bottom} l:{self.left} r:{self.right}]"


def compatible(
    candidate: Tile,
    up: Tile | None,
    down: Tile | None,
    left: Tile | None,
    right: Tile | None,
) -> bool:
    """Whether candidate can be placed with the given neighbors around it."""
    return candidate.compatible_with(up=up, down=down, left=left, right=right)
