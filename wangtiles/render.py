"""Terminal preview of a tiling.

Each tile is drawn as a 3x3 block of characters: the four edge cells carry the
edge colors, corners and centre are dim dots. Rows are emitted top (largest y)
to bottom, so the picture matches the y-up coordinate system.
"""

from __future__ import annotations

from typing import Mapping

from rich.text import Text

from wangtiles.core.tile import Color, Tile
from wangtiles.core.types import Position

EDGE_GLYPH = "█"
FILL_GLYPH = "·"
FILL_STYLE = "dim"
MISSING_STYLE = "bright_black"


def get_color_style(color: Color) -> str:
    """Get the rich style for an edge color."""
    return color.display_name


def _tile_rows(tile: Tile | None) -> list[list[tuple[str, str]]]:
    """Return the 3x3 (glyph, style) block for one cell."""
    fill = (FILL_GLYPH, FILL_STYLE)
    if tile is None:
        blank = (" ", MISSING_STYLE)
        return [[blank] * 3 for _ in range(3)]

    def edge(color: Color) -> tuple[str, str]:
        return (EDGE_GLYPH, get_color_style(color))

    return [
        [fill, edge(tile.top), fill],
        [edge(tile.left), fill, edge(tile.right)],
        [fill, edge(tile.bottom), fill],
    ]


def render_tiling(tiling: Mapping[Position, Tile]) -> Text:
    """Render a tiling as styled text, one 3-line band per grid row."""
    text = Text()
    if not tiling:
        return text

    xs = [pos[0] for pos in tiling]
    ys = [pos[1] for pos in tiling]

    for y in range(max(ys), min(ys) - 1, -1):
        blocks = [_tile_rows(tiling.get(Position(x, y))) for x in range(min(xs), max(xs) + 1)]
        for line in range(3):
            for block in blocks:
                for glyph, style in block[line]:
                    text.append(glyph, style=style)
            text.append("\n")

    return text
