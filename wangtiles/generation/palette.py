"""
Built-in Wang tile palette.

Eleven hand-authored tiles over four edge colors. Order matters: the solver
tries candidates in palette order, so the first tile here is what an
unconstrained cell (such as the origin) always receives first.

The palette is passed to the solver explicitly; nothing in the solver refers
to it directly, so tests can swap in tiny synthetic palettes.
"""

from wangtiles.core.tile import Color, Tile

R, G, B, W = Color.R, Color.G, Color.B, Color.W


def _tile(top: Color, bottom: Color, left: Color, right: Color) -> Tile:
    return Tile(top=top, bottom=bottom, left=left, right=right)


#                  top bottom left right
DEFAULT_PALETTE: tuple[Tile, ...] = (
    _tile(R, R, G, R),
    _tile(B, B, G, R),
    _tile(R, G, G, G),
    _tile(W, R, B, B),
    _tile(B, W, B, B),
    _tile(W, R, W, W),
    _tile(R, B, W, G),
    _tile(B, B, R, W),
    _tile(B, W, R, R),
    _tile(G, B, R, G),
    _tile(R, R, G, W),
)


def create_default_palette() -> list[Tile]:
    """Return a fresh list holding the built-in palette, in search order."""
    return list(DEFAULT_PALETTE)
