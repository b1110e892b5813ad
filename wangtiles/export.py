"""
Export layer: solved tilings as flat records for front ends.

Each record carries the cell coordinate and its four edge colors. Colors are
encoded as "R", "G", "B" or "W", the stable symbolic form rendering front ends
switch on.
"""

from __future__ import annotations

from typing import Mapping

from pydantic import BaseModel, ConfigDict, TypeAdapter

from wangtiles.core.tile import Color, Tile
from wangtiles.core.types import Position
from wangtiles.generation.tiling import TilingError, generate_tiling
from wangtiles.logging_config import get_logger

logger = get_logger(__name__)


class InvalidSizeError(TilingError, TypeError):
    """Raised when generate_tiles() is called with a non-integer size."""

    pass


class TileRecord(BaseModel):
    """One placed tile, as handed to the consuming front end."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    top: Color
    bottom: Color
    left: Color
    right: Color

    @classmethod
    def from_placement(cls, position: Position, tile: Tile) -> TileRecord:
        """Create a record for a tile placed at position."""
        return cls(
            x=position.x,
            y=position.y,
            top=tile.top,
            bottom=tile.bottom,
            left=tile.left,
            right=tile.right,
        )

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    def to_tile(self) -> Tile:
        return Tile(top=self.top, bottom=self.bottom, left=self.left, right=self.right)


_RECORDS_ADAPTER = TypeAdapter(list[TileRecord])


def to_records(tiling: Mapping[Position, Tile]) -> list[TileRecord]:
    """Flatten a tiling into records ordered by row (y), then column (x)."""
    return [
        TileRecord.from_placement(Position(*pos), tile)
        for pos, tile in sorted(tiling.items(), key=lambda item: (item[0][1], item[0][0]))
    ]


def records_to_json(records: list[TileRecord], indent: int | None = None) -> str:
    """Serialize records to a JSON array string."""
    return _RECORDS_ADAPTER.dump_json(records, indent=indent).decode("utf-8")


def generate_tiles(size: int) -> list[dict]:
    """
    Generate a tiling with the built-in palette and return JSON-ready records.

    Args:
        size: Half-extent of the square; its magnitude is used

    Returns:
        One dict per cell: {"x", "y", "top", "bottom", "left", "right"}

    Raises:
        InvalidSizeError: If size is not an int
        NoTilingError: If the search finds no tiling
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidSizeError(f"size must be an int, got {type(size).__name__}")

    tiling = generate_tiling(size)
    records = to_records(tiling)
    logger.info(f"Exported {len(records)} tile records for size {size}")
    return [record.model_dump(mode="json") for record in records]
