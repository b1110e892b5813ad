"""Tests for the export layer."""

import json

import pytest

from wangtiles.core import Color, Position, Tile
from wangtiles.export import (
    InvalidSizeError,
    TileRecord,
    generate_tiles,
    records_to_json,
    to_records,
)
from wangtiles.generation import DEFAULT_PALETTE, TilingError


class TestTileRecord:
    """Tests for TileRecord."""

    def test_from_placement(self):
        """A record carries the coordinate and all four edges."""
        tile = Tile(top=Color.R, bottom=Color.G, left=Color.B, right=Color.W)
        record = TileRecord.from_placement(Position(-1, 2), tile)
        assert (record.x, record.y) == (-1, 2)
        assert record.position == Position(-1, 2)
        assert record.to_tile() == tile

    def test_dump_uses_color_codes(self):
        """Colors serialize as their one-letter codes."""
        tile = Tile(top=Color.R, bottom=Color.G, left=Color.B, right=Color.W)
        record = TileRecord.from_placement(Position(0, 0), tile)
        assert record.model_dump(mode="json") == {
            "x": 0, "y": 0, "top": "R", "bottom": "G", "left": "B", "right": "W",
        }


class TestToRecords:
    """Tests for flattening tilings."""

    def test_ordered_by_row_then_column(self, red_tile):
        """Records come out sorted by y, then x."""
        tiling = {
            Position(1, 0): red_tile,
            Position(0, 1): red_tile,
            Position(-1, 0): red_tile,
            Position(0, -1): red_tile,
        }
        records = to_records(tiling)
        assert [(r.x, r.y) for r in records] == [(0, -1), (-1, 0), (1, 0), (0, 1)]

    def test_empty(self):
        """An empty tiling gives no records."""
        assert to_records({}) == []

    def test_json_round_trip(self, red_tile):
        """records_to_json produces a JSON array of objects."""
        records = to_records({Position(0, 0): red_tile})
        data = json.loads(records_to_json(records))
        assert data == [{"x": 0, "y": 0, "top": "R", "bottom": "R", "left": "R", "right": "R"}]


class TestGenerateTiles:
    """Tests for the externally callable operation."""

    def test_size_zero(self):
        """Size 0 yields no records."""
        assert generate_tiles(0) == []

    def test_size_one(self):
        """Size 1 yields the first palette tile at the origin."""
        first = DEFAULT_PALETTE[0]
        assert generate_tiles(1) == [{
            "x": 0, "y": 0,
            "top": first.top.value, "bottom": first.bottom.value,
            "left": first.left.value, "right": first.right.value,
        }]

    def test_one_record_per_cell(self):
        """Coordinates are unique and cover the square exactly."""
        records = generate_tiles(3)
        coords = {(r["x"], r["y"]) for r in records}
        assert len(records) == 25
        assert coords == {(x, y) for x in range(-2, 3) for y in range(-2, 3)}

    def test_records_match_edges(self):
        """Adjacent records share edge colors."""
        by_pos = {(r["x"], r["y"]): r for r in generate_tiles(4)}
        for (x, y), record in by_pos.items():
            if (x + 1, y) in by_pos:
                assert record["right"] == by_pos[(x + 1, y)]["left"]
            if (x, y + 1) in by_pos:
                assert record["top"] == by_pos[(x, y + 1)]["bottom"]

    def test_negative_size(self):
        """Negative size gives the same records as its magnitude."""
        assert generate_tiles(-2) == generate_tiles(2)

    def test_deterministic(self):
        """Same size, same records."""
        assert generate_tiles(4) == generate_tiles(4)

    @pytest.mark.parametrize("bad", [2.0, "3", None, True])
    def test_rejects_non_int(self, bad):
        """Non-integer sizes are rejected."""
        with pytest.raises(InvalidSizeError):
            generate_tiles(bad)

    def test_invalid_size_error_types(self):
        """InvalidSizeError is both a TilingError and a TypeError."""
        assert issubclass(InvalidSizeError, TilingError)
        assert issubclass(InvalidSizeError, TypeError)
