"""Tests for the generate_tiling entry point."""

import pytest

from wangtiles.core import Position
from wangtiles.generation import (
    DEFAULT_PALETTE,
    NoTilingError,
    SearchCancelledError,
    TilingError,
    generate_tiling,
)


class TestGenerateTiling:
    """Test the main tiling function."""

    def test_size_zero_returns_empty(self):
        """Degenerate size gives an empty mapping, not an error."""
        assert generate_tiling(0) == {}

    def test_size_one_returns_origin_only(self):
        """Size 1 places the first palette tile at the origin."""
        assert generate_tiling(1) == {Position(0, 0): DEFAULT_PALETTE[0]}

    def test_uses_default_palette(self):
        """Omitting the palette uses the built-in one."""
        assert generate_tiling(3) == generate_tiling(3, DEFAULT_PALETTE)

    def test_coverage_and_edges(self, assert_edges_match):
        """Every cell in the square is filled and edges match."""
        tiling = generate_tiling(4)
        assert len(tiling) == 49
        assert all(abs(x) < 4 and abs(y) < 4 for x, y in tiling)
        assert_edges_match(tiling)

    def test_negative_size(self):
        """Negative sizes behave like their absolute value."""
        assert generate_tiling(-3) == generate_tiling(3)

    def test_same_size_same_result(self):
        """Generation is deterministic."""
        assert generate_tiling(4) == generate_tiling(4)

    def test_custom_palette(self, uniform_palette, red_tile):
        """A palette passed in is used instead of the built-in one."""
        tiling = generate_tiling(2, uniform_palette)
        assert set(tiling.values()) == {red_tile}

    def test_progress_callback_is_called(self):
        """Progress callback sees the grid fill up."""
        calls = []
        generate_tiling(3, progress_callback=lambda assigned, total: calls.append((assigned, total)))
        assert calls
        assert calls[-1] == (25, 25)


class TestGenerateTilingFailures:
    """Failures are reported as catchable TilingError subclasses."""

    def test_no_tiling_raises(self, unsatisfiable_palette):
        """Search exhaustion raises NoTilingError."""
        with pytest.raises(NoTilingError) as exc_info:
            generate_tiling(2, unsatisfiable_palette)
        assert exc_info.value.size == 2
        assert exc_info.value.placements == 1

    def test_no_tiling_is_tiling_error(self, empty_palette):
        """NoTilingError is a TilingError."""
        with pytest.raises(TilingError):
            generate_tiling(1, empty_palette)

    def test_max_steps_raises_cancelled(self):
        """Running out of budget raises SearchCancelledError."""
        with pytest.raises(SearchCancelledError) as exc_info:
            generate_tiling(4, max_steps=5)
        assert exc_info.value.placements == 5

    def test_should_cancel_raises_cancelled(self):
        """A cancel request raises SearchCancelledError."""
        with pytest.raises(SearchCancelledError):
            generate_tiling(4, should_cancel=lambda: True)
