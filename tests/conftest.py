"""Shared test fixtures for wangtiles."""

import logging
import tempfile
from pathlib import Path

import pytest

from wangtiles.core import Color, Tile
from wangtiles.core.types import Position


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (skipped by default, run with --run-slow)")


def pytest_addoption(parser):
    """Add --run-slow option to pytest."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run slow tests (skipped by default)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is passed."""
    if config.getoption("--run-slow"):
        return

    skip_slow = pytest.mark.skip(reason="Slow test (use --run-slow to run)")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


# =============================================================================
# Directories
# =============================================================================

@pytest.fixture
def temp_data_dir() -> Path:
    """Create a temporary data directory for tests."""
    with tempfile.TemporaryDirectory(prefix="wangtiles_test_") as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reset_logging():
    """Drop handlers installed by setup_logging() once the test ends."""
    yield
    root_logger = logging.getLogger("wangtiles")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()


# =============================================================================
# Tiles and palettes
# =============================================================================

@pytest.fixture
def red_tile() -> Tile:
    """A tile whose four edges are all red."""
    return Tile(top=Color.R, bottom=Color.R, left=Color.R, right=Color.R)


@pytest.fixture
def uniform_palette(red_tile: Tile) -> list[Tile]:
    """A single self-matching tile: every grid is trivially tileable."""
    return [red_tile]


@pytest.fixture
def unsatisfiable_palette() -> list[Tile]:
    """A single tile that cannot sit above or beside itself."""
    return [Tile(top=Color.R, bottom=Color.G, left=Color.B, right=Color.W)]


@pytest.fixture
def empty_palette() -> list[Tile]:
    """No tiles at all."""
    return []


@pytest.fixture
def assert_edges_match():
    """Checker asserting every adjacent pair in a tiling shares matching edge colors."""

    def check(tiling: dict[Position, Tile]) -> None:
        for (x, y), tile in tiling.items():
            right = tiling.get(Position(x + 1, y))
            if right is not None:
                assert tile.right == right.left, f"Horizontal mismatch at ({x}, {y})"
            above = tiling.get(Position(x, y + 1))
            if above is not None:
                assert tile.top == above.bottom, f"Vertical mismatch at ({x}, {y})"

    return check
