"""wangtiles - Wang tile grid generator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console

from wangtiles import __version__
from wangtiles.config import TilerSettings
from wangtiles.export import records_to_json, to_records
from wangtiles.generation import TilingError, generate_tiling
from wangtiles.logging_config import get_logger, setup_logging
from wangtiles.render import render_tiling

logger = get_logger(__name__)


def build_parser(settings: TilerSettings) -> argparse.ArgumentParser:
    """Build the argument parser, using settings for defaults."""
    parser = argparse.ArgumentParser(
        prog="wangtiles",
        description="wangtiles - Generate a square grid of edge-matching Wang tiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wangtiles                 # Render a tiling with the default size
  wangtiles --size 6        # Fill the 11x11 square centred on the origin
  wangtiles --size 3 --json # Print tile records as JSON
        """,
    )
    parser.add_argument(
        "--size",
        type=int,
        default=settings.size,
        help=f"Half-extent of the square to fill (default: {settings.size})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print tile records as JSON instead of a preview",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Render a colored preview (default when --json is not given)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        metavar="N",
        default=settings.max_steps,
        help="Give up after N tile placements",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while searching",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=settings.data_dir,
        help=f"Data directory for the debug log (default: {settings.data_dir}/)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging to console",
    )
    return parser


def make_progress_callback(pbar) -> Callable[[int, int], None]:
    """Advance pbar to the deepest assignment reached so far.

    Backtracking shrinks the assignment; the bar only moves forward, and
    through update() so tqdm can throttle redraws.
    """

    def progress_callback(assigned: int, total: int) -> None:
        delta = assigned - pbar.n
        if delta > 0:
            pbar.update(delta)

    return progress_callback


def run(args: argparse.Namespace, console: Console) -> int:
    """Generate and print a tiling.

    Returns:
        Exit code
    """
    progress_callback = None
    pbar = None
    if args.progress:
        from tqdm import tqdm

        side = max(0, 2 * abs(args.size) - 1)
        pbar = tqdm(total=side * side, desc="  Placing tiles", unit="cells", file=sys.stderr)
        progress_callback = make_progress_callback(pbar)

    try:
        tiling = generate_tiling(
            args.size,
            max_steps=args.max_steps,
            progress_callback=progress_callback,
        )
    except TilingError as e:
        logger.error(f"Tiling failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if pbar is not None:
            pbar.close()

    if args.json:
        print(records_to_json(to_records(tiling), indent=2))
    if args.render or not args.json:
        console.print(render_tiling(tiling), end="")
        console.print(f"{len(tiling)} tiles, size {args.size}", style="dim")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for wangtiles."""
    load_dotenv()
    try:
        settings = TilerSettings.from_env()
    except ValidationError as e:
        print(f"Error: invalid WANGTILES_* setting\n{e}", file=sys.stderr)
        return 1

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    console_level = logging.DEBUG if args.debug else logging.WARNING
    log_path = setup_logging(args.data, console_level=console_level)
    logger.debug(f"wangtiles v{__version__} | log file: {log_path}")

    return run(args, Console())


if __name__ == "__main__":
    sys.exit(main())
