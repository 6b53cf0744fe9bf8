"""
Command-line interface for two-player n^d tic-tac-toe.
"""

import argparse
import logging
import sys
from typing import List, Optional

from nd_tictactoe.api import play_game
from nd_tictactoe.games.serialization import SerializationError, loads_state
from nd_tictactoe.session import GameSession
from nd_tictactoe.utils.config import (
    DEFAULT_DIMENSIONS,
    DEFAULT_SIZE,
    MAX_DIMENSIONS,
    MAX_SIZE,
    MIN_DIMENSIONS,
    MIN_SIZE,
)
from nd_tictactoe.utils.factory import create_session


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe on an n^d board (two local players)"
    )
    parser.add_argument(
        "--dimensions", "-d",
        type=int,
        default=DEFAULT_DIMENSIONS,
        help=f"Number of dimensions, {MIN_DIMENSIONS}-{MAX_DIMENSIONS} (default: {DEFAULT_DIMENSIONS})",
    )
    parser.add_argument(
        "--size", "-n",
        type=int,
        default=DEFAULT_SIZE,
        help=f"Grid size and run length to win, {MIN_SIZE}-{MAX_SIZE} (default: {DEFAULT_SIZE})",
    )
    parser.add_argument(
        "--load",
        type=argparse.FileType("r"),
        default=None,
        help="Resume from a JSON snapshot (as printed by the 'save' command)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colours",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def build_session(args: argparse.Namespace) -> GameSession:
    """Create the session from --load or from --dimensions/--size."""
    if args.load is not None:
        with args.load as f:
            state = loads_state(f.read())
        return GameSession.from_state(state)
    return create_session(args.dimensions, args.size)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        session = build_session(args)
    except (ValueError, SerializationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    play_game(session, color=not args.no_color)
    return 0


if __name__ == "__main__":
    sys.exit(main())
