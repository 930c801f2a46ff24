"""Console entry point: print the starting position."""

from __future__ import annotations

import argparse
import logging
import sys

from chessmodel.game.state import GameState
from chessmodel.render import debug_board

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessmodel",
        description="Print the standard chess starting position as Unicode glyphs.",
    )
    parser.add_argument(
        "--empty",
        default="#",
        help="Character drawn on empty squares (default: %(default)s)",
    )
    parser.add_argument(
        "--coordinates",
        action="store_true",
        help="Label ranks and files around the board",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging threshold (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Render a fresh game state to stdout and return the exit code."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    state = GameState()
    _LOGGER.info("Rendering %d pieces", len(state))
    board = state.generate_board(None)
    sys.stdout.write(
        debug_board(board, empty=args.empty, with_coordinates=args.coordinates)
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
