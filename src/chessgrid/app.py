"""Command-line entry point: print a position and its pseudo-legal moves."""

from __future__ import annotations

import argparse
import logging
import sys

from chessgrid.core import STARTING_FEN, Board, FenError, parse_square
from chessgrid.core.types import square_name

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessgrid",
        description="Show a FEN position and the pseudo-legal moves of the side to move.",
    )
    parser.add_argument(
        "fen",
        nargs="?",
        default=STARTING_FEN,
        help="position in Forsyth-Edwards Notation (default: starting position)",
    )
    parser.add_argument(
        "-s",
        "--square",
        help="only list destinations of the troop on this square, e.g. e2",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    return parser


def load_board(fen: str) -> Board:
    """Decode *fen*, falling back to the starting position on error."""
    try:
        return Board.from_fen(fen)
    except FenError as exc:
        _LOGGER.warning("%s; using the starting position instead", exc)
        return Board.starting()


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    board = load_board(args.fen)
    print(board)
    print()

    if args.square is not None:
        try:
            sq = parse_square(args.square)
        except ValueError as exc:
            parser.error(str(exc))
        targets = sorted(board.destinations(sq))
        print(" ".join(square_name(t) for t in targets) or "(no moves)")
        return 0

    moves = sorted(board.moves(), key=lambda m: (m.start, m.end))
    print(f"{len(moves)} moves: " + " ".join(str(m) for m in moves))
    return 0


if __name__ == "__main__":
    sys.exit(main())
