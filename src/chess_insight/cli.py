"""CLI utility for single-square analysis.

Usage:
    python -m chess_insight.cli <fen> <square> [--previous-fen FEN]
    python -m chess_insight.cli <fen> --move MOVE [--text]

Prints the MoveEffect as JSON, or a plain-text summary with --text.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

import chess

from chess_insight.config import Settings
from chess_insight.game import AnalysisBoard
from chess_insight.analysis import analyze_square
from chess_insight.report import describe_effect, serialize_effect


def _run(args: argparse.Namespace, settings: Settings):
    options = settings.analysis_options()
    if args.move:
        game = AnalysisBoard(args.fen, options=options)
        return game.move_and_analyze(args.move)

    board = chess.Board(args.fen)
    previous = chess.Board(args.previous_fen) if args.previous_fen else None
    return analyze_square(board, chess.parse_square(args.square), previous, options)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Attackers, defenders and tactics for one square",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("fen", help="Position FEN (quote the full string)")
    parser.add_argument("square", nargs="?", help="Square to analyze, e.g. e4")
    parser.add_argument(
        "--previous-fen", metavar="FEN",
        help="Position before the last move, for move tagging",
    )
    parser.add_argument(
        "--move", help="Play MOVE (SAN or UCI) from FEN and analyze the moved piece",
    )
    parser.add_argument(
        "--text", action="store_true",
        help="Print a plain-text summary instead of JSON",
    )
    args = parser.parse_args(argv)
    if not args.move and not args.square:
        parser.error("a square is required unless --move is given")

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    try:
        effect = _run(args, settings)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    if effect is None:
        print("error: no piece on that square", file=sys.stderr)
        sys.exit(1)

    if args.text:
        print(describe_effect(effect))
    else:
        json.dump(serialize_effect(effect), sys.stdout, indent=2)
        print()


if __name__ == "__main__":
    main()
