"""Tactical motif detection for one analyzed piece: forks, pins, skewers, and more."""

import chess

from chess_insight.analysis.constants import AnalysisOptions
from chess_insight.analysis.effects import PieceInEffect
from chess_insight.analysis.tactics.types import TacticFinding, TacticKind
from chess_insight.analysis.tactics.rays import find_line_tactics, scan_ray
from chess_insight.analysis.tactics.finders import (
    find_attacked_pieces,
    find_double_check,
    find_fork,
    find_trap,
)

__all__ = [
    "TacticFinding",
    "TacticKind",
    "scan_ray",
    "find_attacked_pieces",
    "detect_tactics",
]


def detect_tactics(
    board: chess.Board,
    square: chess.Square,
    attacks: list[PieceInEffect],
    defense: str,
    options: AnalysisOptions | None = None,
) -> list[TacticFinding]:
    """Collect the tactics created by the piece on square.

    attacks is the piece's attacked-enemy list and defense its own
    defense balance, both computed by the caller. Traps are looked for
    among the attacked enemy pieces, so every finding targets the other side.
    """
    options = options or AnalysisOptions()
    tactics = find_fork(attacks)
    tactics.extend(find_line_tactics(board, square, defense))
    if options.detect_double_checks:
        tactics.extend(find_double_check(board, square))
    if options.detect_traps:
        for target in attacks:
            tactics.extend(find_trap(board, chess.parse_square(target.square)))
    return tactics
