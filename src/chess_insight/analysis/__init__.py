"""Pure-function square analysis package.

All functions take a chess.Board and return typed dataclass instances.
Boards are only read; turn flips and trial moves happen on copies.
"""

from dataclasses import dataclass, field

import chess

# Re-export everything so `from chess_insight.analysis import X` works
from chess_insight.analysis.constants import *  # noqa: F401,F403
from chess_insight.analysis.effects import *  # noqa: F401,F403
from chess_insight.analysis.classifier import *  # noqa: F401,F403
from chess_insight.analysis.scanner import *  # noqa: F401,F403
from chess_insight.analysis.material import *  # noqa: F401,F403
from chess_insight.analysis.tactics import *  # noqa: F401,F403

# Explicit imports for orchestration logic
from chess_insight.analysis.constants import AnalysisOptions, MoveType
from chess_insight.analysis.effects import PieceInEffect, defense_balance, resolve_piece
from chess_insight.analysis.classifier import classify_move, is_fianchetto
from chess_insight.analysis.scanner import HangingPieces, scan_board
from chess_insight.analysis.tactics import TacticFinding, detect_tactics, find_attacked_pieces


@dataclass
class MoveEffect:
    piece: PieceInEffect
    move_type: str  # MoveType value
    defense: str    # DefenseBalance value
    attacks: list[PieceInEffect] = field(default_factory=list)
    defends: list[PieceInEffect] = field(default_factory=list)
    tactics: list[TacticFinding] = field(default_factory=list)
    hanging_pieces: HangingPieces = field(default_factory=HangingPieces)
    captured_piece: PieceInEffect | None = None
    promotion: str | None = None  # promoted-to kind, e.g. "queen"
    move_san: str | None = None   # SAN of the move that reached this position


def analyze_square(
    board: chess.Board,
    square: chess.Square,
    previous: chess.Board | None = None,
    options: AnalysisOptions | None = None,
) -> MoveEffect | None:
    """Analyze the piece on square, optionally as the result of a move from previous.

    Returns None if the square is empty.
    """
    options = options or AnalysisOptions()
    if board.piece_at(square) is None:
        return None

    classification = classify_move(board, previous)
    move_type = classification.move_type

    piece = resolve_piece(board, square, depth=1)
    defense = defense_balance(piece)

    if piece.attackers and move_type != MoveType.STALEMATE.value:
        move_type = MoveType.ATTACKING.value
    if is_fianchetto(board, square) and (
        options.fianchetto_overrides_attacking or move_type != MoveType.ATTACKING.value
    ):
        move_type = MoveType.FIANCHETTO.value

    scan = scan_board(board, exclude=square)
    attacks = find_attacked_pieces(board, square)
    tactics = detect_tactics(board, square, attacks, defense, options)

    move = classification.move
    return MoveEffect(
        piece=piece,
        move_type=move_type,
        defense=defense,
        attacks=attacks,
        defends=scan.defends,
        tactics=tactics,
        hanging_pieces=scan.hanging,
        captured_piece=classification.captured_piece,
        promotion=chess.piece_name(move.promotion) if move and move.promotion else None,
        move_san=classification.san,
    )
