"""Move identification and move-type tagging against the previous position."""

import logging
from dataclasses import dataclass

import chess

from chess_insight.analysis.constants import FIANCHETTO_SQUARES, MoveType
from chess_insight.analysis.effects import PieceInEffect, resolve_piece

__all__ = [
    "MoveClassification",
    "classify_move",
    "find_move",
    "is_fianchetto",
    "move_category",
]

logger = logging.getLogger(__name__)


@dataclass
class MoveClassification:
    move_type: str  # MoveType value
    move: chess.Move | None = None
    san: str | None = None
    captured_piece: PieceInEffect | None = None


def move_category(san: str) -> str:
    """Coarse category of a move from its SAN alone.

    "O-O" → "castle", "Qxf7#" → "mate", "Bb5+" → "check",
    "exd5" → "capture", "e8=Q" → "promotion", "e4" → "developing".
    """
    if san.startswith("O-O"):
        return "castle"
    if "#" in san:
        return "mate"
    if "+" in san:
        return "check"
    if "x" in san:
        return "capture"
    if "=" in san:
        return "promotion"
    return "developing"


def _position_key(board: chess.Board) -> str:
    """FEN without the halfmove and fullmove clocks."""
    return " ".join(board.fen().split()[:4])


def find_move(previous: chess.Board, current: chess.Board) -> chess.Move | None:
    """The legal move of previous that produces current, if any."""
    target = _position_key(current)
    for move in previous.legal_moves:
        trial = previous.copy(stack=False)
        trial.push(move)
        if _position_key(trial) == target:
            return move
    logger.debug("No legal move from %s reaches %s", previous.fen(), current.fen())
    return None


def _captured_piece(previous: chess.Board, move: chess.Move) -> PieceInEffect | None:
    if previous.is_en_passant(move):
        # The captured pawn sits beside the mover, not on the destination
        captured_sq = chess.square(
            chess.square_file(move.to_square), chess.square_rank(move.from_square),
        )
    else:
        captured_sq = move.to_square
    return resolve_piece(previous, captured_sq, depth=0)


def classify_move(
    board: chess.Board, previous: chess.Board | None = None,
) -> MoveClassification:
    """Tag the move that led from previous to board.

    Priority: promotion, capture, en passant, castling; a check or mate
    marker in the SAN then overrides any of those. Stalemate on board
    overrides everything, matched move or not.
    """
    result = MoveClassification(move_type=MoveType.NORMAL.value)

    if previous is not None:
        move = find_move(previous, board)
        if move is not None:
            san = previous.san(move)
            move_type = MoveType.NORMAL
            if move.promotion:
                move_type = MoveType.PROMOTION
            elif previous.piece_at(move.to_square) is not None:
                move_type = MoveType.CAPTURE
            elif previous.is_en_passant(move):
                move_type = MoveType.EN_PASSANT
            elif previous.is_castling(move):
                move_type = MoveType.CASTLING
            if "+" in san:
                move_type = MoveType.CHECK
            if "#" in san:
                move_type = MoveType.CHECKMATE

            result = MoveClassification(
                move_type=move_type.value,
                move=move,
                san=san,
                captured_piece=(
                    _captured_piece(previous, move)
                    if previous.is_capture(move) else None
                ),
            )

    if board.is_stalemate():
        result.move_type = MoveType.STALEMATE.value
    return result


def is_fianchetto(board: chess.Board, square: chess.Square) -> bool:
    """Bishop on b2/g2/b7/g7 with a friendly pawn one or two squares ahead."""
    piece = board.piece_at(square)
    if piece is None or piece.piece_type != chess.BISHOP or square not in FIANCHETTO_SQUARES:
        return False

    step = 1 if piece.color == chess.WHITE else -1
    file = chess.square_file(square)
    for distance in (1, 2):
        rank = chess.square_rank(square) + step * distance
        if not 0 <= rank <= 7:
            continue
        if board.piece_at(chess.square(file, rank)) == chess.Piece(chess.PAWN, piece.color):
            return True
    return False
