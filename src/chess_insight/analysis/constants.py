"""Constants and small utility functions shared across analysis submodules."""

import enum
from dataclasses import dataclass

import chess

__all__ = [
    "FIANCHETTO_SQUARES",
    "get_piece_value",
    "_PIECE_FIELDS",
    "_color_name",
    "MoveType",
    "DefenseBalance",
    "AnalysisOptions",
]

# Bishop outposts behind a knight-file or g-file pawn
FIANCHETTO_SQUARES = [chess.B2, chess.G2, chess.B7, chess.G7]


def get_piece_value(piece_type: chess.PieceType, *, king=None) -> int:
    """Standard piece value. Callers pick the king value; with king=None
    a king lookup returns None.
    """
    return {
        chess.PAWN: 1, chess.KNIGHT: 3, chess.BISHOP: 3,
        chess.ROOK: 5, chess.QUEEN: 9, chess.KING: king,
    }[piece_type]


# Shared field mapping for MaterialCount ↔ piece types
_PIECE_FIELDS: list[tuple[str, chess.PieceType]] = [
    ("pawns", chess.PAWN),
    ("knights", chess.KNIGHT),
    ("bishops", chess.BISHOP),
    ("rooks", chess.ROOK),
    ("queens", chess.QUEEN),
]


def _color_name(color: chess.Color) -> str:
    """Convert chess.Color bool to lowercase string."""
    return "white" if color == chess.WHITE else "black"


class MoveType(enum.Enum):
    NORMAL = "normal"
    ATTACKING = "attacking"
    CAPTURE = "capture"
    PROMOTION = "promotion"
    EN_PASSANT = "en_passant"
    CASTLING = "castling"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    FIANCHETTO = "fianchetto"


class DefenseBalance(enum.Enum):
    UNDEFENDED = "undefended"
    UNDERDEFENDED = "underdefended"
    DEFENDED = "defended"
    OVERDEFENDED = "overdefended"


@dataclass(frozen=True)
class AnalysisOptions:
    """Switches for the heuristic parts of square analysis."""
    fianchetto_overrides_attacking: bool = True
    detect_double_checks: bool = True
    detect_traps: bool = True
