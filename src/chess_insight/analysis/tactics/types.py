"""Tactic finding type, vocabulary, and ray direction tables."""

import enum
from dataclasses import dataclass, field

import chess

from chess_insight.analysis.effects import PieceInEffect


class TacticKind(enum.Enum):
    FORK = "fork"
    PIN = "pin"
    SKEWER = "skewer"
    DOUBLE_CHECK = "double_check"
    TRAP = "trap"


@dataclass
class TacticFinding:
    kind: str  # TacticKind value
    # For pin/skewer: [front piece, piece behind it], in ray order
    targets: list[PieceInEffect] = field(default_factory=list)


_ORTHOGONAL = [(0, 1), (0, -1), (1, 0), (-1, 0)]
_DIAGONAL = [(1, 1), (1, -1), (-1, 1), (-1, -1)]

_RAY_DIRS: dict[chess.PieceType, list[tuple[int, int]]] = {
    chess.ROOK: _ORTHOGONAL,
    chess.BISHOP: _DIAGONAL,
    chess.QUEEN: _ORTHOGONAL + _DIAGONAL,
}
