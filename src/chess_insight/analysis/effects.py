"""Attacker/defender resolution for a single occupied square."""

from dataclasses import dataclass, field

import chess

from chess_insight.analysis.constants import DefenseBalance, _color_name

__all__ = [
    "PieceInEffect",
    "resolve_piece",
    "defense_balance",
]


@dataclass
class PieceInEffect:
    square: str  # algebraic name, e.g. "f3"
    piece: str   # colored symbol, e.g. "N" or "q"
    color: str   # "white" or "black"
    attackers: list["PieceInEffect"] = field(default_factory=list)
    defenders: list["PieceInEffect"] = field(default_factory=list)

    @property
    def piece_type(self) -> chess.PieceType:
        return chess.Piece.from_symbol(self.piece).piece_type

    @property
    def kind(self) -> str:
        """Lowercase piece name: "pawn", "knight", ..."""
        return chess.piece_name(self.piece_type)


def resolve_piece(
    board: chess.Board, square: chess.Square, depth: int = 1,
) -> PieceInEffect | None:
    """Describe the piece on square with its attackers and defenders.

    Every piece attacking the square is a defender when it shares the
    occupant's color and an attacker otherwise. Pins are not considered.
    Nested entries are resolved with depth - 1; at depth 0 both lists are
    empty, so two pieces attacking each other never recurse.
    Returns None for an empty square.
    """
    piece = board.piece_at(square)
    if piece is None:
        return None

    attackers: list[PieceInEffect] = []
    defenders: list[PieceInEffect] = []
    if depth > 0:
        for color in (chess.WHITE, chess.BLACK):
            for from_sq in board.attackers(color, square):
                sub = resolve_piece(board, from_sq, depth - 1)
                if sub is None:
                    continue
                (defenders if color == piece.color else attackers).append(sub)

    return PieceInEffect(
        square=chess.square_name(square),
        piece=piece.symbol(),
        color=_color_name(piece.color),
        attackers=attackers,
        defenders=defenders,
    )


def defense_balance(effect: PieceInEffect) -> str:
    """Compare defender count against attacker count.

    An untouched piece (no attackers, no defenders) counts as defended.
    """
    n_att = len(effect.attackers)
    n_def = len(effect.defenders)
    if n_att == 0:
        return (DefenseBalance.OVERDEFENDED if n_def else DefenseBalance.DEFENDED).value
    if n_def == 0:
        return DefenseBalance.UNDEFENDED.value
    if n_def > n_att:
        return DefenseBalance.OVERDEFENDED.value
    if n_def < n_att:
        return DefenseBalance.UNDERDEFENDED.value
    return DefenseBalance.DEFENDED.value
