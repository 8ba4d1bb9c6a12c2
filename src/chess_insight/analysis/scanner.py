"""Whole-board pass: pieces defended by the analyzed piece, and hanging pieces."""

from dataclasses import dataclass, field

import chess

from chess_insight.analysis.effects import PieceInEffect, resolve_piece

__all__ = [
    "HangingPieces",
    "BoardScan",
    "scan_board",
]


@dataclass
class HangingPieces:
    white: list[PieceInEffect] = field(default_factory=list)
    black: list[PieceInEffect] = field(default_factory=list)


@dataclass
class BoardScan:
    defends: list[PieceInEffect]
    hanging: HangingPieces


def scan_board(board: chess.Board, exclude: chess.Square | None = None) -> BoardScan:
    """Resolve every occupied square except exclude, in a1..h8 order.

    defends: non-king pieces with a defender standing on exclude.
    hanging: pieces with at least one attacker and no defenders, by color.
    """
    exclude_name = chess.square_name(exclude) if exclude is not None else None
    defends: list[PieceInEffect] = []
    hanging = HangingPieces()

    for sq in chess.SQUARES:
        if sq == exclude or board.piece_at(sq) is None:
            continue
        effect = resolve_piece(board, sq, depth=1)
        if effect is None:
            continue

        if (
            exclude_name is not None
            and effect.piece_type != chess.KING
            and any(d.square == exclude_name for d in effect.defenders)
        ):
            defends.append(effect)

        if effect.attackers and not effect.defenders:
            getattr(hanging, effect.color).append(effect)

    return BoardScan(defends=defends, hanging=hanging)
