"""Ray-based tactical detection: pins and skewers from one line piece."""

import chess

from chess_insight.analysis.constants import DefenseBalance, _color_name, get_piece_value
from chess_insight.analysis.effects import PieceInEffect, resolve_piece
from chess_insight.analysis.tactics.types import TacticFinding, TacticKind, _RAY_DIRS

_SAFE_BALANCES = (DefenseBalance.DEFENDED.value, DefenseBalance.OVERDEFENDED.value)


def scan_ray(
    board: chess.Board,
    start_sq: chess.Square,
    direction: tuple[int, int],
) -> list[PieceInEffect]:
    """Walk a ray from start_sq, return the first two pieces met (depth 0)."""
    df, dr = direction
    f = chess.square_file(start_sq) + df
    r = chess.square_rank(start_sq) + dr
    found: list[PieceInEffect] = []
    while 0 <= f <= 7 and 0 <= r <= 7:
        sq = chess.square(f, r)
        if board.piece_at(sq) is not None:
            effect = resolve_piece(board, sq, depth=0)
            if effect is None:
                break
            found.append(effect)
            if len(found) == 2:
                break
        f += df
        r += dr
    return found


def find_line_tactics(
    board: chess.Board,
    square: chess.Square,
    defense: str,
) -> list[TacticFinding]:
    """Pins and skewers created by the line piece on square.

    For each ray of the piece, two enemy pieces in a row form a pin. The
    pair is a skewer instead when the front piece outvalues the one behind
    and the line piece itself is defended or overdefended.
    """
    piece = board.piece_at(square)
    if piece is None or piece.piece_type not in _RAY_DIRS:
        return []

    findings = []
    for direction in _RAY_DIRS[piece.piece_type]:
        on_ray = scan_ray(board, square, direction)
        if len(on_ray) < 2:
            continue
        front, behind = on_ray
        if _color_name(piece.color) in (front.color, behind.color):
            continue

        kind = TacticKind.PIN
        front_val = get_piece_value(front.piece_type, king=100)
        behind_val = get_piece_value(behind.piece_type, king=100)
        if front_val > behind_val and defense in _SAFE_BALANCES:
            kind = TacticKind.SKEWER
        findings.append(TacticFinding(kind=kind.value, targets=[front, behind]))
    return findings
