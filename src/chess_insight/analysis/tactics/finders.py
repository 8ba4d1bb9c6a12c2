"""Tactical motif finders for the analyzed piece: forks, double checks, traps."""

import chess

from chess_insight.analysis.constants import get_piece_value
from chess_insight.analysis.effects import PieceInEffect, resolve_piece
from chess_insight.analysis.tactics.types import TacticFinding, TacticKind


def _as_side_to_move(board: chess.Board, color: chess.Color) -> chess.Board:
    """Copy of board with color to move, so its legal moves can be listed."""
    view = board.copy(stack=False)
    view.turn = color
    return view


def find_attacked_pieces(board: chess.Board, square: chess.Square) -> list[PieceInEffect]:
    """Enemy pieces the piece on square could capture if it were its turn.

    Targets are listed once each, in legal move generation order.
    """
    piece = board.piece_at(square)
    if piece is None:
        return []

    view = _as_side_to_move(board, piece.color)
    attacks = []
    seen: set[chess.Square] = set()
    for move in view.generate_legal_moves(from_mask=chess.BB_SQUARES[square]):
        if move.to_square in seen:
            continue
        target = board.piece_at(move.to_square)
        if target is None or target.color == piece.color:
            continue
        seen.add(move.to_square)
        effect = resolve_piece(board, move.to_square, depth=0)
        if effect is not None:
            attacks.append(effect)
    return attacks


def find_fork(attacks: list[PieceInEffect]) -> list[TacticFinding]:
    if len(attacks) < 2:
        return []
    return [TacticFinding(kind=TacticKind.FORK.value, targets=list(attacks))]


def find_double_check(board: chess.Board, square: chess.Square) -> list[TacticFinding]:
    """Detect the piece on square taking part in a double check."""
    piece = board.piece_at(square)
    if piece is None or piece.color == board.turn:
        return []
    checkers = board.checkers()
    if len(checkers) < 2 or square not in checkers:
        return []
    king_sq = board.king(board.turn)
    king = resolve_piece(board, king_sq, depth=0) if king_sq is not None else None
    return [TacticFinding(
        kind=TacticKind.DOUBLE_CHECK.value,
        targets=[king] if king else [],
    )]


def _in_bad_spot(board: chess.Board, square: chess.Square) -> bool:
    """Attacked, and either undefended or attacked by a cheaper piece."""
    piece = board.piece_at(square)
    if piece is None:
        return False
    enemy_attackers = board.attackers(not piece.color, square)
    if not enemy_attackers:
        return False
    if not board.attackers(piece.color, square):
        return True
    own_val = get_piece_value(piece.piece_type, king=100)
    for attacker_sq in enemy_attackers:
        attacker_type = board.piece_type_at(attacker_sq)
        if attacker_type is None or attacker_type == chess.KING:
            continue
        if get_piece_value(attacker_type, king=100) < own_val:
            return True
    return False


def find_trap(board: chess.Board, square: chess.Square) -> list[TacticFinding]:
    """Detect the piece on square having no safe square to go to.

    The finding targets that piece itself. detect_tactics runs this on the
    enemy pieces the analyzed piece attacks.

    Pawns and kings are never trapped. Neither is a pinned piece or one
    whose king is in check, since its moves are forced by something else.
    An escape that captures a piece of equal or greater value counts as safe.
    """
    piece = board.piece_at(square)
    if piece is None or piece.piece_type in (chess.PAWN, chess.KING):
        return []

    view = _as_side_to_move(board, piece.color)
    if view.is_check() or view.is_pinned(piece.color, square):
        return []
    if not _in_bad_spot(view, square):
        return []

    own_val = get_piece_value(piece.piece_type, king=100)
    for escape in list(view.generate_legal_moves(from_mask=chess.BB_SQUARES[square])):
        captured = view.piece_type_at(escape.to_square)
        if captured is not None and get_piece_value(captured, king=100) >= own_val:
            return []
        view.push(escape)
        safe = not _in_bad_spot(view, escape.to_square)
        view.pop()
        if safe:
            return []

    trapped = resolve_piece(board, square, depth=0)
    return [TacticFinding(kind=TacticKind.TRAP.value, targets=[trapped])]
