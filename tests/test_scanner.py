"""Tests for the whole-board defends/hanging pass."""

import chess
import pytest

from chess_insight.analysis import resolve_piece, scan_board


STARTING = chess.STARTING_FEN
ROOK_HITS_PAWN = "4k3/8/8/3p4/8/8/8/3RK3 w - - 0 1"
PAWN_GUARDED = "4k3/8/2p5/3p4/8/8/8/3RK3 w - - 0 1"
QUEEN_NEXT_TO_KING = "4k3/8/8/8/8/8/3Q4/4K3 w - - 0 1"
MIDDLEGAME = "r2q1rk1/pp2bppp/2n1pn2/3p4/2PP1B2/2N1PN2/PP3PPP/R2QKB1R w KQ - 0 9"
LOOSE_PIECES = "r3k3/1p6/2n5/4b3/3N4/8/5Q2/4K2R b K - 0 1"


class TestDefends:
    def test_pawn_defends_nothing_at_start(self):
        scan = scan_board(chess.Board(STARTING), exclude=chess.E2)
        assert scan.defends == []

    def test_king_defends_neighbours_in_square_order(self):
        scan = scan_board(chess.Board(STARTING), exclude=chess.E1)
        assert [p.square for p in scan.defends] == ["d1", "f1", "d2", "e2", "f2"]

    def test_kings_are_never_listed(self):
        scan = scan_board(chess.Board(QUEEN_NEXT_TO_KING), exclude=chess.D2)
        assert scan.defends == []

    def test_no_exclude_means_no_defends(self):
        scan = scan_board(chess.Board(STARTING))
        assert scan.defends == []


class TestHanging:
    def test_starting_position_has_none(self):
        scan = scan_board(chess.Board(STARTING), exclude=chess.E2)
        assert scan.hanging.white == []
        assert scan.hanging.black == []

    def test_attacked_undefended_pawn(self):
        scan = scan_board(chess.Board(ROOK_HITS_PAWN))
        assert [p.square for p in scan.hanging.black] == ["d5"]
        assert scan.hanging.white == []
        assert [a.square for a in scan.hanging.black[0].attackers] == ["d1"]

    def test_excluded_square_is_skipped(self):
        scan = scan_board(chess.Board(ROOK_HITS_PAWN), exclude=chess.D5)
        assert scan.hanging.black == []

    def test_guarded_pawn_is_not_hanging(self):
        scan = scan_board(chess.Board(PAWN_GUARDED))
        assert scan.hanging.black == []

    @pytest.mark.parametrize("fen", [MIDDLEGAME, LOOSE_PIECES])
    def test_census_matches_attacker_defender_counts(self, fen):
        board = chess.Board(fen)
        scan = scan_board(board, exclude=chess.E1)
        hanging = {p.square for p in scan.hanging.white + scan.hanging.black}
        for sq in chess.SquareSet(board.occupied):
            if sq == chess.E1:
                continue
            effect = resolve_piece(board, sq)
            expected = bool(effect.attackers) and not effect.defenders
            assert (effect.square in hanging) == expected

    def test_hanging_filed_under_owner(self):
        scan = scan_board(chess.Board(LOOSE_PIECES))
        for p in scan.hanging.white:
            assert p.color == "white"
        for p in scan.hanging.black:
            assert p.color == "black"
