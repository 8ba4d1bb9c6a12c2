"""Tests for ray scanning and pin/skewer detection."""

import chess

from chess_insight.analysis.tactics import TacticKind, scan_ray
from chess_insight.analysis.tactics.rays import find_line_tactics


STARTING = chess.STARTING_FEN
# Black bishop just went to g4: Nf3 is pinned to Qd1
BISHOP_PIN = "4k3/8/5n2/8/6b1/5N2/8/3Q2K1 w - - 1 2"
# White rook e1 (guarded by Kf1) lines up Ke5 and Qe8
ROOK_SKEWER = "4q3/8/8/4k3/8/8/8/4RK2 b - - 1 1"
# Own pawn between the rook and the enemy queen
ROOK_BLOCKED = "4q2k/8/8/8/8/4P3/8/4RK2 w - - 0 1"


def _distance(a: str, b: str) -> int:
    return chess.square_distance(chess.parse_square(a), chess.parse_square(b))


class TestScanRay:
    def test_stops_after_two_pieces(self):
        board = chess.Board(STARTING)
        found = scan_ray(board, chess.A1, (0, 1))
        assert [p.square for p in found] == ["a2", "a7"]

    def test_one_piece_then_edge(self):
        board = chess.Board(STARTING)
        found = scan_ray(board, chess.D1, (1, 1))
        assert [p.square for p in found] == ["e2"]

    def test_off_board_direction_is_empty(self):
        board = chess.Board(STARTING)
        assert scan_ray(board, chess.A1, (-1, 0)) == []
        assert scan_ray(board, chess.A1, (0, -1)) == []

    def test_entries_ordered_by_distance(self):
        board = chess.Board(BISHOP_PIN)
        found = scan_ray(board, chess.G4, (-1, -1))
        assert [p.square for p in found] == ["f3", "d1"]
        assert _distance("g4", found[0].square) < _distance("g4", found[1].square)

    def test_entries_are_depth_zero(self):
        board = chess.Board(STARTING)
        for p in scan_ray(board, chess.A1, (0, 1)):
            assert p.attackers == []
            assert p.defenders == []


class TestLineTactics:
    def test_bishop_pins_knight_to_queen(self):
        board = chess.Board(BISHOP_PIN)
        findings = find_line_tactics(board, chess.G4, "overdefended")
        assert len(findings) == 1
        assert findings[0].kind == TacticKind.PIN.value
        assert [t.square for t in findings[0].targets] == ["f3", "d1"]
        assert [t.piece for t in findings[0].targets] == ["N", "Q"]

    def test_skewer_when_front_outvalues_back_and_defended(self):
        board = chess.Board(ROOK_SKEWER)
        findings = find_line_tactics(board, chess.E1, "overdefended")
        assert [f.kind for f in findings] == [TacticKind.SKEWER.value]
        assert [t.square for t in findings[0].targets] == ["e5", "e8"]

    def test_undefended_line_piece_reports_pin(self):
        board = chess.Board(ROOK_SKEWER)
        findings = find_line_tactics(board, chess.E1, "undefended")
        assert [f.kind for f in findings] == [TacticKind.PIN.value]

    def test_friendly_piece_on_ray_disqualifies(self):
        board = chess.Board(ROOK_BLOCKED)
        assert find_line_tactics(board, chess.E1, "defended") == []

    def test_non_line_piece_has_no_line_tactics(self):
        board = chess.Board(BISHOP_PIN)
        assert find_line_tactics(board, chess.F6, "defended") == []

    def test_empty_square(self):
        board = chess.Board(BISHOP_PIN)
        assert find_line_tactics(board, chess.A1, "defended") == []
