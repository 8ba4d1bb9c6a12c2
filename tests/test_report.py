"""Tests for MoveEffect serialization and text summaries."""

import json

import chess

from chess_insight.analysis import analyze_square
from chess_insight.report import describe_effect, serialize_effect


BISHOP_PIN_BEFORE = "2b1k3/8/5n2/8/8/5N2/8/3Q2K1 b - - 0 1"


def _pin_effect():
    previous = chess.Board(BISHOP_PIN_BEFORE)
    board = previous.copy()
    board.push_san("Bg4")
    return analyze_square(board, chess.G4, previous)


class TestSerialize:
    def test_none(self):
        assert serialize_effect(None) is None

    def test_json_ready(self):
        data = serialize_effect(_pin_effect())
        text = json.dumps(data)
        assert json.loads(text) == data

    def test_nested_structure(self):
        data = serialize_effect(_pin_effect())
        assert data["piece"]["square"] == "g4"
        assert data["piece"]["defenders"][0]["square"] == "f6"
        assert data["tactics"][0]["kind"] == "pin"
        assert [t["square"] for t in data["tactics"][0]["targets"]] == ["f3", "d1"]
        assert data["hanging_pieces"] == {"white": [], "black": []}
        assert data["move_san"] == "Bg4"


class TestDescribe:
    def test_pin_summary(self):
        text = describe_effect(_pin_effect())
        lines = text.splitlines()
        assert lines[0] == "Black bishop on g4: normal, overdefended"
        assert "Move: Bg4 (developing)" in lines
        assert "Defended by: Black knight on f6" in lines
        assert "Attacks: White knight on f3" in lines
        assert "Tactic: pin (White knight on f3, White queen on d1)" in lines

    def test_quiet_piece_has_one_line(self):
        effect = analyze_square(chess.Board("4k3/8/8/8/8/8/8/N3K3 w - - 0 1"), chess.A1)
        assert describe_effect(effect) == "White knight on a1: normal, defended"
