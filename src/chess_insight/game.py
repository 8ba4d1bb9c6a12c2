from __future__ import annotations

import logging
import uuid

import chess

from chess_insight.analysis import (
    AnalysisOptions,
    MaterialLedger,
    MoveEffect,
    analyze_square,
)

logger = logging.getLogger(__name__)


def parse_move(board: chess.Board, move: str | chess.Move) -> chess.Move:
    """Parse SAN, falling back to UCI. Raises ValueError if not legal."""
    if isinstance(move, chess.Move):
        parsed = move
    else:
        try:
            parsed = board.parse_san(move)
        except (chess.InvalidMoveError, chess.IllegalMoveError, chess.AmbiguousMoveError):
            parsed = chess.Move.from_uci(move)
    if not parsed or parsed not in board.legal_moves:
        raise chess.IllegalMoveError(f"illegal move: {parsed.uci()} in {board.fen()}")
    return parsed


class AnalysisBoard:
    """A game position that reports a MoveEffect for each move played.

    Wraps a chess.Board for move rules and keeps a MaterialLedger fed by
    the captures and promotions found during analysis.
    """

    def __init__(
        self,
        fen: str = chess.STARTING_FEN,
        options: AnalysisOptions | None = None,
    ):
        self._board = chess.Board(fen)
        self._options = options or AnalysisOptions()
        self._ledger = MaterialLedger()

    @property
    def board(self) -> chess.Board:
        return self._board.copy()

    @property
    def material(self) -> MaterialLedger:
        return self._ledger.snapshot()

    def fen(self) -> str:
        return self._board.fen()

    def move_and_analyze(self, move: str | chess.Move) -> MoveEffect | None:
        """Play move, analyze the moved piece, and update the material ledger."""
        parsed = parse_move(self._board, move)
        before = self._board.copy(stack=False)
        self._board.push(parsed)
        logger.info("Played %s, now %s", parsed.uci(), self._board.fen())

        effect = analyze_square(
            self._board.copy(stack=False), parsed.to_square, before, self._options,
        )
        self._ledger.apply(effect)
        return effect

    def analyze_at(self, square: str | chess.Square) -> MoveEffect | None:
        """Analyze any square of the current position.

        The position after the second-to-last move serves as the previous
        position for move tagging. With fewer than two moves played there
        is none.
        """
        if isinstance(square, str):
            square = chess.parse_square(square)
        previous = None
        if len(self._board.move_stack) >= 2:
            previous = self._board.copy()
            previous.pop()
        return analyze_square(self._board.copy(stack=False), square, previous, self._options)


class GameManager:
    def __init__(self, options: AnalysisOptions | None = None):
        self._options = options
        self._sessions: dict[str, AnalysisBoard] = {}

    def new_game(self, fen: str = chess.STARTING_FEN) -> tuple[str, AnalysisBoard]:
        """Create a new game session. Returns (session_id, board)."""
        game = AnalysisBoard(fen, options=self._options)
        session_id = str(uuid.uuid4())
        self._sessions[session_id] = game
        return session_id, game

    def get_game(self, session_id: str) -> AnalysisBoard | None:
        return self._sessions.get(session_id)
