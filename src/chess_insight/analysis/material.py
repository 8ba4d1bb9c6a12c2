"""Running material ledger, updated from analysis results."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import chess

from chess_insight.analysis.constants import _PIECE_FIELDS

if TYPE_CHECKING:
    from chess_insight.analysis import MoveEffect

__all__ = [
    "MaterialCount",
    "MaterialLedger",
]

logger = logging.getLogger(__name__)

_FIELD_BY_TYPE: dict[chess.PieceType, str] = {pt: fname for fname, pt in _PIECE_FIELDS}


@dataclass
class MaterialCount:
    pawns: int = 8
    knights: int = 2
    bishops: int = 2
    rooks: int = 2
    queens: int = 1


@dataclass
class MaterialLedger:
    """Remaining non-king material per side.

    Starts from the standard allotment and only changes through captures
    and promotions reported by analysis; it is never recounted from a board.
    """
    white: MaterialCount = field(default_factory=MaterialCount)
    black: MaterialCount = field(default_factory=MaterialCount)

    def _count(self, color: str) -> MaterialCount:
        return self.white if color == "white" else self.black

    def record_capture(self, color: str, piece_type: chess.PieceType) -> None:
        """color lost a piece of piece_type."""
        fname = _FIELD_BY_TYPE.get(piece_type)
        if fname is None:
            return
        count = self._count(color)
        current = getattr(count, fname)
        if current == 0:
            logger.warning("Ignoring capture of %s %s: count already zero", color, fname)
            return
        setattr(count, fname, current - 1)

    def record_promotion(self, color: str, piece_type: chess.PieceType) -> None:
        """color promoted a pawn to piece_type."""
        fname = _FIELD_BY_TYPE.get(piece_type)
        if fname is None:
            return
        count = self._count(color)
        setattr(count, fname, getattr(count, fname) + 1)

    def apply(self, effect: MoveEffect | None) -> None:
        """Fold the capture and promotion of one analyzed move into the ledger."""
        if effect is None:
            return
        if effect.captured_piece is not None:
            self.record_capture(effect.captured_piece.color, effect.captured_piece.piece_type)
        if effect.promotion is not None:
            self.record_promotion(
                effect.piece.color, chess.PIECE_NAMES.index(effect.promotion),
            )

    def snapshot(self) -> MaterialLedger:
        return copy.deepcopy(self)
