import logging
from dataclasses import asdict

import chess
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from chess_insight.analysis import analyze_square
from chess_insight.config import Settings
from chess_insight.game import AnalysisBoard, GameManager
from chess_insight.report import serialize_effect

logger = logging.getLogger(__name__)

settings = Settings()
games = GameManager(options=settings.analysis_options())

app = FastAPI(title="Chess Insight")


# --- Request/Response models ---

class SquareRequest(BaseModel):
    fen: str
    square: str
    previous_fen: str | None = None


class NewGameRequest(BaseModel):
    fen: str = chess.STARTING_FEN


class MoveRequest(BaseModel):
    session_id: str
    move: str


def _get_game(session_id: str) -> AnalysisBoard:
    game = games.get_game(session_id)
    if game is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return game


def _material(game: AnalysisBoard) -> dict:
    ledger = game.material
    return {"white": asdict(ledger.white), "black": asdict(ledger.black)}


# --- Endpoints ---

@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.post("/api/analysis/square")
async def analysis_square(req: SquareRequest):
    try:
        board = chess.Board(req.fen)
        previous = chess.Board(req.previous_fen) if req.previous_fen else None
        square = chess.parse_square(req.square)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    effect = analyze_square(board, square, previous, settings.analysis_options())
    if effect is None:
        raise HTTPException(status_code=404, detail=f"No piece on {req.square}")
    return serialize_effect(effect)


@app.post("/api/game/new")
async def new_game(req: NewGameRequest | None = None):
    fen = req.fen if req else chess.STARTING_FEN
    try:
        session_id, game = games.new_game(fen)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid FEN: {fen}") from e
    return {"session_id": session_id, "fen": game.fen(), "material": _material(game)}


@app.post("/api/game/move")
async def game_move(req: MoveRequest):
    game = _get_game(req.session_id)
    try:
        effect = game.move_and_analyze(req.move)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    logger.debug("Session %s: %s", req.session_id, req.move)
    return {
        "fen": game.fen(),
        "analysis": serialize_effect(effect),
        "material": _material(game),
    }


@app.get("/api/game/{session_id}/analysis/{square}")
async def game_analysis(session_id: str, square: str):
    game = _get_game(session_id)
    try:
        effect = game.analyze_at(square)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    if effect is None:
        raise HTTPException(status_code=404, detail=f"No piece on {square}")
    return serialize_effect(effect)


@app.get("/api/game/{session_id}/material")
async def game_material(session_id: str):
    return _material(_get_game(session_id))
