"""FastAPI REST interface for the computer opponent."""

import logging
from typing import Optional

import chess
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from opponent.config import CONFIG
from opponent.difficulty import DIFFICULTY_SETTINGS, calculate_points, resolve_tier
from opponent.selector import MoveSelector

logging.basicConfig(level=CONFIG.log_level)
log = logging.getLogger(__name__)

app = FastAPI(title=CONFIG.api.title, version="1.0.0")

# Stateless per request: each call builds its own board from the FEN.
selector = MoveSelector()


class MoveRequest(BaseModel):
    fen: str
    difficulty: str = CONFIG.api.default_difficulty


class MoveResponse(BaseModel):
    move: Optional[str]  # UCI, None when there is no legal move
    san: Optional[str]
    fen: str  # position after the move
    randomized: bool
    score: Optional[int]


class PointsRequest(BaseModel):
    difficulty: str
    won: bool


@app.post("/move", response_model=MoveResponse)
def choose_move(req: MoveRequest):
    try:
        board = chess.Board(req.fen)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid FEN: {e}")

    selection = selector.select(board, req.difficulty)
    if selection.move is None:
        log.info("No legal move for %s", req.fen)
        return MoveResponse(move=None, san=None, fen=board.fen(), randomized=False, score=None)

    san = board.san(selection.move)
    board.push(selection.move)
    return MoveResponse(
        move=selection.move.uci(),
        san=san,
        fen=board.fen(),
        randomized=selection.randomized,
        score=selection.score,
    )


@app.post("/points")
def award_points(req: PointsRequest):
    tier = resolve_tier(req.difficulty)
    return {"difficulty": tier.value, "points": calculate_points(tier, req.won)}


@app.get("/difficulties")
def list_difficulties():
    return [
        {
            "difficulty": tier.value,
            "depth": s.depth,
            "randomness": s.randomness,
            "win_points": s.win_points,
        }
        for tier, s in DIFFICULTY_SETTINGS.items()
    ]
