'''
Simon API

Endpoints:
POST /games                 -> create a cabinet (idle, banner "Simon")
GET  /games/{id}            -> read state (sequence playback, flags, scores)
POST /games/{id}/start      -> start trigger (ignored while a game runs)
POST /games/{id}/choose     -> choice trigger (ignored outside the player's turn)
POST /games/{id}/quit       -> quit trigger

Extras:
GET  /scoreboard            -> high score for the lifetime of this process
POST /scoreboard/reset      -> reset the high score

The backend is picked by SIMON_STORE_BACKEND: "memory" (default) or "db".
'''

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Union

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from . import config
from .random_client import fetch_color
from .db import get_db, SessionLocal     # SQLAlchemy Session dependency
from .repository import DBGameStore      # DB-backed store
from .store import GameStore             # in-memory store
from .bootstrap_db import create_all

from .schemas import (
    NewGameResponse,
    ChoiceRequest,
    ChoiceResponse,
    GameState,
    ScoreboardOut,
)

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

Store = Union[GameStore, DBGameStore]

# One store for the whole process when running in memory
memory_store = GameStore(draw_color=fetch_color)


@asynccontextmanager
async def lifespan(app):
    if config.STORE_BACKEND == "db":
        create_all()
        # The high score must not outlive the process, even on a file/server DB
        with SessionLocal() as session:
            DBGameStore(session).reset_scoreboard()
    logger.info(f"Simon started (env={config.APP_ENV}, backend={config.STORE_BACKEND})")
    yield
    logger.info("Simon stopped")


app = FastAPI(title="Simon API", version="1.0.0", lifespan=lifespan)

# Allow everything in dev so the docs and front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)


def _memory_store() -> GameStore:
    return memory_store

def _db_store(session = Depends(get_db)) -> DBGameStore:
    return DBGameStore(session, draw_color=fetch_color)

# Routes depend on get_store; tests override it
get_store = _db_store if config.STORE_BACKEND == "db" else _memory_store


def _found(state):
    if state is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return state

# ---------------- Routes ----------------

@app.post("/games", response_model=NewGameResponse, summary="Create a new cabinet")
def create_game(store: Store = Depends(get_store)) -> NewGameResponse:
    game_state = store.create()
    return NewGameResponse(
        game_id=game_state.game_id,
        message=game_state.message,
        high_score=game_state.high_score,
    )

@app.get("/games/{game_id}", response_model=GameState, summary="Get current game state")
def get_game(game_id: str, store: Store = Depends(get_store)) -> GameState:
    return _found(store.get(game_id))

@app.post("/games/{game_id}/start", response_model=GameState, summary="Start a game")
def start_game(game_id: str, store: Store = Depends(get_store)) -> GameState:
    """
    Begins round one right away: the response carries the playback schedule.
    Starting while a game is running changes nothing.
    """
    return _found(store.start(game_id))

@app.post("/games/{game_id}/choose", response_model=ChoiceResponse, summary="Press a colored button")
def choose_color(
    game_id: str,
    payload: ChoiceRequest,
    store: Store = Depends(get_store),
) -> ChoiceResponse:
    """
    Outcomes:
      ignored        -> not the player's turn (playback, pause, or no game)
      accepted       -> correct so far, keep going
      round_complete -> whole sequence matched; next round at next_round_at
      game_over      -> wrong color; the game ended
    """
    return _found(store.choose(game_id, payload.color))

@app.post("/games/{game_id}/quit", response_model=GameState, summary="Quit the running game")
def quit_game(game_id: str, store: Store = Depends(get_store)) -> GameState:
    return _found(store.quit(game_id))

@app.get("/scoreboard", response_model=ScoreboardOut, summary="Get high score")
def get_scoreboard(store: Store = Depends(get_store)) -> ScoreboardOut:
    return store.get_scoreboard()

@app.post("/scoreboard/reset", summary="Reset the high score")
def reset_scoreboard(store: Store = Depends(get_store)) -> dict:
    store.reset_scoreboard()
    return {"message": "Scoreboard reset."}

# ---- Static hosting for the frontend ----
STATIC_DIR = Path(__file__).resolve().parent / "static"

app.mount("/", StaticFiles(directory=str(STATIC_DIR), html=True), name="static")
