"""
Explicit validation & Pydantic models
- Models are used to validate and serialize/deserialize data
  exchanged between the client and server.
- Defines the structure of API requests and responses.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from .types import Color, Message, Outcome

# 1. Represents response when a new cabinet is created
class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    message: Message = Field(..., description="Banner text shown in the center hub")
    high_score: int = Field(..., description="Highest score reached while this server has been running")

# 2. Validates player's choice
class ChoiceRequest(BaseModel):
    color: Color = Field(..., description="One of red, green, blue, yellow")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"color": "red"},
                {"color": "yellow"},
            ]
        }
    }

# 3. One flash of the playback, relative to round_started_at
class FlashStepOut(BaseModel):
    color: Color
    on_ms: int = Field(..., description="When the button lights up")
    off_ms: int = Field(..., description="When the button goes dark again")

# 4. Everything the front-end needs to replay the sequence
class PlaybackOut(BaseModel):
    sequence: List[Color] = Field(..., description="Colors in play order")
    flash_ms: int = Field(..., description="How long a button stays lit")
    gap_ms: int = Field(..., description="Pause between flashes")
    pre_playback_ms: int = Field(..., description="Pause before the first flash")
    post_match_ms: int = Field(..., description="Pause after a full match, before the next round")
    total_ms: int = Field(..., description="Duration of the whole playback")
    steps: List[FlashStepOut] = Field(..., description="Flash schedule")

# 5. Represents the overall state of the game
class GameState(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    in_progress: bool = Field(..., description="A game is running; start is ignored")
    player_turn: bool = Field(..., description="Choices are accepted right now")
    message: Message = Field(..., description="Banner text shown in the center hub")
    score: int = Field(..., description="Completed rounds in the running game")
    high_score: int = Field(..., description="Highest score reached while this server has been running")
    last_score: Optional[int] = Field(None, description="Score the previous game ended with")
    attempt_length: int = Field(..., description="Colors entered so far this round")
    round_started_at: Optional[float] = Field(None, description="Epoch seconds when this round's playback began")
    turn_opens_at: Optional[float] = Field(None, description="Epoch seconds when choices will be accepted")
    next_round_at: Optional[float] = Field(None, description="Epoch seconds when the next round starts")
    playback: Optional[PlaybackOut] = Field(None, description="Present while a game is running")

# 6. Result of a choice
class ChoiceResponse(BaseModel):
    outcome: Outcome = Field(..., description="ignored | accepted | round_complete | game_over")
    state: GameState

# 7. Response schema for scoreboard
class ScoreboardOut(BaseModel):
    high_score: int = Field(..., description="Highest score reached while this server has been running")
    games_played: int = Field(..., description="Games started while this server has been running")
