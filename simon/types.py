"""
Labels for clarity.
"""

from typing import List, Literal

Color = Literal["red", "green", "blue", "yellow"]
Sequence = List[Color]  # flashes in play order
Outcome = Literal["ignored", "accepted", "round_complete", "game_over"]
Message = Literal["Simon", "Your Turn", "Game Over!"]
StoreBackend = Literal["memory", "db"]
