"""
state.py
Defines the game state dataclass for a bowling session and the per-frame state names.
Related modules:
- engine.py: Mutates and reads GameState during play.
- player.py: Player objects are held in GameState.players.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .player import Player

# Per-player, per-frame states
AWAIT_FIRST_ROLL = "AWAIT_FIRST_ROLL"
AWAIT_SECOND_ROLL = "AWAIT_SECOND_ROLL"
AWAIT_BONUS_ROLL = "AWAIT_BONUS_ROLL"
FRAME_COMPLETE = "FRAME_COMPLETE"

# Game status
NOT_STARTED = "NOT_STARTED"
IN_PROGRESS = "IN_PROGRESS"
ENDED = "ENDED"


@dataclass
class GameState:
    """
    State of one game for all players.
    Fields:
        players (tuple): Players in turn order.
        frame (int): Current frame number (1-based).
        current_player (int): Index into players of whoever is rolling.
        frame_rolls (list[int]): Rolls made so far in the current player's current frame.
        frame_state (str): AWAIT_FIRST_ROLL | AWAIT_SECOND_ROLL | AWAIT_BONUS_ROLL | FRAME_COMPLETE.
        status (str): NOT_STARTED | IN_PROGRESS | ENDED.
        games_played (int): Games started by this engine.
    """
    players: Tuple[Player, ...]
    frame: int = 1
    current_player: int = 0
    frame_rolls: List[int] = field(default_factory=list)
    frame_state: str = AWAIT_FIRST_ROLL
    status: str = NOT_STARTED
    games_played: int = 0
