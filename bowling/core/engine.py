"""
engine.py
Implements the GameEngine class, which runs ten frames for every player, validates rolls, and emits events.
Related modules:
- config.py: GameConfig sets player limits, frame count and the tenth-frame rule.
- state.py: GameState and the frame state names.
- rules.py: Pin limits and frame completion.
- scoring.py: Running and final scores.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from .config import GameConfig
from .player import Player
from .rolls import MAX_ROLLS
from .rules import frame_is_complete, max_next_roll, rack_state
from .scoring import score
from .state import (
    AWAIT_BONUS_ROLL,
    AWAIT_FIRST_ROLL,
    AWAIT_SECOND_ROLL,
    ENDED,
    FRAME_COMPLETE,
    IN_PROGRESS,
    GameState,
)


class IllegalRollError(Exception):
    """
    Raised when a roll is out of bounds for the current frame or the game is not in progress.
    """
    pass


class GameEngine:
    """
    State machine for a bowling game. Players roll in turn, one frame each, for num_frames frames.
    Per frame: AWAIT_FIRST_ROLL -> (strike ? FRAME_COMPLETE : AWAIT_SECOND_ROLL) -> FRAME_COMPLETE,
    with AWAIT_BONUS_ROLL in the last frame after a strike or spare (unless legacy_tenth_frame is set).
    """
    def __init__(self, players: Sequence[Player], config: Optional[GameConfig] = None):
        """
        Args:
            players (sequence[Player]): Players in turn order.
            config (GameConfig, optional): Game configuration. Defaults to GameConfig().
        Raises:
            ValueError: If the number of players is outside the configured bounds.
        """
        self.config = config or GameConfig()
        if not (self.config.min_players <= len(players) <= self.config.max_players):
            raise ValueError(
                f"number of players must be between {self.config.min_players} and {self.config.max_players}"
            )
        self.state = GameState(players=tuple(players))
        self._events: List[Dict] = []

    def _emit(self, event: Dict):
        self._events.append(event)

    def pop_events(self):
        """
        Return and clear all emitted events since last call.
        Returns:
            list[dict]: List of event dicts.
        """
        ev = list(self._events)
        self._events.clear()
        return ev

    def get_events(self):
        """Return all events emitted so far (does not clear)."""
        return list(self._events)

    @property
    def players(self) -> Tuple[Player, ...]:
        return self.state.players

    @property
    def current_player(self) -> Player:
        return self.state.players[self.state.current_player]

    def start_new_game(self) -> None:
        """
        Clear every player's rolls and reset to frame 1, first player. High scores are kept.
        """
        for p in self.state.players:
            p.new_game()
        self.state.frame = 1
        self.state.current_player = 0
        self.state.frame_rolls = []
        self.state.frame_state = AWAIT_FIRST_ROLL
        self.state.status = IN_PROGRESS
        self.state.games_played += 1
        self._emit({"type": "GameStarted", "game": self.state.games_played})

    def is_terminal(self) -> bool:
        return self.state.status == ENDED

    def _bonus_frame(self) -> bool:
        return self.state.frame == self.config.num_frames and not self.config.legacy_tenth_frame

    def max_pins(self) -> int:
        """Largest legal value for the next roll of the current player."""
        return max_next_roll(self.state.frame_rolls, tenth=self._bonus_frame())

    def apply_roll(self, pins: int) -> None:
        """
        Record a roll for the current player and advance the frame state machine.
        Args:
            pins (int): Pins knocked down.
        Raises:
            IllegalRollError: If the game is not in progress or pins is outside [0, max_pins()].
        """
        if self.state.status != IN_PROGRESS:
            raise IllegalRollError("Game is not in progress")
        limit = self.max_pins()
        if isinstance(pins, bool) or not isinstance(pins, int) or not (0 <= pins <= limit):
            raise IllegalRollError(f"Roll must be between 0 and {limit}, got {pins!r}")

        player = self.current_player
        standing, fresh = rack_state(self.state.frame_rolls)
        player.add_roll(pins)
        self.state.frame_rolls.append(pins)
        self._emit({"type": "RollRecorded", "player": self.state.current_player,
                    "frame": self.state.frame, "pins": pins})
        if pins == standing and pins > 0:
            kind = "Strike" if fresh else "Spare"
            self._emit({"type": kind, "player": self.state.current_player, "frame": self.state.frame})

        if frame_is_complete(self.state.frame_rolls, tenth=self._bonus_frame()):
            self.state.frame_state = FRAME_COMPLETE
            self._emit({"type": "FrameCompleted", "player": self.state.current_player,
                        "frame": self.state.frame, "rolls": list(self.state.frame_rolls),
                        "score": player.get_score()})
            self._advance()
        elif len(self.state.frame_rolls) == 1:
            self.state.frame_state = AWAIT_SECOND_ROLL
        else:
            self.state.frame_state = AWAIT_BONUS_ROLL

    def _advance(self) -> None:
        self.state.frame_rolls = []
        self.state.current_player += 1
        if self.state.current_player >= len(self.state.players):
            self.state.current_player = 0
            self.state.frame += 1
        if self.state.frame > self.config.num_frames:
            self.state.status = ENDED
            self._emit({"type": "GameEnded", "scores": self.final_scores()})
        else:
            self.state.frame_state = AWAIT_FIRST_ROLL

    def final_score(self, player: Player) -> int:
        """
        Final score of a player's finished game.
        With legacy_tenth_frame no bonus rolls are collected; bonus rolls a strike or spare
        at the end of the game would need are counted as 0.
        """
        if self.config.legacy_tenth_frame:
            rolls = player.rolls.as_list()
            padding = min(2, MAX_ROLLS - len(rolls))
            return score(rolls + [0] * padding, self.config.num_frames)
        return score(player.rolls, self.config.num_frames)

    def final_scores(self) -> List[int]:
        return [self.final_score(p) for p in self.state.players]

    def record_high_scores(self) -> List[int]:
        """
        Update each player's high score with this game's final score.
        Returns:
            list[int]: The high scores, in player order.
        Raises:
            IllegalRollError: If the game has not ended.
        """
        if not self.is_terminal():
            raise IllegalRollError("Game has not ended")
        return [p.update_high_score(self.final_score(p)) for p in self.state.players]
