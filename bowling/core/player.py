"""
player.py
Defines the Player dataclass: profile, the rolls of the current game, and the session high score.
Related modules:
- rolls.py: RollSequence holds the current game's rolls.
- scoring.py: Used to compute the current and final scores.
- engine.py: Appends rolls to players during play.
"""

from dataclasses import dataclass, field
from typing import Optional

from .config import GameConfig
from .rolls import RollSequence
from .scoring import score_so_far


@dataclass
class Player:
    """
    A bowler taking part in a session.
    Fields:
        name (str): Player's name.
        nickname (str): Display nickname.
        age (int): Age, validated against the config bounds.
        rolls (RollSequence): Rolls of the game in progress.
        high_score (int): Best final score in this session; never decreases.
        config (GameConfig): Limits used for validation and scoring.
    """
    name: str
    nickname: str
    age: int
    rolls: RollSequence = field(default_factory=RollSequence)
    high_score: int = 0
    config: GameConfig = field(default_factory=GameConfig, repr=False, compare=False)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("name must not be empty")
        if not self.nickname or not self.nickname.strip():
            raise ValueError("nickname must not be empty")
        if not (self.config.min_age <= self.age <= self.config.max_age):
            raise ValueError(f"age must be between {self.config.min_age} and {self.config.max_age}")
        if self.high_score < 0:
            raise ValueError("high_score must not be negative")

    def add_roll(self, pins: int) -> None:
        self.rolls.append(pins)

    def get_score(self) -> int:
        """Score of the frames that can be scored so far."""
        return score_so_far(self.rolls, self.config.num_frames)

    def update_high_score(self, game_score: Optional[int] = None) -> int:
        """
        Keep the larger of the stored high score and the just-played game's score.
        Args:
            game_score (int|None): Score to compare; defaults to this player's current game score.
        Returns:
            int: The (possibly unchanged) high score.
        """
        if game_score is None:
            game_score = self.get_score()
        if game_score > self.high_score:
            self.high_score = game_score
        return self.high_score

    def new_game(self) -> None:
        """Clear the rolls for another game; the high score is kept."""
        self.rolls = RollSequence()
