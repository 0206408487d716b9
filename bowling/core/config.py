"""
config.py
Defines the GameConfig dataclass, which centralizes the numeric limits and rule options for a bowling session.
Related modules:
- engine.py: Uses GameConfig to size the game and pick the tenth-frame rule.
- player.py: Uses GameConfig for age validation.
- UI/cli.py: Uses GameConfig for prompt bounds and the score file location.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """
    Centralizes all rule options and numeric constraints for a bowling session.
    Fields:
        min_players (int): Fewest players allowed in a game.
        max_players (int): Most players allowed in a game.
        min_age (int): Youngest allowed player age.
        max_age (int): Oldest allowed player age.
        num_frames (int): Frames per game.
        scores_path (str): File the score log is appended to.
        legacy_tenth_frame (bool): If True, frame ten is played like frames 1-9 (no bonus rolls).
    """
    min_players: int = 1
    max_players: int = 4
    min_age: int = 10
    max_age: int = 100
    num_frames: int = 10
    scores_path: str = "scores.txt"
    legacy_tenth_frame: bool = False

    def __post_init__(self):
        if not (1 <= self.min_players <= self.max_players):
            raise ValueError("player bounds must satisfy 1 <= min_players <= max_players")
        if self.min_age > self.max_age:
            raise ValueError("min_age must not exceed max_age")
        if not (1 <= self.num_frames <= 10):
            raise ValueError("num_frames must be between 1 and 10")
