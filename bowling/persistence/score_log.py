"""
score_log.py
Persistence utilities for the append-only score log: one text block per game played.
The log is replay text only; it is never parsed back into players.
"""

import datetime
from typing import Iterator, List, Optional, Sequence

from bowling.core.player import Player

SEPARATOR = "-" * 30
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_game_record(players: Sequence[Player], played_at: datetime.datetime) -> List[str]:
    """
    Build the lines of one game block.
    Args:
        players (sequence[Player]): Players of the game, in turn order.
        played_at (datetime): Local time the game was played.
    Returns:
        list[str]: Lines without trailing newlines.
    """
    lines = [f"Game played on {played_at.strftime(TIMESTAMP_FORMAT)}"]
    for p in players:
        lines.append(f"{p.name} ({p.nickname}) - High Score: {p.high_score}")
    lines.append(SEPARATOR)
    return lines


def append_game_record(players: Sequence[Player], path: str, played_at: Optional[datetime.datetime] = None):
    if played_at is None:
        played_at = datetime.datetime.now()
    with open(path, "a", encoding="utf-8") as f:
        for line in format_game_record(players, played_at):
            f.write(line + "\n")


def read_records(path: str) -> Iterator[str]:
    """
    Yield every line of the score log, without newlines.
    Raises:
        OSError: If the file cannot be opened (e.g. nothing has been saved yet).
    """
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            yield line.rstrip("\n")
