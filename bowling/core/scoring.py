"""
scoring.py
Standard ten-pin scoring over a roll sequence.
Strike: 10 plus the next two rolls. Spare: 10 plus the next roll. Open frame: the two rolls.
A frame whose own rolls or bonus rolls have not been made yet is unscored (None) rather than
scored against placeholder zeros.
Related modules:
- rolls.py: RollSequence provides the window() reads used here.
- player.py: Player.get_score and Player.update_high_score call into this module.
"""

from typing import Iterable, List, Optional

from .rolls import RollSequence
from .rules import NUM_PINS


class ScoringError(Exception):
    """
    Base class for scoring failures.
    """
    pass


class IncompleteGameError(ScoringError):
    """
    Raised when a final score is requested but a frame still lacks rolls or bonus rolls.
    """
    def __init__(self, frame: int):
        super().__init__(f"Scoring is not available for frame {frame}: rolls or bonus rolls are missing")
        self.frame = frame


def _as_sequence(rolls: Iterable[int]) -> RollSequence:
    if isinstance(rolls, RollSequence):
        return rolls
    return RollSequence(rolls)


def frame_totals(rolls: Iterable[int], num_frames: int = 10) -> List[Optional[int]]:
    """
    Compute the running (cumulative) score after each frame.
    Args:
        rolls (iterable[int]): Pins knocked down per roll, in order.
        num_frames (int): Frames in a game.
    Returns:
        list[int|None]: One entry per frame; None from the first frame that cannot be scored yet.
    """
    seq = _as_sequence(rolls)
    totals: List[Optional[int]] = []
    running = 0
    cursor = 0
    for _ in range(num_frames):
        frame_score = None
        first = seq.window(cursor, 1)
        if first is not None and first[0] == NUM_PINS:
            # strike
            bonus = seq.window(cursor + 1, 2)
            if bonus is not None:
                frame_score = NUM_PINS + sum(bonus)
            cursor += 1
        elif first is not None:
            pair = seq.window(cursor, 2)
            if pair is not None and sum(pair) == NUM_PINS:
                # spare
                bonus = seq.window(cursor + 2, 1)
                if bonus is not None:
                    frame_score = NUM_PINS + bonus[0]
            elif pair is not None:
                frame_score = sum(pair)
            cursor += 2

        if frame_score is None:
            totals.extend([None] * (num_frames - len(totals)))
            break
        running += frame_score
        totals.append(running)
    return totals


def score(rolls: Iterable[int], num_frames: int = 10) -> int:
    """
    Final score of a complete game.
    Rolls beyond those the frames consume are ignored.
    Raises:
        IncompleteGameError: If any frame is missing rolls or bonus rolls.
    """
    totals = frame_totals(rolls, num_frames)
    for frame, total in enumerate(totals, start=1):
        if total is None:
            raise IncompleteGameError(frame)
    return totals[-1]


def score_so_far(rolls: Iterable[int], num_frames: int = 10) -> int:
    """
    Score of every frame that can already be scored; 0 before the first one is.
    Used for the running score shown during play.
    """
    last = 0
    for total in frame_totals(rolls, num_frames):
        if total is None:
            break
        last = total
    return last
