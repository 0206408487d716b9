"""
rolls.py
Defines RollSequence, the append-only record of pins knocked down by one player in one game.
Reads go through frame-relative helpers (frames, window) instead of raw index arithmetic,
so nothing ever reads a roll that has not happened yet.
Related modules:
- scoring.py: Scores a RollSequence (or any sequence of ints).
- player.py: Each Player owns one RollSequence per game.
"""

from typing import Iterator, List, Optional

from .rules import NUM_PINS, is_strike

# 9 frames of two rolls plus a three-roll tenth frame
MAX_ROLLS = 21


class RollSequence:
    """
    Ordered, growable sequence of roll values (0-10).
    Supports len(), iteration and indexing. Values can only be appended.
    """
    def __init__(self, rolls=None):
        self._rolls: List[int] = []
        for pins in rolls or ():
            self.append(pins)

    def append(self, pins: int) -> None:
        """
        Append one roll.
        Raises:
            ValueError: If pins is not an int in 0-10, or the sequence is full.
        """
        if isinstance(pins, bool) or not isinstance(pins, int):
            raise ValueError(f"roll must be an int, got {pins!r}")
        if not (0 <= pins <= NUM_PINS):
            raise ValueError(f"roll must be between 0 and {NUM_PINS}, got {pins}")
        if len(self._rolls) >= MAX_ROLLS:
            raise ValueError(f"a game has at most {MAX_ROLLS} rolls")
        self._rolls.append(pins)

    def __len__(self) -> int:
        return len(self._rolls)

    def __iter__(self) -> Iterator[int]:
        return iter(self._rolls)

    def __getitem__(self, index):
        return self._rolls[index]

    def __eq__(self, other):
        if isinstance(other, RollSequence):
            return self._rolls == other._rolls
        if isinstance(other, list):
            return self._rolls == other
        return NotImplemented

    def __repr__(self):
        return f"RollSequence({self._rolls!r})"

    def as_list(self) -> List[int]:
        return list(self._rolls)

    def window(self, start: int, count: int) -> Optional[List[int]]:
        """
        Return the `count` rolls beginning at `start`, or None if they have not all been rolled yet.
        """
        if start + count > len(self._rolls):
            return None
        return self._rolls[start:start + count]

    def frames(self, num_frames: int = 10) -> List[List[int]]:
        """
        Split the rolls into frame-relative groups.
        Frames before the last hold one roll for a strike, two otherwise (the trailing frame may be partial).
        The last frame collects every remaining roll, bonus rolls included.
        Returns:
            list[list[int]]: One list per frame that has at least one roll.
        """
        frames: List[List[int]] = []
        cursor = 0
        while cursor < len(self._rolls):
            if len(frames) == num_frames - 1:
                frames.append(self._rolls[cursor:])
                break
            if is_strike(self._rolls[cursor]):
                frames.append([self._rolls[cursor]])
                cursor += 1
            else:
                frames.append(self._rolls[cursor:cursor + 2])
                cursor += 2
        return frames
