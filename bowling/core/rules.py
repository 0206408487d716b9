"""
rules.py
Helper functions for ten-pin frame rules: strikes, spares, and how many pins can still fall.
Related modules:
- engine.py: Uses max_next_roll and frame_is_complete to drive the per-frame state machine.
- rolls.py: Uses is_strike to split a roll sequence into frames.
"""

from typing import Sequence, Tuple

NUM_PINS = 10


def is_strike(first: int, num_pins: int = NUM_PINS) -> bool:
    return first == num_pins


def is_spare(first: int, second: int, num_pins: int = NUM_PINS) -> bool:
    return first != num_pins and first + second == num_pins


def max_next_roll(frame_rolls: Sequence[int], tenth: bool = False, num_pins: int = NUM_PINS) -> int:
    """
    Upper bound for the next roll of a frame, given the rolls already made in it.
    Args:
        frame_rolls (sequence): Pins knocked down so far in the current frame.
        tenth (bool): True for the last frame, where a strike or spare resets the pins.
        num_pins (int): Pins standing at the start of the frame.
    Returns:
        int: Largest legal pin count for the next roll.
    """
    if not frame_rolls:
        return num_pins
    if not tenth:
        return num_pins - frame_rolls[0]
    standing, _ = rack_state(frame_rolls, num_pins)
    return standing


def rack_state(frame_rolls: Sequence[int], num_pins: int = NUM_PINS) -> Tuple[int, bool]:
    """
    Pins standing and whether the rack is fresh, after the given rolls of a tenth frame.
    Pins are re-racked after every strike or completed spare.
    Returns:
        tuple: (standing pins, True if the next roll is the first on a full rack)
    """
    standing = num_pins
    fresh = True
    for pins in frame_rolls:
        standing -= pins
        if standing == 0:
            standing = num_pins
            fresh = True
        else:
            fresh = False
    return standing, fresh


def frame_is_complete(frame_rolls: Sequence[int], tenth: bool = False, num_pins: int = NUM_PINS) -> bool:
    """
    Return True once a frame needs no further rolls.
    Frames 1-9 end on a strike or after two rolls. With bonus rolls enabled, the
    tenth frame ends after three rolls if it opened with a strike or spare, otherwise after two.
    """
    if not frame_rolls:
        return False
    if not tenth:
        return is_strike(frame_rolls[0], num_pins) or len(frame_rolls) >= 2
    if len(frame_rolls) < 2:
        return False
    if is_strike(frame_rolls[0], num_pins) or is_spare(frame_rolls[0], frame_rolls[1], num_pins):
        return len(frame_rolls) >= 3
    return True
