"""
prompts.py
Validated console prompts. Each keeps asking until the input is acceptable; there is no retry limit.
"""

import re

from UI.console import Console

# optional sign, ASCII digits only
INTEGER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


def get_valid_int(console: Console, prompt: str, min_value: int, max_value: int) -> int:
    """
    Prompt for an integer in [min_value, max_value], re-prompting on non-numeric or out-of-range input.
    Args:
        console (Console): Where to write prompts and read answers.
        prompt (str): Text shown before the first attempt.
        min_value (int): Smallest accepted value.
        max_value (int): Largest accepted value.
    Returns:
        int: The first valid value entered.
    """
    console.write_line(prompt)
    while True:
        raw = console.read_line().strip()
        value = int(raw) if INTEGER_RE.fullmatch(raw) else None
        if value is not None and min_value <= value <= max_value:
            return value
        console.write_line(f"Invalid input. Enter a number between {min_value} and {max_value}:")


def get_valid_string(console: Console, prompt: str) -> str:
    """Prompt for a non-empty string; surrounding whitespace is stripped."""
    console.write_line(prompt)
    value = console.read_line().strip()
    while not value:
        console.write_line("Input cannot be empty. Try again:")
        value = console.read_line().strip()
    return value


def get_roll(console: Console, prompt: str, max_pins: int) -> int:
    """Prompt for the pins knocked down by one roll, from 0 up to the pins still standing."""
    return get_valid_int(console, prompt, 0, max_pins)


def confirm(console: Console, prompt: str) -> bool:
    """
    Ask a yes/no question. Only 'y' or 'yes' (any case) count as yes; end of input counts as no.
    """
    console.write_line(prompt)
    try:
        answer = console.read_line()
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")
