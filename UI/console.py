"""
console.py
Line-oriented console seam for the CLI. The game reads and writes whole lines only,
so a scripted console can stand in for the terminal in tests.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List


class Console(ABC):
    """
    Minimal line reader / line writer.
    """

    @abstractmethod
    def read_line(self) -> str:
        """
        Read one line of input, without the newline.
        Raises:
            EOFError: If no more input is available.
        """
        raise NotImplementedError

    @abstractmethod
    def write_line(self, text: str = "") -> None:
        raise NotImplementedError


class StdConsole(Console):
    """Console backed by standard input and output."""

    def read_line(self) -> str:
        return input()

    def write_line(self, text: str = "") -> None:
        print(text)


class ScriptedConsole(Console):
    """
    Console fed from a fixed list of input lines; everything written is kept in `output`.
    Reading past the end of the script raises EOFError, like input() at end of file.
    """
    def __init__(self, lines: Iterable[str]):
        self._lines = list(lines)
        self._pos = 0
        self.output: List[str] = []

    def read_line(self) -> str:
        if self._pos >= len(self._lines):
            raise EOFError("scripted input exhausted")
        line = self._lines[self._pos]
        self._pos += 1
        return line

    def write_line(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def lines_read(self) -> int:
        return self._pos
