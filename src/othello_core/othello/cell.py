from __future__ import annotations

from enum import Enum

CHARS = {"-": 0, "X": 1, "O": 2}


class Cell(Enum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @classmethod
    def from_char(cls, char: str) -> Cell:
        try:
            return Cell(CHARS[char.upper()])
        except KeyError:
            raise ValueError(f'Invalid cell character "{char}"')

    def to_char(self) -> str:
        return "-XO"[self.value]

    def opposite(self) -> Cell:
        if self == Cell.BLACK:
            return Cell.WHITE
        if self == Cell.WHITE:
            return Cell.BLACK
        return Cell.EMPTY

    def is_disc(self) -> bool:
        return self != Cell.EMPTY
