from __future__ import annotations

import logging
from typing import Iterable, NamedTuple, Optional

from othello_core import config
from othello_core.othello.cell import Cell

ROWS = 8
COLS = 8

# Longest possible walk from any square on an 8x8 board.
MAX_DISTANCE = 7

# (dx, dy)
DIRECTIONS = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]

DEFAULT_LOGGER_NAME = "othello_core.board"


class OutOfBoundsError(ValueError):
    def __init__(self, operation: str, x: int, y: int) -> None:
        super().__init__(f"{operation}: coordinate (x={x}, y={y}) is off the board")
        self.operation = operation
        self.x = x
        self.y = y


class IllegalMoveError(Exception):
    def __init__(self, x: int, y: int, color: Cell) -> None:
        super().__init__(f"Cannot place {color.name} at (x={x}, y={y})")
        self.x = x
        self.y = y
        self.color = color


class EmptyCellError(ValueError):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Cannot flip empty cell at (x={x}, y={y})")
        self.x = x
        self.y = y


class LineEntry(NamedTuple):
    x: int
    y: int
    color: Cell
    opposite_color: Cell
    distance: int


def start_squares() -> list[Cell]:
    squares = [Cell.EMPTY] * ROWS * COLS
    squares[3 * COLS + 3] = squares[4 * COLS + 4] = Cell.WHITE
    squares[3 * COLS + 4] = squares[4 * COLS + 3] = Cell.BLACK
    return squares


class Board:
    """
    Board holds the 8x8 grid of an othello game and the rules for placing discs.
    It does not know whose turn it is: every move is made with an explicit color.

    Coordinate problems are reported to `logger`. With `strict` enabled they also
    raise `OutOfBoundsError`, otherwise off-board reads return `Cell.EMPTY` and
    off-board writes are ignored.
    """

    def __init__(
        self,
        squares: Optional[list[Cell]] = None,
        *,
        logger: Optional[logging.Logger] = None,
        strict: Optional[bool] = None,
    ) -> None:
        if squares is None:
            squares = start_squares()

        if len(squares) != ROWS * COLS:
            raise ValueError(f"Expected {ROWS * COLS} squares, got {len(squares)}")

        for square in squares:
            if not isinstance(square, Cell):
                raise ValueError(f"Invalid square {square!r}")

        self.__squares = list(squares)
        self.logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)

        if strict is None:
            strict = config.STRICT_BOUNDS
        self.strict = strict

    @classmethod
    def start(
        cls, *, logger: Optional[logging.Logger] = None, strict: Optional[bool] = None
    ) -> Board:
        return Board(start_squares(), logger=logger, strict=strict)

    @classmethod
    def empty(
        cls, *, logger: Optional[logging.Logger] = None, strict: Optional[bool] = None
    ) -> Board:
        return Board([Cell.EMPTY] * ROWS * COLS, logger=logger, strict=strict)

    @classmethod
    def from_squares(
        cls,
        squares: list[Cell],
        *,
        logger: Optional[logging.Logger] = None,
        strict: Optional[bool] = None,
    ) -> Board:
        return Board(squares, logger=logger, strict=strict)

    @classmethod
    def from_string(
        cls,
        string: str,
        *,
        logger: Optional[logging.Logger] = None,
        strict: Optional[bool] = None,
    ) -> Board:
        """
        Load a board from 64 characters in row-major order: `X` is black, `O` is
        white and `-` is empty. Whitespace is ignored, so rows can be split over lines.
        """
        chars = [char for char in string if not char.isspace()]
        if len(chars) != ROWS * COLS:
            raise ValueError(f"Expected {ROWS * COLS} cells, got {len(chars)}")

        squares = [Cell.from_char(char) for char in chars]
        return Board(squares, logger=logger, strict=strict)

    def __str__(self) -> str:
        rows = []
        for y in range(ROWS):
            row = self.__squares[y * COLS : (y + 1) * COLS]
            rows.append("".join(square.to_char() for square in row))
        return "\n".join(rows)

    def __repr__(self) -> str:
        rows = str(self).split("\n")
        return f"Board({' '.join(rows)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.__squares == other.__squares

    def is_on_board(self, x: int, y: int) -> bool:
        return 0 <= x < COLS and 0 <= y < ROWS

    def __check_bounds(self, operation: str, x: int, y: int) -> bool:
        if self.is_on_board(x, y):
            return True

        if not 0 <= x < COLS:
            self.logger.warning("%s: coordinate out of bounds (x=%d)", operation, x)
        if not 0 <= y < ROWS:
            self.logger.warning("%s: coordinate out of bounds (y=%d)", operation, y)

        if self.strict:
            raise OutOfBoundsError(operation, x, y)
        return False

    def __check_color(self, color: Cell) -> None:
        if not isinstance(color, Cell) or not color.is_disc():
            raise ValueError(f"Expected BLACK or WHITE, got {color!r}")

    def __get(self, x: int, y: int) -> Cell:
        return self.__squares[y * COLS + x]

    def __set(self, x: int, y: int, color: Cell) -> None:
        self.__squares[y * COLS + x] = color

    def color_at(self, x: int, y: int) -> Cell:
        if not self.__check_bounds("color_at", x, y):
            return Cell.EMPTY
        return self.__get(x, y)

    def opposite_color_at(self, x: int, y: int) -> Cell:
        if not self.__check_bounds("opposite_color_at", x, y):
            return Cell.EMPTY
        return self.__get(x, y).opposite()

    def scan_line(
        self, origin_x: int, origin_y: int, dir_x: int, dir_y: int
    ) -> list[LineEntry]:
        """
        Walk from the origin towards (dir_x, dir_y) and collect the occupied squares
        passed on the way, nearest first. The walk ends at the first empty square or
        at the edge of the board, neither of which is included.
        """
        if dir_x not in [-1, 0, 1] or dir_y not in [-1, 0, 1]:
            raise ValueError(f"Invalid direction (dx={dir_x}, dy={dir_y})")

        line: list[LineEntry] = []

        if dir_x == 0 and dir_y == 0:
            return line

        self.__check_bounds("scan_line", origin_x, origin_y)

        for distance in range(1, MAX_DISTANCE + 1):
            x = origin_x + distance * dir_x
            y = origin_y + distance * dir_y

            if not self.is_on_board(x, y):
                break

            color = self.__get(x, y)
            if color == Cell.EMPTY:
                break

            line.append(LineEntry(x, y, color, color.opposite(), distance))

        return line

    def __bracketed_run(
        self, x: int, y: int, dir_x: int, dir_y: int, color: Cell
    ) -> list[LineEntry]:
        # Opponent discs only count when a disc of `color` closes the run.
        run: list[LineEntry] = []
        for entry in self.scan_line(x, y, dir_x, dir_y):
            if entry.color == color:
                return run
            run.append(entry)
        return []

    def is_legal_move(self, x: int, y: int, color: Cell) -> bool:
        self.__check_color(color)

        if not self.is_on_board(x, y) or self.__get(x, y) != Cell.EMPTY:
            return False

        for dx, dy in DIRECTIONS:
            if self.__bracketed_run(x, y, dx, dy, color):
                return True
        return False

    def flips_for(self, x: int, y: int, color: Cell) -> list[tuple[int, int]]:
        self.__check_color(color)

        if not self.is_on_board(x, y) or self.__get(x, y) != Cell.EMPTY:
            return []

        flipped: list[tuple[int, int]] = []
        for dx, dy in DIRECTIONS:
            for entry in self.__bracketed_run(x, y, dx, dy, color):
                flipped.append((entry.x, entry.y))
        return flipped

    def legal_moves(self, color: Cell) -> list[tuple[int, int]]:
        return [
            (x, y)
            for y in range(ROWS)
            for x in range(COLS)
            if self.is_legal_move(x, y, color)
        ]

    def has_legal_move(self, color: Cell) -> bool:
        return len(self.legal_moves(color)) > 0

    def apply_move(self, x: int, y: int, color: Cell) -> list[tuple[int, int]]:
        """
        Place a disc of `color` at (x, y) and flip every bracketed run it creates.
        Returns the flipped squares. Raises `IllegalMoveError` without touching the
        board when the move is not legal.
        """
        self.__check_color(color)

        if not self.__check_bounds("apply_move", x, y):
            raise IllegalMoveError(x, y, color)

        flipped = self.flips_for(x, y, color)

        if not flipped:
            raise IllegalMoveError(x, y, color)

        self.__set(x, y, color)
        for flip_x, flip_y in flipped:
            self.flip(flip_x, flip_y)

        return flipped

    def flip(self, x: int, y: int) -> None:
        if not self.__check_bounds("flip", x, y):
            return

        color = self.__get(x, y)

        if color == Cell.EMPTY:
            self.logger.warning("flip: cell is empty, nothing to flip (x=%d, y=%d)", x, y)
            if self.strict:
                raise EmptyCellError(x, y)
            return

        self.__set(x, y, color.opposite())

    def clone(self) -> Board:
        return Board(self.__squares, logger=self.logger, strict=self.strict)

    def show(self, moves_for: Optional[Cell] = None) -> None:
        if moves_for is None:
            moves: set[tuple[int, int]] = set()
        else:
            moves = set(self.legal_moves(moves_for))

        print("+-a-b-c-d-e-f-g-h-+")
        for y in range(ROWS):
            print("{} ".format(y + 1), end="")

            for x in range(COLS):
                square = self.__get(x, y)

                if square == Cell.BLACK:
                    print("○ ", end="")
                elif square == Cell.WHITE:
                    print("● ", end="")
                elif (x, y) in moves:
                    print("· ", end="")
                else:
                    print("  ", end="")
            print("|")
        print("+-----------------+")

    @classmethod
    def coords_to_field(cls, x: int, y: int) -> str:
        if x not in range(COLS) or y not in range(ROWS):
            raise ValueError(f"Invalid coordinate (x={x}, y={y})")
        return "abcdefgh"[x] + "12345678"[y]

    @classmethod
    def coords_to_fields(cls, coords: Iterable[tuple[int, int]]) -> str:
        return " ".join(cls.coords_to_field(x, y) for x, y in coords)

    @classmethod
    def field_to_coords(cls, field: str) -> tuple[int, int]:
        if len(field) != 2:
            raise ValueError(f'Invalid field length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        x = ord(field[0]) - ord("a")
        y = ord(field[1]) - ord("1")
        return x, y
