"""
Coordinate, disk and side types for Othello.
Columns run from 'a' to 'h' and rows from 1 to 8, with a1 in the top-left corner.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

from .errors import OutOfBoundsError

COLUMNS = 'abcdefgh'
SIZE = 8

# Compass directions as (delta_col, delta_row)
DIRECTIONS = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
]


@dataclass(frozen=True)
class Coordinate:
    """
    A cell on the board, validated on construction.

    Args:
        col: Column letter ('a'..'h')
        row: Row number (1..8)
    """
    col: str
    row: int

    def __post_init__(self):
        if not isinstance(self.col, str) or len(self.col) != 1 or self.col not in COLUMNS:
            raise OutOfBoundsError(f"column out of bounds: {self.col!r}")
        if isinstance(self.row, bool) or not isinstance(self.row, int) or not 1 <= self.row <= SIZE:
            raise OutOfBoundsError(f"row out of bounds: {self.row!r}")

    @classmethod
    def from_indices(cls, col_index: int, row_index: int) -> 'Coordinate':
        """Build a coordinate from zero-based column and row indices."""
        if not (0 <= col_index < SIZE and 0 <= row_index < SIZE):
            raise OutOfBoundsError(f"indices out of bounds: ({col_index}, {row_index})")
        return cls(COLUMNS[col_index], row_index + 1)

    @classmethod
    def from_index(cls, index: int) -> 'Coordinate':
        """Build a coordinate from its flat index (0 for a1, 63 for h8)."""
        if not 0 <= index < SIZE * SIZE:
            raise OutOfBoundsError(f"index out of bounds: {index}")
        row_index, col_index = divmod(index, SIZE)
        return cls.from_indices(col_index, row_index)

    @classmethod
    def parse(cls, text: str) -> 'Coordinate':
        """
        Parse a coordinate written as column letter and row number, e.g. "f5".

        Raises:
            OutOfBoundsError: If the text does not name a cell on the board
        """
        text = text.strip().lower()
        if len(text) != 2 or text[1] not in '12345678':
            raise OutOfBoundsError(f"invalid coordinate: {text!r}")
        return cls(text[0], int(text[1]))

    @classmethod
    def all(cls) -> Iterator['Coordinate']:
        """Iterate over all 64 cells in index order."""
        for index in range(SIZE * SIZE):
            yield cls.from_index(index)

    @property
    def col_index(self) -> int:
        return COLUMNS.index(self.col)

    @property
    def row_index(self) -> int:
        return self.row - 1

    @property
    def index(self) -> int:
        return self.row_index * SIZE + self.col_index

    def offset(self, delta_col: int, delta_row: int) -> 'Coordinate':
        """
        Return the coordinate shifted by the given deltas.

        Raises:
            OutOfBoundsError: If the shifted cell is off the board
        """
        return Coordinate.from_indices(self.col_index + delta_col, self.row_index + delta_row)

    def __add__(self, delta: Tuple[int, int]) -> 'Coordinate':
        delta_col, delta_row = delta
        return self.offset(delta_col, delta_row)

    def __str__(self) -> str:
        return f"{self.col}{self.row}"


class Disk(Enum):
    BLACK = 'x'
    WHITE = 'o'

    def flip(self) -> 'Disk':
        return Disk.WHITE if self is Disk.BLACK else Disk.BLACK


class Side(Enum):
    """The player whose turn it is. Dark plays black disks, Light plays white."""
    DARK = 'dark'
    LIGHT = 'light'

    @property
    def disk(self) -> Disk:
        return Disk.BLACK if self is Side.DARK else Disk.WHITE

    def opponent(self) -> 'Side':
        return Side.LIGHT if self is Side.DARK else Side.DARK


def change_turn(side: Side) -> Side:
    """Return the side that moves after `side`."""
    return side.opponent()
