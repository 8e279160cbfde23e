"""
Board module for Othello.
Holds an immutable snapshot of disk occupancy using bitboard representation.
"""
from typing import Iterator, List, Optional, Sequence, Tuple
import numpy as np

from .errors import CellOccupiedError
from .position import COLUMNS, SIZE, Coordinate, Disk

FULL_MASK = 0xFFFFFFFFFFFFFFFF


class Board:
    """
    Snapshot of the disks on an 8x8 Othello board.

    Each color is stored in a 64-bit integer with the bit for a cell at
    ``coord.index``. Boards never change after construction: ``place``
    returns a new board.
    """

    SIZE = SIZE
    BOARD_SIZE = SIZE * SIZE

    # Values used by the numpy view
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    __slots__ = ['_black', '_white']

    def __init__(self, black: int = 0, white: int = 0):
        """
        Initialize a board from occupancy masks.

        Args:
            black: Bitboard of black disks
            white: Bitboard of white disks
        """
        if black & ~FULL_MASK or white & ~FULL_MASK:
            raise ValueError("Bitboards must fit in 64 bits")
        if black & white:
            raise ValueError("A cell cannot hold both a black and a white disk")
        self._black = black
        self._white = white

    @classmethod
    def initial(cls) -> 'Board':
        """Return the canonical starting position."""
        board = cls()
        board = board.place(Coordinate('d', 5), Disk.BLACK)
        board = board.place(Coordinate('e', 4), Disk.BLACK)
        board = board.place(Coordinate('d', 4), Disk.WHITE)
        board = board.place(Coordinate('e', 5), Disk.WHITE)
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from eight text rows, row 1 first.

        Each row holds eight cells: 'x' for black, 'o' for white and '.' for
        empty. Spaces are ignored.
        """
        if len(rows) != SIZE:
            raise ValueError(f"Expected {SIZE} rows, got {len(rows)}")

        black = 0
        white = 0
        for row_index, line in enumerate(rows):
            cells = line.replace(' ', '')
            if len(cells) != SIZE:
                raise ValueError(f"Row {row_index + 1} must have {SIZE} cells: {line!r}")
            for col_index, cell in enumerate(cells):
                bit = 1 << (row_index * SIZE + col_index)
                if cell == Disk.BLACK.value:
                    black |= bit
                elif cell == Disk.WHITE.value:
                    white |= bit
                elif cell != '.':
                    raise ValueError(f"Unknown cell {cell!r} in row {row_index + 1}")
        return cls(black, white)

    @property
    def black(self) -> int:
        return self._black

    @property
    def white(self) -> int:
        return self._white

    def get(self, pos: Coordinate) -> Optional[Disk]:
        """Return the disk at `pos`, or None if the cell is empty."""
        bit = 1 << pos.index
        if self._black & bit:
            return Disk.BLACK
        if self._white & bit:
            return Disk.WHITE
        return None

    def is_empty(self, pos: Coordinate) -> bool:
        return not (self._black | self._white) & (1 << pos.index)

    def place(self, pos: Coordinate, disk: Disk) -> 'Board':
        """
        Return a new board with `disk` added at `pos`.

        Raises:
            CellOccupiedError: If `pos` already holds a disk
        """
        if not self.is_empty(pos):
            raise CellOccupiedError(f"can't place at {pos} - not empty")

        bit = 1 << pos.index
        if disk is Disk.BLACK:
            return Board(self._black | bit, self._white)
        return Board(self._black, self._white | bit)

    def count(self, disk: Disk) -> int:
        return self.bit_count(self._black if disk is Disk.BLACK else self._white)

    def score(self) -> Tuple[int, int]:
        """
        Count the disks of each color.

        Returns:
            Tuple of (black_count, white_count)
        """
        return self.bit_count(self._black), self.bit_count(self._white)

    def num_disks(self) -> int:
        return self.bit_count(self._black | self._white)

    def is_full(self) -> bool:
        return (self._black | self._white) == FULL_MASK

    def disks(self) -> Iterator[Tuple[Coordinate, Disk]]:
        """Iterate over occupied cells in index order."""
        for pos in Coordinate.all():
            disk = self.get(pos)
            if disk is not None:
                yield pos, disk

    def to_array(self) -> np.ndarray:
        """
        Get the board as a numpy array indexed by [row_index, col_index].

        Returns:
            8x8 int8 array holding EMPTY, BLACK or WHITE
        """
        array = np.zeros((SIZE, SIZE), dtype=np.int8)
        for i in range(SIZE):
            for j in range(SIZE):
                bit = 1 << (i * SIZE + j)
                if self._black & bit:
                    array[i, j] = self.BLACK
                elif self._white & bit:
                    array[i, j] = self.WHITE
        return array

    @staticmethod
    def bit_count(x: int) -> int:
        """Count the number of set bits in a 64-bit integer."""
        x = x - ((x >> 1) & 0x5555555555555555)
        x = (x & 0x3333333333333333) + ((x >> 2) & 0x3333333333333333)
        x = (x + (x >> 4)) & 0x0f0f0f0f0f0f0f0f
        return ((x * 0x0101010101010101) & 0xffffffffffffffff) >> 56

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._black == other._black and self._white == other._white

    def __hash__(self) -> int:
        return hash((self._black, self._white))

    def __repr__(self) -> str:
        return f"Board(black={self._black:#018x}, white={self._white:#018x})"

    def __str__(self) -> str:
        """Render the board as a bordered text grid ('x' black, 'o' white)."""
        separator = "  " + "+---" * SIZE + "+\n"
        lines: List[str] = ["    " + "   ".join(COLUMNS) + "\n", separator]
        for row in range(1, SIZE + 1):
            cells = []
            for col in COLUMNS:
                disk = self.get(Coordinate(col, row))
                cells.append(disk.value if disk is not None else ' ')
            lines.append(f"{row} | " + " | ".join(cells) + " |\n")
            lines.append(separator)
        return "".join(lines)
