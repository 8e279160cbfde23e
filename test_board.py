"""
Test script for the Othello board.
"""
import sys
from pathlib import Path

import numpy as np
import pytest

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute()))

from src.othello.game.board import Board
from src.othello.game.errors import CellOccupiedError
from src.othello.game.position import Coordinate, Disk


def test_initial_board():
    """A fresh board has two black and two white disks diagonally paired in the center."""
    board = Board.initial()

    assert board.num_disks() == 4
    assert board.score() == (2, 2)
    assert board.get(Coordinate('d', 5)) is Disk.BLACK
    assert board.get(Coordinate('e', 4)) is Disk.BLACK
    assert board.get(Coordinate('d', 4)) is Disk.WHITE
    assert board.get(Coordinate('e', 5)) is Disk.WHITE

    occupied = {pos for pos, _ in board.disks()}
    assert occupied == {Coordinate('d', 4), Coordinate('e', 4), Coordinate('d', 5), Coordinate('e', 5)}


def test_empty_board():
    board = Board()
    assert board.num_disks() == 0
    assert board.get(Coordinate('a', 1)) is None
    assert board.is_empty(Coordinate('h', 8))
    assert not board.is_full()


def test_place_returns_new_board():
    """Placing leaves the original board untouched."""
    board = Board.initial()
    c4 = Coordinate('c', 4)

    placed = board.place(c4, Disk.WHITE)

    assert placed.get(c4) is Disk.WHITE
    assert board.get(c4) is None
    assert placed.score() == (2, 3)
    assert board.score() == (2, 2)


def test_place_on_occupied_cell():
    board = Board.initial()
    with pytest.raises(CellOccupiedError):
        board.place(Coordinate('d', 4), Disk.BLACK)
    assert board == Board.initial()


def test_overlapping_bitboards_rejected():
    with pytest.raises(ValueError):
        Board(black=0b1, white=0b1)
    with pytest.raises(ValueError):
        Board(black=1 << 64)


def test_from_rows():
    board = Board.from_rows([
        "x o . . . . . .",
        "........",
        "........",
        "...ox...",
        "...xo...",
        "........",
        "........",
        ".......o",
    ])

    assert board.get(Coordinate('a', 1)) is Disk.BLACK
    assert board.get(Coordinate('b', 1)) is Disk.WHITE
    assert board.get(Coordinate('h', 8)) is Disk.WHITE
    assert board.score() == (3, 4)

    with pytest.raises(ValueError):
        Board.from_rows(["........"] * 7)
    with pytest.raises(ValueError):
        Board.from_rows(["......."] + ["........"] * 7)
    with pytest.raises(ValueError):
        Board.from_rows(["...z...."] + ["........"] * 7)


def test_full_board():
    board = Board.from_rows(["xxxxxxxx"] * 4 + ["oooooooo"] * 4)
    assert board.is_full()
    assert board.score() == (32, 32)


def test_equality_and_hash():
    assert Board.initial() == Board.initial()
    assert hash(Board.initial()) == hash(Board.initial())
    assert Board.initial() != Board()
    assert len({Board.initial(), Board.initial(), Board()}) == 2


def test_to_array():
    """The numpy view is indexed by [row_index, col_index]."""
    array = Board.initial().to_array()

    assert array.shape == (8, 8)
    assert array.dtype == np.int8
    assert array[4, 3] == Board.BLACK  # d5
    assert array[3, 4] == Board.BLACK  # e4
    assert array[3, 3] == Board.WHITE  # d4
    assert array[4, 4] == Board.WHITE  # e5
    assert np.sum(array == Board.EMPTY) == 60


def test_render():
    """The text grid marks black with 'x' and white with 'o'."""
    output = (
        "    a   b   c   d   e   f   g   h\n"
        "  +---+---+---+---+---+---+---+---+\n"
        "1 |   |   |   |   |   |   |   |   |\n"
        "  +---+---+---+---+---+---+---+---+\n"
        "2 |   |   |   |   |   |   |   |   |\n"
        "  +---+---+---+---+---+---+---+---+\n"
        "3 |   |   |   |   |   |   |   |   |\n"
        "  +---+---+---+---+---+---+---+---+\n"
        "4 |   |   |   | o | x |   |   |   |\n"
        "  +---+---+---+---+---+---+---+---+\n"
        "5 |   |   |   | x | o |   |   |   |\n"
        "  +---+---+---+---+---+---+---+---+\n"
        "6 |   |   |   |   |   |   |   |   |\n"
        "  +---+---+---+---+---+---+---+---+\n"
        "7 |   |   |   |   |   |   |   |   |\n"
        "  +---+---+---+---+---+---+---+---+\n"
        "8 |   |   |   |   |   |   |   |   |\n"
        "  +---+---+---+---+---+---+---+---+\n"
    )
    assert str(Board.initial()) == output


def test_bit_count():
    assert Board.bit_count(0) == 0
    assert Board.bit_count(0xFFFFFFFFFFFFFFFF) == 64
    assert Board.bit_count(0x0000000810000000) == 2


if __name__ == "__main__":
    test_initial_board()
    test_empty_board()
    test_place_returns_new_board()
    test_place_on_occupied_cell()
    test_overlapping_bitboards_rejected()
    test_from_rows()
    test_full_board()
    test_equality_and_hash()
    test_to_array()
    test_render()
    test_bit_count()
    print(Board.initial())
    print("Board tests passed!")
