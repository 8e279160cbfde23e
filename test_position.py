"""
Test script for coordinates, disks and sides.
"""
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute()))

from src.othello.game.errors import OutOfBoundsError
from src.othello.game.position import Coordinate, Disk, Side, change_turn


def test_coordinate_round_trip():
    """Every cell keeps its column and row through construction."""
    for col in 'abcdefgh':
        for row in range(1, 9):
            coord = Coordinate(col, row)
            assert (coord.col, coord.row) == (col, row)
            assert Coordinate.from_indices(coord.col_index, coord.row_index) == coord
            assert Coordinate.from_index(coord.index) == coord


def test_coordinate_indices():
    """Indices are zero based with a1 first and h8 last."""
    assert Coordinate('a', 1).index == 0
    assert Coordinate('d', 4).index == 27
    assert Coordinate('h', 8).index == 63
    d4 = Coordinate('d', 4)
    assert (d4.col_index, d4.row_index) == (3, 3)


@pytest.mark.parametrize("col, row", [('i', 1), ('`', 1), ('A', 1), ('ab', 1), ('a', 0), ('a', 9), ('a', True)])
def test_coordinate_out_of_bounds(col, row):
    with pytest.raises(OutOfBoundsError):
        Coordinate(col, row)


def test_index_out_of_bounds():
    with pytest.raises(OutOfBoundsError):
        Coordinate.from_index(64)
    with pytest.raises(OutOfBoundsError):
        Coordinate.from_indices(-1, 0)


def test_coordinate_offset():
    """Offsets move one cell at a time and fail off the board."""
    d4 = Coordinate('d', 4)

    assert d4.offset(1, 0) == Coordinate('e', 4)
    assert d4.offset(-1, 0) == Coordinate('c', 4)
    assert d4 + (0, 1) == Coordinate('d', 5)
    assert d4 + (0, -1) == Coordinate('d', 3)
    assert d4 + (4, 4) == Coordinate('h', 8)

    for delta in [(5, 0), (-4, 0), (0, 5), (0, -4)]:
        with pytest.raises(OutOfBoundsError):
            d4 + delta


def test_coordinate_parse():
    assert Coordinate.parse("f5") == Coordinate('f', 5)
    assert Coordinate.parse(" H8 ") == Coordinate('h', 8)
    assert str(Coordinate('c', 7)) == "c7"

    for text in ["", "f", "f55", "55", "i1", "a0", "a9", "a\u00b2", "a\u0663"]:
        with pytest.raises(OutOfBoundsError):
            Coordinate.parse(text)


def test_all_coordinates():
    cells = list(Coordinate.all())
    assert len(cells) == 64
    assert len(set(cells)) == 64
    assert cells[0] == Coordinate('a', 1)
    assert cells[1] == Coordinate('b', 1)
    assert cells[-1] == Coordinate('h', 8)


def test_disk_and_side():
    assert Disk.BLACK.flip() is Disk.WHITE
    assert Disk.WHITE.flip() is Disk.BLACK
    assert Side.DARK.disk is Disk.BLACK
    assert Side.LIGHT.disk is Disk.WHITE
    assert change_turn(Side.DARK) is Side.LIGHT
    assert change_turn(Side.LIGHT) is Side.DARK


if __name__ == "__main__":
    test_coordinate_round_trip()
    test_coordinate_indices()
    # test_coordinate_out_of_bounds is parametrized and only runs under pytest
    test_index_out_of_bounds()
    test_coordinate_offset()
    test_coordinate_parse()
    test_all_coordinates()
    test_disk_and_side()
    print("Position tests passed!")
