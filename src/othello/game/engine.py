"""
Move engine for Othello.
Implements the line-scanning flip algorithm and legal move enumeration.
"""
from typing import List

from .board import Board
from .errors import CellOccupiedError, NoLegalFlipError, OutOfBoundsError
from .position import DIRECTIONS, Coordinate, Disk, Side


class _FlipLog:
    """
    Scratch copy of a board used while evaluating a single move.

    Flips are recorded on a stack so that a direction which does not end in
    one of the mover's disks can be reversed before the next one is tried.
    """

    __slots__ = ['own', 'opponent', '_stack']

    def __init__(self, board: Board, disk: Disk):
        if disk is Disk.BLACK:
            self.own, self.opponent = board.black, board.white
        else:
            self.own, self.opponent = board.white, board.black
        self._stack: List[int] = []

    def holds_own(self, pos: Coordinate) -> bool:
        return bool(self.own & (1 << pos.index))

    def holds_opponent(self, pos: Coordinate) -> bool:
        return bool(self.opponent & (1 << pos.index))

    def flip(self, pos: Coordinate) -> None:
        bit = 1 << pos.index
        self.opponent &= ~bit
        self.own |= bit
        self._stack.append(bit)

    def commit(self) -> int:
        """Keep the pending flips and return how many there were."""
        flipped = len(self._stack)
        self._stack.clear()
        return flipped

    def abort(self) -> None:
        """Reverse the pending flips."""
        while self._stack:
            bit = self._stack.pop()
            self.own &= ~bit
            self.opponent |= bit

    def to_board(self, disk: Disk) -> Board:
        if disk is Disk.BLACK:
            return Board(self.own, self.opponent)
        return Board(self.opponent, self.own)


def try_move(board: Board, pos: Coordinate, side: Side) -> Board:
    """
    Place a disk for `side` at `pos` and flip every captured line.

    Args:
        board: Position to move from (left unchanged)
        pos: Target cell
        side: Side making the move

    Returns:
        The board after the move

    Raises:
        CellOccupiedError: If `pos` already holds a disk
        NoLegalFlipError: If the placement brackets no opponent disk
    """
    if not board.is_empty(pos):
        raise CellOccupiedError(f"can't place at {pos} - not empty")

    disk = side.disk
    log = _FlipLog(board, disk)
    num_flipped = 0

    for delta_col, delta_row in DIRECTIONS:
        step = pos
        while True:
            try:
                step = step.offset(delta_col, delta_row)
            except OutOfBoundsError:
                log.abort()
                break
            if log.holds_own(step):
                num_flipped += log.commit()
                break
            if log.holds_opponent(step):
                log.flip(step)
                continue
            # Empty cell before reaching one of our disks
            log.abort()
            break

    if num_flipped == 0:
        raise NoLegalFlipError(f"can't place at {pos} - no disk flipped")

    return log.to_board(disk).place(pos, disk)


def legal_moves(board: Board, side: Side) -> List[Coordinate]:
    """
    Get all cells where `side` can legally place a disk.

    Returns:
        Coordinates in index order (a1, b1, ..., h8)
    """
    moves = []
    for pos in Coordinate.all():
        try:
            try_move(board, pos, side)
        except (CellOccupiedError, NoLegalFlipError):
            continue
        moves.append(pos)
    return moves


def has_legal_move(board: Board, side: Side) -> bool:
    """Check if `side` has at least one legal placement."""
    for pos in Coordinate.all():
        if not board.is_empty(pos):
            continue
        try:
            try_move(board, pos, side)
        except NoLegalFlipError:
            continue
        return True
    return False
