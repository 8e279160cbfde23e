"""
Othello game module.
This package contains the core game logic for Othello.
"""

from .board import Board
from .engine import has_legal_move, legal_moves, try_move
from .errors import (
    CannotUndoError, CellOccupiedError, CommandParseError, GameError, GameOverError, MoveError,
    NoLegalFlipError, OthelloError, OutOfBoundsError, PassNotAllowedError,
)
from .game import Command, CommandKind, GameStatus, OthelloGame, StatusKind, new_game
from .position import Coordinate, Disk, Side, change_turn
from .tree import PASS, GameNode

__all__ = [
    'Board', 'Coordinate', 'Disk', 'Side', 'change_turn',
    'try_move', 'legal_moves', 'has_legal_move',
    'GameNode', 'PASS',
    'OthelloGame', 'new_game', 'Command', 'CommandKind', 'GameStatus', 'StatusKind',
    'OthelloError', 'OutOfBoundsError', 'MoveError', 'CellOccupiedError', 'NoLegalFlipError',
    'GameError', 'PassNotAllowedError', 'CannotUndoError', 'GameOverError', 'CommandParseError',
]
