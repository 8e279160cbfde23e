"""
Othello: board, move engine and undoable game tree for Othello/Reversi.
"""

from .config import Config, get_default_config
from .logger import Logger, setup_logger
from .game import (
    Board, Command, Coordinate, Disk, GameStatus, OthelloGame, PASS, Side, StatusKind, new_game,
)

__all__ = [
    'Config', 'get_default_config', 'Logger', 'setup_logger',
    'Board', 'Command', 'Coordinate', 'Disk', 'GameStatus', 'OthelloGame', 'PASS', 'Side',
    'StatusKind', 'new_game',
]
