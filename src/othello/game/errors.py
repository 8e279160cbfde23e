"""
Error types raised by the Othello game core.
"""


class OthelloError(Exception):
    """Base class for every error raised by the game core."""


class OutOfBoundsError(OthelloError, ValueError):
    """A coordinate (or its text form) falls outside the 8x8 board."""


class MoveError(OthelloError):
    """A placement was rejected; the board is left as it was."""


class CellOccupiedError(MoveError):
    pass


class NoLegalFlipError(MoveError):
    pass


class GameError(OthelloError):
    """A controller action was rejected; the game state is left as it was."""


class PassNotAllowedError(GameError):
    pass


class CannotUndoError(GameError):
    pass


class GameOverError(GameError):
    pass


class CommandParseError(OthelloError, ValueError):
    pass
