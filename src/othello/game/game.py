"""
Othello game module.
Handles game flow over a cached tree of explored positions.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union
import numpy as np

from ..config import Config, get_default_config
from ..logger import Logger
from .board import Board
from .engine import try_move
from .errors import (
    CannotUndoError, CommandParseError, GameOverError, MoveError, OthelloError, PassNotAllowedError,
)
from .position import Coordinate, Disk, Side
from .tree import PASS, GameNode, MoveKey

logger = logging.getLogger(__name__)


class CommandKind(Enum):
    INIT = 'init'
    MOVE = 'move'
    PASS = 'pass'
    UNDO = 'undo'
    QUIT = 'quit'


@dataclass(frozen=True)
class Command:
    """An action requested by the presentation layer."""
    kind: CommandKind
    coordinate: Optional[Coordinate] = None

    def __post_init__(self):
        if (self.kind is CommandKind.MOVE) != (self.coordinate is not None):
            raise ValueError("Only a move command carries a coordinate")

    @classmethod
    def init(cls) -> 'Command':
        return cls(CommandKind.INIT)

    @classmethod
    def move(cls, coordinate: Union[Coordinate, str]) -> 'Command':
        if isinstance(coordinate, str):
            coordinate = Coordinate.parse(coordinate)
        return cls(CommandKind.MOVE, coordinate)

    @classmethod
    def pass_(cls) -> 'Command':
        return cls(CommandKind.PASS)

    @classmethod
    def undo(cls) -> 'Command':
        return cls(CommandKind.UNDO)

    @classmethod
    def quit(cls) -> 'Command':
        return cls(CommandKind.QUIT)

    @classmethod
    def parse(cls, text: str) -> 'Command':
        """
        Parse a textual command such as "move f5", "undo" or "pass".

        Raises:
            CommandParseError: If the command name or its arguments are wrong
            OutOfBoundsError: If the move coordinate is not on the board
        """
        tokens = text.split()
        if not tokens:
            raise CommandParseError("empty command")

        try:
            kind = CommandKind(tokens[0].lower())
        except ValueError:
            raise CommandParseError(f"Unknown command: {tokens[0]}") from None

        args = tokens[1:]
        if kind is CommandKind.MOVE:
            if len(args) != 1:
                raise CommandParseError("move takes exactly one coordinate, e.g. 'move f5'")
            return cls.move(args[0])
        if args:
            raise CommandParseError(f"{kind.value} takes no arguments")
        return cls(kind)

    def __str__(self) -> str:
        if self.coordinate is not None:
            return f"{self.kind.value} {self.coordinate}"
        return self.kind.value


class StatusKind(Enum):
    CONTINUE = 'continue'
    PASS_BACK = 'pass_back'  # Side to move plays again because the opponent had to pass
    GAME_OVER = 'game_over'


@dataclass(frozen=True)
class GameStatus:
    """Summary of the current position for the presentation layer."""
    kind: StatusKind
    black: int
    white: int
    side: Optional[Side] = None  # None once the game is over

    @property
    def is_over(self) -> bool:
        return self.kind is StatusKind.GAME_OVER


class OthelloGame:
    """
    Main game class for Othello that manages the game state and flow.

    Every position reached is kept in a tree rooted at the starting position,
    so undo and replaying a move already seen are lookups rather than
    recomputation.
    """

    def __init__(self, config: Optional[Config] = None, logger: Optional[Logger] = None,
                 board: Optional[Board] = None, side: Side = Side.DARK):
        """
        Initialize a new Othello game.

        Args:
            config: Configuration object. If None, uses default config.
            logger: Optional Logger that receives the status after each action
            board: Starting position (default: the standard opening)
            side: Side to move first
        """
        self.config = config if config is not None else get_default_config()
        self.logger = logger
        self.root = GameNode(board if board is not None else Board.initial(), side)
        self.current = self.root
        self.last_error: Optional[OthelloError] = None
        self.step = 0

        self._enter(self.root)
        self._start = self.current

    @classmethod
    def from_position(cls, board: Board, side: Side, config: Optional[Config] = None,
                      logger: Optional[Logger] = None) -> 'OthelloGame':
        """Start a game from an arbitrary position."""
        return cls(config=config, logger=logger, board=board, side=side)

    def action(self, command: Command) -> bool:
        """
        Apply a command.

        Returns:
            bool: True if the command was accepted. On rejection the state is
            unchanged and the reason is kept in ``last_error``.
        """
        try:
            if command.kind is CommandKind.INIT:
                self.init()
            elif command.kind is CommandKind.MOVE:
                self.move(command.coordinate)
            elif command.kind is CommandKind.PASS:
                self.pass_turn()
            elif command.kind is CommandKind.UNDO:
                self.undo()
            else:
                logger.debug("Quit requested")
        except OthelloError as e:
            self.last_error = e
            logger.info(f"Rejected '{command}': {e}")
            return False

        self.last_error = None
        self.step += 1
        if self.logger is not None:
            self.logger.log_status(self.status(), self.step)
        return True

    def init(self) -> None:
        """Go back to the starting position, keeping the explored tree."""
        self.current = self._start

    def move(self, pos: Coordinate) -> None:
        """
        Place a disk for the side to move.

        Text such as "f5" is parsed by the caller, e.g. through Command.parse.

        Raises:
            TypeError: If `pos` is not a Coordinate
            GameOverError: If the game has ended
            CellOccupiedError: If `pos` already holds a disk
            NoLegalFlipError: If the placement captures nothing
        """
        if not isinstance(pos, Coordinate):
            raise TypeError(f"move expects a Coordinate, got {type(pos).__name__}")
        if self.current.is_terminal:
            raise GameOverError("the game is over")

        child = self.current.get_child(pos)
        if child is None:
            # Not a cached edge, so the engine reports why the placement fails
            try_move(self.current.board, pos, self.current.side)
            raise MoveError(f"can't place at {pos}")

        logger.debug(f"{self.current.side.value} plays {pos}")
        self._enter(child)

    def pass_turn(self) -> None:
        """
        Pass when the side to move has no legal placement.

        Raises:
            GameOverError: If the game has ended
            PassNotAllowedError: If a placement is available
        """
        if self.current.is_terminal:
            raise GameOverError("the game is over")
        if not self.current.has_pass_key():
            raise PassNotAllowedError("can't pass while a move is available")

        logger.debug(f"{self.current.side.value} passes")
        self.current = self._resolve_pass(self.current)

    def undo(self) -> None:
        """
        Go back to the previous position where the side to move had a choice.

        Raises:
            CannotUndoError: If there is no such position
        """
        node = self.current.get_parent()
        if node is None:
            raise CannotUndoError("can't undo - no previous move")

        # Skip positions whose only continuation is a forced pass
        while node.is_pass_only() and node.get_parent() is not None:
            node = node.get_parent()
        if node.is_pass_only():
            raise CannotUndoError("can't undo - no previous move")

        logger.debug(f"Undo to {node.side.value} to move")
        self.current = node

    def _enter(self, node: GameNode) -> None:
        """Make `node` current, expand it and settle any forced pass."""
        self.current = node
        if node.board.is_full():
            self._finish(node)
            return

        node.expand()
        if node.is_pass_only():
            target = self._resolve_pass(node)
            if target is node or self.config.game.auto_pass:
                self.current = target

    def _resolve_pass(self, node: GameNode) -> GameNode:
        """
        Follow the pass edge of `node`.

        If the opponent cannot move either, the game ends at `node` and the
        pass edge is dropped; `node` is returned in that case.
        """
        passed = node.get_child(PASS)
        passed.expand()
        if passed.is_pass_only():
            node.remove_pass()
            self._finish(node)
            return node
        return passed

    def _finish(self, node: GameNode) -> None:
        if not node.is_terminal:
            node.is_terminal = True
            black, white = node.board.score()
            logger.info(f"Game over: black={black} white={white}")

    def status(self) -> GameStatus:
        """Get the status of the current position; disk counts are recomputed each call."""
        black, white = self.current.board.score()
        if self.current.is_terminal or self.current.board.is_full():
            return GameStatus(StatusKind.GAME_OVER, black, white)
        if self.current.move is PASS:
            return GameStatus(StatusKind.PASS_BACK, black, white, self.current.side)
        return GameStatus(StatusKind.CONTINUE, black, white, self.current.side)

    def current_board(self) -> Board:
        return self.current.board

    def current_side(self) -> Side:
        return self.current.side

    def is_game_over(self) -> bool:
        return self.status().is_over

    def legal_moves(self) -> List[Coordinate]:
        """Get the placements available to the side to move, in index order."""
        moves = [key for key, _ in self.current.children() if isinstance(key, Coordinate)]
        return sorted(moves, key=lambda pos: pos.index)

    def must_pass(self) -> bool:
        """True when the side to move has no placement and has to pass."""
        return self.current.has_pass_key()

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return self.current.board.score()

    def get_disk_at(self, pos: Coordinate) -> Optional[Disk]:
        return self.current.board.get(pos)

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array representing the board state
        """
        return self.current.board.to_array()

    def get_move_history(self) -> List[MoveKey]:
        """
        Get the moves and passes leading from the root to the current position.

        Returns:
            List of Coordinate or PASS keys, oldest first
        """
        history = []
        node = self.current
        while node.move is not None:
            history.append(node.move)
            node = node.get_parent()
        history.reverse()
        return history

    def __str__(self) -> str:
        """String representation of the game state."""
        result = str(self.current.board)
        status = self.status()
        result += f"Black: {status.black}, White: {status.white}"
        if status.is_over:
            result += "\nGame over!"
        else:
            result += f"\nTo move: {status.side.value}"
        return result


def new_game(config: Optional[Config] = None, logger: Optional[Logger] = None) -> OthelloGame:
    """Start a game from the standard opening with Dark to move."""
    return OthelloGame(config=config, logger=logger)
