"""
Game tree of explored Othello positions.
Each node caches its children keyed by the move that produced them.
"""
import logging
import weakref
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple, Union

from .board import Board
from .engine import try_move
from .errors import MoveError
from .position import Coordinate, Side

logger = logging.getLogger(__name__)


class Pass(Enum):
    """Key of the edge taken when the side to move has no legal placement."""
    PASS = 'pass'

    def __str__(self) -> str:
        return self.value


PASS = Pass.PASS

MoveKey = Union[Coordinate, Pass]


class GameNode:
    """A cached (board, side to move) state in the game tree."""

    __slots__ = ['board', 'side', 'move', 'is_terminal', '_parent', '_children', '__weakref__']

    def __init__(self, board: Board, side: Side):
        """
        Initialize a new node.

        Args:
            board: Board snapshot at this node
            side: The side to move from this node
        """
        self.board = board
        self.side = side
        self.move: Optional[MoveKey] = None  # Key of the edge from the parent (None for root)
        self.is_terminal = False
        # The parent is only observed; ownership runs from parent to child
        self._parent: Optional[weakref.ref] = None
        self._children: Dict[MoveKey, 'GameNode'] = {}

    def get_parent(self) -> Optional['GameNode']:
        if self._parent is None:
            return None
        return self._parent()

    def get_child(self, key: MoveKey) -> Optional['GameNode']:
        return self._children.get(key)

    def insert_child(self, key: MoveKey, node: 'GameNode') -> None:
        """Attach `node` under this node, reached by playing `key`."""
        node._parent = weakref.ref(self)
        node.move = key
        self._children[key] = node

    def children(self) -> Iterator[Tuple[MoveKey, 'GameNode']]:
        return iter(list(self._children.items()))

    def has_any_child(self) -> bool:
        return len(self._children) > 0

    def has_pass_key(self) -> bool:
        return PASS in self._children

    def is_pass_only(self) -> bool:
        """True when the only way on from this node is a forced pass."""
        return len(self._children) == 1 and self.has_pass_key()

    def remove_pass(self) -> None:
        self._children.pop(PASS, None)

    def expanded(self) -> bool:
        """Check if the node has been expanded (has children) or ended the game."""
        return self.has_any_child() or self.is_terminal

    def expand(self) -> None:
        """
        Create a child for every legal placement of the side to move.

        If there is none, a single PASS child with the same board and the
        opponent to move is created instead. Does nothing if the node has
        already been expanded.
        """
        if self.expanded():
            return

        next_side = self.side.opponent()
        for pos in Coordinate.all():
            try:
                board = try_move(self.board, pos, self.side)
            except MoveError:
                continue
            self.insert_child(pos, GameNode(board, next_side))

        if not self.has_any_child():
            self.insert_child(PASS, GameNode(self.board, next_side))

        logger.debug(f"Expanded node ({self.side.value} to move): {len(self._children)} children")

    def __repr__(self) -> str:
        return f"GameNode(side={self.side.value}, move={self.move}, children={len(self._children)})"
