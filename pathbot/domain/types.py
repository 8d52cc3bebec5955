"""Core type definitions for the grid world and the per-step planner."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, NamedTuple, List, Dict, Tuple


class Position(NamedTuple):
    """Grid cell identified by (row, col). Hashable, usable as a dict key."""
    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> 'Position':
        """Get the position shifted by the given row/column delta."""
        return Position(self.row + d_row, self.col + d_col)


class TileStatus(Enum):
    """Status of a single tile. Only IMPASSABLE tiles block movement."""
    CLEAN = 0
    DIRTY = 1
    IMPASSABLE = 2
    TARGET = 3

    @property
    def symbol(self) -> str:
        """Character used for this status in map files."""
        return _TILE_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> 'TileStatus':
        """Look up a status by its map character."""
        for status, char in _TILE_SYMBOLS.items():
            if char == symbol:
                return status
        raise ValueError(f"Unknown tile symbol {symbol!r}")

    def is_traversable(self) -> bool:
        """Check if a robot may enter a tile with this status."""
        return self is not TileStatus.IMPASSABLE


_TILE_SYMBOLS: Dict[TileStatus, str] = {
    TileStatus.CLEAN: "C",
    TileStatus.DIRTY: "D",
    TileStatus.IMPASSABLE: "W",
    TileStatus.TARGET: "T",
}


class Action(Enum):
    """One discrete move, or no move at all."""
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    DO_NOTHING = "do_nothing"

    @property
    def delta(self) -> Tuple[int, int]:
        """Row/column change applied by this action."""
        return _ACTION_DELTAS[self]


_ACTION_DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.MOVE_UP: (-1, 0),
    Action.MOVE_DOWN: (1, 0),
    Action.MOVE_LEFT: (0, -1),
    Action.MOVE_RIGHT: (0, 1),
    Action.DO_NOTHING: (0, 0),
}

# Neighbor labels, in the order neighbors are expanded
DIRECTIONS: Tuple[str, ...] = ("up", "down", "left", "right")

DIRECTION_DELTAS: Dict[str, Tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}

DIRECTION_ACTIONS: Dict[str, Action] = {
    "up": Action.MOVE_UP,
    "down": Action.MOVE_DOWN,
    "left": Action.MOVE_LEFT,
    "right": Action.MOVE_RIGHT,
}


@dataclass
class SearchNode:
    """
    Node created during a single planning call.

    Nodes live in a flat list (the search arena); ``parent`` is the index of
    the predecessor node in that list, or None for the start node.
    """
    position: Position
    parent: Optional[int]
    path_cost: int = 0
    heuristic_cost: int = 0

    @property
    def total_cost(self) -> int:
        """Estimated total cost (path + heuristic)."""
        return self.path_cost + self.heuristic_cost


@dataclass
class PlanResult:
    """Result of a planning call."""
    action: Action = Action.DO_NOTHING
    path: Optional[List[Position]] = None
    nodes_expanded: int = 0
    found: bool = False

    @property
    def path_length(self) -> int:
        """Number of moves along the discovered path."""
        if not self.path:
            return 0
        return len(self.path) - 1
