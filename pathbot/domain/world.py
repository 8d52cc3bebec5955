"""Grid world model and the read-only view the planner depends on."""

import logging
from typing import Dict, Optional, Protocol, Sequence, Tuple

import numpy as np

from .types import Position, TileStatus, Action, DIRECTIONS, DIRECTION_DELTAS

logger = logging.getLogger(__name__)


class GridWorldView(Protocol):
    """Read-only queries the planner makes against a world snapshot."""

    def current_position(self) -> Position:
        ...

    def target_position(self) -> Position:
        ...

    def tile_status(self, position: Position) -> Optional[TileStatus]:
        """Status of a tile, or None for positions outside the grid."""
        ...

    def neighbors(self, position: Position) -> Dict[str, Optional[Position]]:
        """Map each of the four direction labels to a position or None."""
        ...


class GridWorld:
    """
    Rectangular grid world with a single robot and a single target.

    Tile statuses are stored as an int8 numpy array of TileStatus values.
    The world is mutated only between planning calls: by the simulation
    loop applying an action, or by callers changing tiles.
    """

    def __init__(self, tiles: Sequence[Sequence[TileStatus]], robot: Position):
        if len(tiles) == 0 or len(tiles[0]) == 0:
            raise ValueError("World must have at least one row and one column")

        width = len(tiles[0])
        for row_index, row in enumerate(tiles):
            if len(row) != width:
                raise ValueError(
                    f"Row {row_index} has {len(row)} tiles, expected {width}"
                )

        self._tiles = np.array(
            [[status.value for status in row] for row in tiles], dtype=np.int8
        )

        targets = np.argwhere(self._tiles == TileStatus.TARGET.value)
        if len(targets) != 1:
            raise ValueError(f"World must contain exactly one target tile, found {len(targets)}")
        self._target = Position(int(targets[0][0]), int(targets[0][1]))

        robot = Position(*robot)
        if not self.contains(robot):
            raise ValueError(f"Robot position {robot} is out of bounds")
        if self.tile_status(robot) is TileStatus.IMPASSABLE:
            raise ValueError(f"Robot position {robot} is impassable")
        self._robot = robot

    # GridWorldView

    def current_position(self) -> Position:
        return self._robot

    def target_position(self) -> Position:
        return self._target

    def tile_status(self, position: Position) -> Optional[TileStatus]:
        if not self.contains(position):
            return None
        return TileStatus(int(self._tiles[position[0], position[1]]))

    def neighbors(self, position: Position) -> Dict[str, Optional[Position]]:
        result: Dict[str, Optional[Position]] = {}
        for label in DIRECTIONS:
            d_row, d_col = DIRECTION_DELTAS[label]
            neighbor = Position(position[0] + d_row, position[1] + d_col)
            result[label] = neighbor if self.contains(neighbor) else None
        return result

    # Geometry

    @property
    def rows(self) -> int:
        return int(self._tiles.shape[0])

    @property
    def cols(self) -> int:
        return int(self._tiles.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def contains(self, position: Position) -> bool:
        """Check if a position lies inside the grid."""
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

    # Mutation between time-steps

    def apply_action(self, action: Action) -> Position:
        """
        Move the robot according to an action and return its new position.
        Moves off the grid or into an IMPASSABLE tile leave it in place.
        """
        d_row, d_col = action.delta
        if (d_row, d_col) == (0, 0):
            return self._robot

        destination = self._robot.offset(d_row, d_col)
        status = self.tile_status(destination)
        if status is None or not status.is_traversable():
            logger.debug("Blocked %s from %s", action.name, self._robot)
            return self._robot

        self._robot = destination
        return self._robot

    def set_tile_status(self, position: Position, status: TileStatus):
        """Change a tile's status. The target tile cannot be moved this way."""
        if not self.contains(position):
            raise ValueError(f"Position {position} is out of bounds")
        if status is TileStatus.TARGET and Position(*position) != self._target:
            raise ValueError("World already has a target tile")
        if Position(*position) == self._target and status is not TileStatus.TARGET:
            raise ValueError("Cannot overwrite the target tile")
        if status is TileStatus.IMPASSABLE and Position(*position) == self._robot:
            raise ValueError(f"Robot occupies {position}")
        self._tiles[position[0], position[1]] = status.value

    def goal_condition_met(self) -> bool:
        """Check if the robot has reached the target."""
        return self._robot == self._target

    def tiles_array(self) -> np.ndarray:
        """Get a copy of the tile status codes."""
        return self._tiles.copy()

    def count_tiles(self, status: TileStatus) -> int:
        """Count tiles with the given status."""
        return int(np.count_nonzero(self._tiles == status.value))
