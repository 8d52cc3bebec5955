"""
Map file utilities for loading grid worlds from text.

One row per line, one tile per character:
  'C': TileStatus.CLEAN
  'D': TileStatus.DIRTY
  'W': TileStatus.IMPASSABLE
  'T': TileStatus.TARGET
  'R': robot start (on a CLEAN tile)
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from ..domain.types import Position, TileStatus
from ..domain.world import GridWorld

logger = logging.getLogger(__name__)

ROBOT_SYMBOL = "R"


class MapFormatError(ValueError):
    """Raised when a map file cannot be turned into a world."""


def parse_map(lines: Iterable[str]) -> Tuple[List[List[TileStatus]], Optional[Position]]:
    """
    Parse map rows into tile statuses and the robot start, if marked.
    Blank lines and trailing whitespace are ignored.
    """
    tiles: List[List[TileStatus]] = []
    robot: Optional[Position] = None

    for line in lines:
        line = line.rstrip()
        if not line:
            continue

        row_index = len(tiles)
        row: List[TileStatus] = []
        for col_index, symbol in enumerate(line):
            if symbol == ROBOT_SYMBOL:
                if robot is not None:
                    raise MapFormatError(
                        f"Second robot at row {row_index}, column {col_index}"
                    )
                robot = Position(row_index, col_index)
                row.append(TileStatus.CLEAN)
                continue
            try:
                row.append(TileStatus.from_symbol(symbol))
            except ValueError:
                raise MapFormatError(
                    f"Unknown tile {symbol!r} at row {row_index}, column {col_index}"
                ) from None

        if tiles and len(row) != len(tiles[0]):
            raise MapFormatError(
                f"Row {row_index} has {len(row)} tiles, expected {len(tiles[0])}"
            )
        tiles.append(row)

    if not tiles:
        raise MapFormatError("Map is empty")

    targets = sum(row.count(TileStatus.TARGET) for row in tiles)
    if targets != 1:
        raise MapFormatError(f"Map must contain exactly one target, found {targets}")

    return tiles, robot


def default_robot_position(tiles: List[List[TileStatus]]) -> Position:
    """First traversable, non-target tile in row-major order."""
    for row_index, row in enumerate(tiles):
        for col_index, status in enumerate(row):
            if status.is_traversable() and status is not TileStatus.TARGET:
                return Position(row_index, col_index)
    raise MapFormatError("Map has no free tile for the robot")


def world_from_map(lines: Iterable[str]) -> GridWorld:
    """Build a GridWorld from map rows."""
    tiles, robot = parse_map(lines)
    if robot is None:
        robot = default_robot_position(tiles)
    return GridWorld(tiles, robot)


def load_map(filepath: Union[str, Path]) -> List[str]:
    """Read the rows of a map file."""
    with open(filepath, "r") as f:
        return [line.rstrip("\n") for line in f]


def load_world(filepath: Union[str, Path]) -> GridWorld:
    """Load a GridWorld from a map file."""
    world = world_from_map(load_map(filepath))
    logger.info(
        "Loaded %dx%d map from %s, robot at %s, target at %s",
        world.rows, world.cols, filepath,
        world.current_position(), world.target_position(),
    )
    return world


def render_map(world: GridWorld) -> str:
    """Render a world back to map text, marking the robot with 'R'."""
    robot = world.current_position()
    lines = []
    for row_index in range(world.rows):
        chars = []
        for col_index in range(world.cols):
            position = Position(row_index, col_index)
            if position == robot and position != world.target_position():
                chars.append(ROBOT_SYMBOL)
            else:
                chars.append(world.tile_status(position).symbol)
        lines.append("".join(chars))
    return "\n".join(lines)
