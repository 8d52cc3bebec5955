"""Neighbor generation and direction utilities for grid planning."""

from typing import Iterator, Tuple
from .types import Position, Action, TileStatus, DIRECTIONS
from .world import GridWorldView


def passable_neighbors(position: Position, world: GridWorldView) -> Iterator[Tuple[str, Position]]:
    """
    Yield (label, position) for each enterable neighbor of a position.

    Neighbors are visited in the fixed order up, down, left, right.
    Absent neighbors (off the grid), tiles the world has no status for and
    IMPASSABLE tiles are skipped.
    """
    neighbors = world.neighbors(position)
    for label in DIRECTIONS:
        neighbor = neighbors.get(label)
        if neighbor is None:
            continue

        status = world.tile_status(neighbor)
        if status is None or status is TileStatus.IMPASSABLE:
            continue

        yield label, neighbor


def action_between(from_pos: Position, to_pos: Position) -> Action:
    """
    Get the action that moves from one position toward another.
    Rows are compared before columns; identical positions give DO_NOTHING.
    """
    if to_pos[0] < from_pos[0]:
        return Action.MOVE_UP
    if to_pos[0] > from_pos[0]:
        return Action.MOVE_DOWN
    if to_pos[1] < from_pos[1]:
        return Action.MOVE_LEFT
    if to_pos[1] > from_pos[1]:
        return Action.MOVE_RIGHT
    return Action.DO_NOTHING


def is_adjacent(a: Position, b: Position) -> bool:
    """Check if two positions are 4-connected neighbors."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
