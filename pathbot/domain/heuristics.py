"""Heuristic functions for the grid planner."""

from .types import Position


def manhattan_distance(start: Position, target: Position) -> int:
    """
    Manhattan (L1) distance heuristic.
    Admissible and consistent for 4-directional unit-cost movement,
    so the first expansion of the target is along a shortest path.
    """
    return abs(start[0] - target[0]) + abs(start[1] - target[1])
