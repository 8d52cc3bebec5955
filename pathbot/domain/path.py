"""Path reconstruction utilities for the grid planner."""

from typing import List, Sequence
from .types import Action, Position, SearchNode
from .neighbors import action_between, is_adjacent


def reconstruct_path(nodes: Sequence[SearchNode], node_id: int) -> List[Position]:
    """
    Reconstruct the path from the start to a node using parent indices.
    Returns the path from start to the node (reversed from parent chain).
    """
    path = []
    current = node_id

    while current is not None:
        node = nodes[current]
        path.append(node.position)
        current = node.parent

    return list(reversed(path))


def first_action(nodes: Sequence[SearchNode], node_id: int) -> Action:
    """
    Get the action for the first step on the path ending at a node.

    Walks the parent chain back to the node whose parent is the start node
    and compares its position with the start. A node that is itself the
    start gives DO_NOTHING.
    """
    current = nodes[node_id]
    if current.parent is None:
        return Action.DO_NOTHING

    parent = nodes[current.parent]
    while parent.parent is not None:
        current = parent
        parent = nodes[current.parent]

    return action_between(parent.position, current.position)


def path_actions(path: Sequence[Position]) -> List[Action]:
    """Get the sequence of actions that walks a path."""
    return [action_between(a, b) for a, b in zip(path, path[1:])]


def validate_path(path: Sequence[Position], world) -> bool:
    """
    Validate that a path is connected and walkable in a world.
    Returns True if path is valid.
    """
    if not path:
        return False

    for position in path:
        status = world.tile_status(position)
        if status is None or not status.is_traversable():
            return False

    return all(is_adjacent(a, b) for a, b in zip(path, path[1:]))
