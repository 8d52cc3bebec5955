from collections import deque

import pytest

from pathbot.domain.types import Position, TileStatus
from pathbot.utils.map_loader import world_from_map


def make_world(*rows):
    """Build a world from map rows, e.g. make_world("RCC", "CWT")."""
    return world_from_map(rows)


def bfs_distance(world, start, target):
    """Reference shortest path length, or None if unreachable."""
    queue = deque([start])
    distance = {start: 0}
    while queue:
        current = queue.popleft()
        if current == target:
            return distance[current]
        for neighbor in world.neighbors(current).values():
            if neighbor is None or neighbor in distance:
                continue
            if world.tile_status(neighbor) is TileStatus.IMPASSABLE:
                continue
            distance[neighbor] = distance[current] + 1
            queue.append(neighbor)
    return None


@pytest.fixture
def open_3x3():
    return make_world("RCC", "CCC", "CCT")


@pytest.fixture
def walled_target():
    return make_world(
        "CCCCC",
        "CWWWC",
        "CWTWC",
        "CWWWC",
        "CCCCC",
    )


@pytest.fixture
def origin():
    return Position(0, 0)
