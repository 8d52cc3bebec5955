"""Frontier (open list) for the grid planner with explicit tie-breaking."""

import heapq
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field

from .types import Position


@dataclass(order=True)
class FrontierEntry:
    """
    Entry in the frontier heap.

    Comparison order:
    1. total_cost (lower is better)
    2. heuristic_cost (lower is better - favor nodes closer to target)
    3. row (lower first)
    4. col (lower first)
    Equal-or-worse duplicates of a position are never inserted, so the
    key is unique among live entries and pop order is deterministic.
    """
    total_cost: int
    heuristic_cost: int
    row: int
    col: int
    node_id: int = field(compare=False)


class Frontier:
    """
    Binary heap of search node ids ordered by estimated total cost.

    Keeps the best total cost offered for each position in a side mapping
    so duplicate checks are O(1). Strictly worse entries already in the heap
    are left in place; the planner skips them once their position is closed.
    """

    def __init__(self):
        self._heap: List[FrontierEntry] = []
        self._best_cost: Dict[Position, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        """Check if the frontier is empty."""
        return not self._heap

    def offer(self, node_id: int, position: Position, total_cost: int, heuristic_cost: int) -> bool:
        """
        Add a node unless an equal-or-better entry for its position exists.
        Returns True if the node was added.
        """
        best = self._best_cost.get(position)
        if best is not None and best <= total_cost:
            return False

        self._best_cost[position] = total_cost
        heapq.heappush(
            self._heap,
            FrontierEntry(total_cost, heuristic_cost, position[0], position[1], node_id),
        )
        return True

    def pop(self) -> Optional[Tuple[int, Position]]:
        """
        Remove and return (node_id, position) with the lowest key.
        Returns None if the frontier is empty.
        """
        if not self._heap:
            return None
        entry = heapq.heappop(self._heap)
        return entry.node_id, Position(entry.row, entry.col)

    def best_cost(self, position: Position) -> Optional[int]:
        """Get the best total cost offered for a position, or None."""
        return self._best_cost.get(position)
