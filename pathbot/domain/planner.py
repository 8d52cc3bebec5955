"""Per-step A* planner that turns a shortest path into a single action."""

import logging
from typing import List, Set

from .types import Action, Position, SearchNode, PlanResult
from .world import GridWorldView
from .priority_queue import Frontier
from .heuristics import manhattan_distance
from .neighbors import passable_neighbors
from .path import reconstruct_path, first_action

logger = logging.getLogger(__name__)


class PathPlanner:
    """
    A* search over a grid world snapshot.

    Every call searches from scratch; frontier, closed set and node arena
    are local to the call. Among equal-length shortest paths the frontier's
    tie-break (total cost, heuristic cost, row, col) decides which is taken.
    """

    def plan(self, start: Position, target: Position, world: GridWorldView) -> Action:
        """Get the first action along a shortest path from start to target."""
        return self.search(start, target, world).action

    def search(self, start: Position, target: Position, world: GridWorldView) -> PlanResult:
        """
        Run the search and return the action together with the full path
        and the number of expanded nodes.
        """
        start = Position(*start)
        target = Position(*target)

        if start == target:
            return PlanResult(action=Action.DO_NOTHING, path=[start], found=True)

        nodes: List[SearchNode] = []
        frontier = Frontier()
        closed: Set[Position] = set()
        nodes_expanded = 0

        nodes.append(SearchNode(start, None, 0, manhattan_distance(start, target)))
        frontier.offer(0, start, nodes[0].total_cost, nodes[0].heuristic_cost)

        while not frontier.is_empty():
            current_id, current_pos = frontier.pop()

            # Stale duplicate of an already expanded position
            if current_pos in closed:
                continue

            closed.add(current_pos)
            nodes_expanded += 1
            current = nodes[current_id]

            if current_pos == target:
                action = first_action(nodes, current_id)
                logger.debug(
                    "Path %s -> %s found, length %d, %d nodes expanded, first move %s",
                    start, target, current.path_cost, nodes_expanded, action.name,
                )
                return PlanResult(
                    action=action,
                    path=reconstruct_path(nodes, current_id),
                    nodes_expanded=nodes_expanded,
                    found=True,
                )

            for _, neighbor in passable_neighbors(current_pos, world):
                if neighbor in closed:
                    continue

                candidate = SearchNode(
                    neighbor,
                    current_id,
                    current.path_cost + 1,
                    manhattan_distance(neighbor, target),
                )
                if frontier.offer(len(nodes), neighbor, candidate.total_cost, candidate.heuristic_cost):
                    nodes.append(candidate)

        logger.debug("No path %s -> %s, %d nodes expanded", start, target, nodes_expanded)
        return PlanResult(action=Action.DO_NOTHING, nodes_expanded=nodes_expanded)


def plan_next_action(start: Position, target: Position, world: GridWorldView) -> Action:
    """
    Convenience function to get the next action from start toward target.

    Args:
        start: Current robot position
        target: Target position
        world: World snapshot to search in

    Returns:
        First action of a shortest path, or DO_NOTHING
    """
    return PathPlanner().plan(start, target, world)
