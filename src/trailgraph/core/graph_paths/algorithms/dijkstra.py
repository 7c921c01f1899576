"""Dijkstra search over a proximity graph."""

import logging
from typing import Dict, Optional

from ...models import GraphNode
from ..base import PathFinder
from ..models import PathResult, PerformanceMetrics
from ..types import PathType
from ..utils import MemoryManager, PriorityQueue, is_better_cost, reconstruct_path

logger = logging.getLogger(__name__)


class DijkstraPathFinder(PathFinder):
    """
    Dijkstra path finder.

    Keeps its own distance and predecessor maps, independent of the record
    tables A* uses. There is no closed set: once a node's distance is final,
    relaxing into it can no longer improve it, so it is never queued again.
    """

    path_type = PathType.DIJKSTRA

    def search_nodes(
        self,
        start_node: GraphNode,
        goal_node: GraphNode,
        metrics: PerformanceMetrics,
        memory_manager: MemoryManager,
    ) -> PathResult:
        """Dijkstra's algorithm implementation."""
        self.validate_nodes(start_node, goal_node)
        logger.debug(f"Dijkstra from node {start_node.index} to node {goal_node.index}")

        distances: Dict[GraphNode, float] = {start_node: 0.0}
        previous: Dict[GraphNode, Optional[GraphNode]] = {start_node: None}
        frontier: PriorityQueue[GraphNode] = PriorityQueue()
        frontier.add_or_update(start_node, 0.0)

        while not frontier.empty():
            memory_manager.check_memory()
            current_dist, current = frontier.pop()
            metrics.nodes_explored += 1

            if current is goal_node:
                metrics.frontier_size = len(frontier)
                return PathResult(
                    algorithm=self.path_type,
                    path=reconstruct_path(current, previous),
                    total_cost=current_dist,
                    metrics=metrics,
                )

            for neighbor in current.neighbors:
                new_dist = current_dist + neighbor.weight
                if is_better_cost(new_dist, distances.get(neighbor.node, float("inf"))):
                    distances[neighbor.node] = new_dist
                    previous[neighbor.node] = current
                    frontier.add_or_update(neighbor.node, new_dist)
                    logger.debug(f"  node {neighbor.node.index}: distance {new_dist:.4f} via {current.index}")

        metrics.frontier_size = 0
        return PathResult.not_found(self.path_type, metrics)
