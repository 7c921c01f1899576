"""
A* search over a proximity graph.

Node states move from unvisited to open (in the frontier) to closed
(finalized). The frontier is keyed by ``f = g + h`` and supports decrease-key,
so a node is never queued twice. All costs and parents live in a record table
created for each search; the graph itself is only read.
"""

import logging
from typing import Dict, Optional, Set, Union

from ...graph import ProximityGraph
from ...models import GraphNode
from ..base import PathFinder
from ..heuristics import Heuristic, resolve_heuristic
from ..models import PathResult, PerformanceMetrics, SearchRecord
from ..types import HeuristicType, PathType
from ..utils import MemoryManager, PriorityQueue, is_better_cost, parents_of, reconstruct_path

logger = logging.getLogger(__name__)


class AStarPathFinder(PathFinder):
    """A* path finder with a pluggable heuristic."""

    path_type = PathType.A_STAR

    def __init__(
        self,
        graph: ProximityGraph,
        heuristic: Union[str, HeuristicType, Heuristic] = HeuristicType.OCTILE,
        max_memory_mb: Optional[float] = None,
    ):
        super().__init__(graph, max_memory_mb)
        self.heuristic = resolve_heuristic(heuristic)

    def search_nodes(
        self,
        start_node: GraphNode,
        goal_node: GraphNode,
        metrics: PerformanceMetrics,
        memory_manager: MemoryManager,
    ) -> PathResult:
        """A* algorithm implementation."""
        self.validate_nodes(start_node, goal_node)
        heuristic = self.heuristic
        logger.debug(f"A* from node {start_node.index} to node {goal_node.index} using {heuristic!r}")

        records: Dict[GraphNode, SearchRecord] = {
            start_node: SearchRecord(g=0.0, h=heuristic.estimate(start_node, goal_node), parent=None)
        }
        closed: Set[GraphNode] = set()
        frontier: PriorityQueue[GraphNode] = PriorityQueue()
        frontier.add_or_update(start_node, records[start_node].f)

        while not frontier.empty():
            memory_manager.check_memory()
            _, current = frontier.pop()
            metrics.nodes_explored += 1

            if current is goal_node:
                metrics.frontier_size = len(frontier)
                metrics.closed_size = len(closed)
                path = reconstruct_path(current, parents_of(records))
                return PathResult(
                    algorithm=self.path_type,
                    path=path,
                    total_cost=records[current].g,
                    metrics=metrics,
                )

            closed.add(current)
            current_g = records[current].g

            for neighbor in current.neighbors:
                if neighbor.node in closed:
                    continue

                tentative_g = current_g + neighbor.weight
                record = records.get(neighbor.node)
                if record is None or is_better_cost(tentative_g, record.g):
                    h = heuristic.estimate(neighbor.node, goal_node)
                    records[neighbor.node] = SearchRecord(g=tentative_g, h=h, parent=current)
                    frontier.add_or_update(neighbor.node, tentative_g + h)
                    logger.debug(
                        f"  node {neighbor.node.index}: g={tentative_g:.4f} h={h:.4f} via {current.index}"
                    )

        metrics.frontier_size = 0
        metrics.closed_size = len(closed)
        return PathResult.not_found(self.path_type, metrics)
