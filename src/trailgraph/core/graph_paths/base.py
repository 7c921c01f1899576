import logging
from abc import ABC, abstractmethod
from time import time
from typing import Optional

from trailgraph.core.exceptions import NodeNotFoundError
from trailgraph.core.graph import ProximityGraph
from trailgraph.core.graph_paths.models import PathResult, PerformanceMetrics
from trailgraph.core.graph_paths.types import PathType
from trailgraph.core.graph_paths.utils import MemoryManager
from trailgraph.core.models import Coordinate, CoordinateLike, GraphNode

logger = logging.getLogger(__name__)


class PathFinder(ABC):
    """
    Abstract base class for path finding algorithms.

    Subclasses implement ``search_nodes`` over two graph nodes; ``find_path``
    handles snapping arbitrary coordinates onto the graph and collecting
    metrics. A finder holds no per-search state, so one instance can serve
    concurrent queries.
    """

    path_type: PathType

    def __init__(self, graph: ProximityGraph, max_memory_mb: Optional[float] = None):
        """Initialize finder with graph and optional memory limit."""
        self.graph = graph
        self.max_memory_mb = max_memory_mb

    def find_path(self, start: CoordinateLike, end: CoordinateLike) -> PathResult:
        """
        Find a minimum-cost path between the nodes nearest to start and end.

        Returns:
            PathResult whose ``found`` flag is False when the graph is empty
            or the snapped nodes are not connected
        """
        start_point = Coordinate.coerce(start)
        end_point = Coordinate.coerce(end)
        label = self.path_type.value

        memory_manager = MemoryManager(self.max_memory_mb)
        metrics = PerformanceMetrics(
            operation=label, start_time=time(), start_memory=memory_manager.start_memory
        )
        logger.debug(
            f"{label}: starting search from {start_point.latitude},{start_point.longitude} "
            f"to {end_point.latitude},{end_point.longitude}"
        )

        try:
            start_node = self.graph.nearest_node(start_point)
            goal_node = self.graph.nearest_node(end_point)
            if start_node is None or goal_node is None:
                logger.info(f"{label}: start or end node not found (graph has {len(self.graph)} nodes)")
                return PathResult.not_found(self.path_type, metrics)

            result = self.search_nodes(start_node, goal_node, metrics, memory_manager)
            if result.found:
                metrics.path_length_km = result.length_km
                logger.info(
                    f"{label}: path found with {len(result)} points, "
                    f"{metrics.path_length_km:.2f}km, {metrics.nodes_explored} nodes explored"
                )
            else:
                logger.info(f"{label}: no path found after exploring {metrics.nodes_explored} nodes")
            return result
        finally:
            metrics.end_time = time()
            metrics.end_memory = memory_manager.sample()
            metrics.peak_memory = memory_manager.peak_memory

    @abstractmethod
    def search_nodes(
        self,
        start_node: GraphNode,
        goal_node: GraphNode,
        metrics: PerformanceMetrics,
        memory_manager: MemoryManager,
    ) -> PathResult:
        """Run the search between two nodes of this finder's graph."""

    def validate_nodes(self, start_node: GraphNode, goal_node: GraphNode) -> None:
        """Validate that nodes exist in graph."""
        if not self.graph.has_node(start_node):
            raise NodeNotFoundError(f"Start node {start_node!r} not found")
        if not self.graph.has_node(goal_node):
            raise NodeNotFoundError(f"Goal node {goal_node!r} not found")
