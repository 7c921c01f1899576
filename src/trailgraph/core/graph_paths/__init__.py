"""Graph path finding functionality."""

import logging
from typing import Dict, Iterable, Optional, Union

from ..exceptions import ConfigurationError, GraphOperationError
from ..graph import ProximityGraph, build_graph
from ..models import CoordinateLike
from .algorithms.astar import AStarPathFinder
from .algorithms.dijkstra import DijkstraPathFinder
from .base import PathFinder
from .heuristics import (
    ChebyshevHeuristic,
    EuclideanHeuristic,
    HaversineHeuristic,
    Heuristic,
    ManhattanHeuristic,
    OctileHeuristic,
    resolve_heuristic,
)
from .models import PathResult, PerformanceMetrics
from .types import CoordinatePath, HeuristicType, PathType

logger = logging.getLogger(__name__)

# Constants
DEFAULT_HEURISTIC = HeuristicType.HAVERSINE.value  # resolves to octile

__all__ = [
    "AStarPathFinder",
    "ChebyshevHeuristic",
    "CoordinatePath",
    "DEFAULT_HEURISTIC",
    "DijkstraPathFinder",
    "EuclideanHeuristic",
    "HaversineHeuristic",
    "Heuristic",
    "HeuristicType",
    "ManhattanHeuristic",
    "OctileHeuristic",
    "PathFinder",
    "PathResult",
    "PathSearchEngine",
    "PathType",
    "PerformanceMetrics",
    "find_path_astar",
    "find_path_dijkstra",
    "resolve_heuristic",
]


class PathSearchEngine:
    """
    Answers path queries over one proximity graph with A* or Dijkstra.

    The heuristic is chosen at construction time and can be changed with
    ``set_heuristic``. Searches keep their state in per-call tables, so the
    same engine (and graph) can be queried from several threads.

    Example:
        >>> engine = PathSearchEngine.from_coordinates(route_points, heuristic="euclidean")
        >>> path = engine.find_path_astar(user_location, destination)
        >>> if path is None:
        ...     path = route_points  # fall back to the raw route
    """

    def __init__(
        self,
        graph: ProximityGraph,
        heuristic: Union[str, HeuristicType, Heuristic] = DEFAULT_HEURISTIC,
        max_memory_mb: Optional[float] = None,
    ):
        if max_memory_mb is not None:
            if isinstance(max_memory_mb, bool) or not isinstance(max_memory_mb, (int, float)):
                raise ConfigurationError("max_memory_mb must be a number")
            if max_memory_mb <= 0:
                raise ConfigurationError("max_memory_mb must be positive")
        self.graph = graph
        self.max_memory_mb = max_memory_mb
        self.heuristic = resolve_heuristic(heuristic)

    @classmethod
    def from_coordinates(
        cls,
        coordinates: Iterable[CoordinateLike],
        heuristic: Union[str, HeuristicType, Heuristic] = DEFAULT_HEURISTIC,
        max_memory_mb: Optional[float] = None,
    ) -> "PathSearchEngine":
        """Build the graph from coordinates and wrap it in an engine."""
        return cls(build_graph(coordinates), heuristic=heuristic, max_memory_mb=max_memory_mb)

    def set_heuristic(self, heuristic: Union[str, HeuristicType, Heuristic]) -> None:
        """
        Select the A* heuristic.

        Recognized names are manhattan, euclidean, octile and chebyshev;
        ``haversine`` and anything else select octile.
        """
        self.heuristic = resolve_heuristic(heuristic)
        logger.debug(f"Heuristic set to {self.heuristic!r}")

    def _finder(self, algorithm: PathType) -> PathFinder:
        if algorithm == PathType.A_STAR:
            return AStarPathFinder(self.graph, self.heuristic, self.max_memory_mb)
        if algorithm == PathType.DIJKSTRA:
            return DijkstraPathFinder(self.graph, self.max_memory_mb)
        raise GraphOperationError(f"Unsupported path finding algorithm: {algorithm!r}")

    def search(
        self,
        start: CoordinateLike,
        end: CoordinateLike,
        algorithm: Union[PathType, str] = PathType.A_STAR,
    ) -> PathResult:
        """Run one query and return the tagged result."""
        if isinstance(algorithm, str):
            try:
                algorithm = PathType.from_name(algorithm)
            except ValueError as e:
                raise GraphOperationError(str(e))
        return self._finder(algorithm).find_path(start, end)

    def find_path_astar(self, start: CoordinateLike, end: CoordinateLike) -> CoordinatePath:
        """A* path as coordinates, or None if there is no path."""
        return self.search(start, end, PathType.A_STAR).coordinates()

    def find_path_dijkstra(self, start: CoordinateLike, end: CoordinateLike) -> CoordinatePath:
        """Dijkstra path as coordinates, or None if there is no path."""
        return self.search(start, end, PathType.DIJKSTRA).coordinates()

    def compare(self, start: CoordinateLike, end: CoordinateLike) -> Dict[PathType, PathResult]:
        """Run both algorithms on the same query."""
        return {path_type: self.search(start, end, path_type) for path_type in PathType}


def find_path_astar(
    graph: ProximityGraph,
    start: CoordinateLike,
    end: CoordinateLike,
    heuristic: Union[str, HeuristicType, Heuristic] = DEFAULT_HEURISTIC,
) -> CoordinatePath:
    """Find a path with A*; returns None if there is none."""
    return PathSearchEngine(graph, heuristic).find_path_astar(start, end)


def find_path_dijkstra(graph: ProximityGraph, start: CoordinateLike, end: CoordinateLike) -> CoordinatePath:
    """Find a path with Dijkstra; returns None if there is none."""
    return PathSearchEngine(graph).find_path_dijkstra(start, end)
