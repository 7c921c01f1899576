"""
Data models for graph path finding.

This module provides the data structures shared by the search algorithms:
- SearchRecord: per-search cost bookkeeping for one node
- PerformanceMetrics: observability data collected during a search
- PathResult: tagged search outcome (found / not found)

Example:
    >>> result = engine.search(start, end)
    >>> if result.found:
    ...     print(result.total_cost, [c.to_dict() for c in result])
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union

from ..geo import path_length
from ..models import Coordinate, GraphNode
from .types import PathType


@dataclass
class SearchRecord:
    """
    Cost bookkeeping for one node during one search.

    Records are created lazily and owned by a single search invocation, so
    the shared graph never carries search state.

    Attributes:
        g: Best known cost from the start node
        h: Heuristic estimate to the goal (always 0 for Dijkstra)
        parent: Predecessor on the best known path
    """

    __slots__ = ("g", "h", "parent")

    g: float
    h: float
    parent: Optional[GraphNode]

    @property
    def f(self) -> float:
        """Estimated total cost through this node."""
        return self.g + self.h


@dataclass
class PerformanceMetrics:
    """
    Container for path finding performance metrics.

    Attributes:
        operation: Name of the search operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        nodes_explored: Number of frontier pops
        path_length_km: Haversine length of the resulting path
        frontier_size: Frontier entries left when the search stopped
        closed_size: Finalized nodes when the search stopped (A* only)
        start_memory: Process RSS in bytes when the search started
        peak_memory: Highest RSS observed during the search
        end_memory: RSS when the search finished

    Example:
        >>> metrics = PerformanceMetrics(operation="astar", start_time=time())
        >>> metrics.end_time = time()
        >>> print(f"Search took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_explored: int = 0
    path_length_km: float = 0.0
    frontier_size: int = 0
    closed_size: Optional[int] = None
    start_memory: Optional[int] = None
    peak_memory: Optional[int] = None
    end_memory: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if not isinstance(self.end_time, (int, float)):
            raise TypeError("end_time must be a numeric value")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

        if self.nodes_explored < 0:
            raise ValueError("nodes_explored cannot be negative")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """Convert metrics to dictionary format."""
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "nodes_explored": self.nodes_explored,
            "path_length_km": self.path_length_km,
            "frontier_size": self.frontier_size,
            "closed_size": self.closed_size,
            "start_memory": self.start_memory,
            "peak_memory": self.peak_memory,
            "end_memory": self.end_memory,
        }


@dataclass
class PathResult:
    """
    Outcome of a single path query.

    ``found`` separates a successful search from an exhausted frontier or an
    empty graph. A found path always has at least one coordinate.

    Attributes:
        algorithm: Algorithm that produced the result
        path: Coordinates from the snapped start to the snapped end, inclusive
        total_cost: Sum of edge weights along the path (0.0 when not found)
        metrics: Performance metrics for the search
    """

    algorithm: PathType
    path: List[Coordinate] = field(default_factory=list)
    total_cost: float = 0.0
    metrics: Optional[PerformanceMetrics] = None

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.path, list):
            raise TypeError("path must be a list")
        if not all(isinstance(point, Coordinate) for point in self.path):
            raise TypeError("path must contain only Coordinate objects")
        if not isinstance(self.total_cost, (int, float)):
            raise TypeError("total_cost must be a numeric value")

    @classmethod
    def not_found(
        cls, algorithm: PathType, metrics: Optional[PerformanceMetrics] = None
    ) -> "PathResult":
        """Result for a query that has no path."""
        return cls(algorithm=algorithm, path=[], total_cost=0.0, metrics=metrics)

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def length_km(self) -> float:
        """Haversine length of the coordinate sequence."""
        return path_length(self.path)

    def coordinates(self) -> Optional[List[Coordinate]]:
        """The path, or None when no path was found."""
        return list(self.path) if self.found else None

    def __len__(self) -> int:
        return len(self.path)

    def __getitem__(self, index: int) -> Coordinate:
        return self.path[index]

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.path)

    def to_dict(self) -> Dict[str, object]:
        """Serialize to plain data for JSON output."""
        return {
            "algorithm": self.algorithm.value,
            "found": self.found,
            "path": [point.to_dict() for point in self.path],
            "total_cost_km": self.total_cost,
            "metrics": self.metrics.to_dict() if self.metrics else None,
        }
