"""Type definitions for graph path finding."""

from enum import Enum
from typing import List, Optional

from ..models import Coordinate


class PathType(Enum):
    """Enumeration of path finding algorithms."""

    A_STAR = "astar"
    DIJKSTRA = "dijkstra"

    @classmethod
    def from_name(cls, name: str) -> "PathType":
        """Look up an algorithm by value, accepting ``a_star``/``a*`` spellings."""
        key = name.strip().lower().replace("-", "").replace("_", "")
        if key in ("astar", "a*"):
            return cls.A_STAR
        if key == "dijkstra":
            return cls.DIJKSTRA
        raise ValueError(f"Unknown path finding algorithm: {name}")


class HeuristicType(Enum):
    """Names under which A* heuristics can be selected."""

    MANHATTAN = "manhattan"
    EUCLIDEAN = "euclidean"
    OCTILE = "octile"
    CHEBYSHEV = "chebyshev"
    HAVERSINE = "haversine"  # routed to octile, see heuristics.resolve_heuristic


# Type alias for a coordinate path; None means no path was found
CoordinatePath = Optional[List[Coordinate]]
