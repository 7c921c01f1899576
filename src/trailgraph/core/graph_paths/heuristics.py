"""
A* heuristic strategies.

Every heuristic estimates the remaining cost in kilometers between a node and
the goal. The grid-style heuristics convert degrees with the flat equatorial
constant ``KM_PER_DEGREE`` (111.2 km) rather than a latitude-corrected value,
so results are reproducible across implementations.

Names are resolved case-insensitively. ``"haversine"`` and unknown names fall
back to octile; the literal great-circle heuristic exists as
``HaversineHeuristic`` but can only be used by passing an instance.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Dict, Type, Union

from ..exceptions import ConfigurationError
from ..geo import KM_PER_DEGREE, haversine_distance
from ..models import GraphNode
from .types import HeuristicType

logger = logging.getLogger(__name__)

SQRT2_MINUS_ONE = math.sqrt(2) - 1


class Heuristic(ABC):
    """Stateless estimate of the remaining cost to the goal."""

    name: str = ""

    @abstractmethod
    def estimate(self, node: GraphNode, goal: GraphNode) -> float:
        """Estimated cost in km from node to goal; never negative."""

    def __call__(self, node: GraphNode, goal: GraphNode) -> float:
        return self.estimate(node, goal)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ManhattanHeuristic(Heuristic):
    """Sum of absolute coordinate differences."""

    name = HeuristicType.MANHATTAN.value

    def estimate(self, node: GraphNode, goal: GraphNode) -> float:
        return (abs(node.lat - goal.lat) + abs(node.lng - goal.lng)) * KM_PER_DEGREE


class EuclideanHeuristic(Heuristic):
    """Straight-line distance in degree space."""

    name = HeuristicType.EUCLIDEAN.value

    def estimate(self, node: GraphNode, goal: GraphNode) -> float:
        d_lat = node.lat - goal.lat
        d_lng = node.lng - goal.lng
        return math.sqrt(d_lat * d_lat + d_lng * d_lng) * KM_PER_DEGREE


class OctileHeuristic(Heuristic):
    """Grid distance allowing diagonal steps at sqrt(2) cost."""

    name = HeuristicType.OCTILE.value

    def estimate(self, node: GraphNode, goal: GraphNode) -> float:
        d_lat = abs(node.lat - goal.lat)
        d_lng = abs(node.lng - goal.lng)
        return KM_PER_DEGREE * (max(d_lat, d_lng) + SQRT2_MINUS_ONE * min(d_lat, d_lng))


class ChebyshevHeuristic(Heuristic):
    """Largest coordinate difference; diagonal steps cost the same as straight ones."""

    name = HeuristicType.CHEBYSHEV.value

    def estimate(self, node: GraphNode, goal: GraphNode) -> float:
        return KM_PER_DEGREE * max(abs(node.lat - goal.lat), abs(node.lng - goal.lng))


class HaversineHeuristic(Heuristic):
    """Exact great-circle distance. Admissible, since edges use the same metric."""

    name = HeuristicType.HAVERSINE.value

    def estimate(self, node: GraphNode, goal: GraphNode) -> float:
        return haversine_distance(node.lat, node.lng, goal.lat, goal.lng)


# Name -> strategy for the selectable heuristics. "haversine" is intentionally
# absent so that it resolves to the octile fallback.
HEURISTICS: Dict[str, Type[Heuristic]] = {
    HeuristicType.MANHATTAN.value: ManhattanHeuristic,
    HeuristicType.EUCLIDEAN.value: EuclideanHeuristic,
    HeuristicType.OCTILE.value: OctileHeuristic,
    HeuristicType.CHEBYSHEV.value: ChebyshevHeuristic,
}

FALLBACK_HEURISTIC: Type[Heuristic] = OctileHeuristic


def resolve_heuristic(heuristic: Union[str, HeuristicType, Heuristic]) -> Heuristic:
    """
    Turn a heuristic name, enum member or instance into a strategy.

    Args:
        heuristic: Name (case-insensitive), HeuristicType, or Heuristic instance

    Returns:
        The selected strategy; octile for ``haversine`` and unknown names

    Raises:
        ConfigurationError: If the value is not a string, enum or Heuristic
    """
    if isinstance(heuristic, Heuristic):
        return heuristic
    if isinstance(heuristic, HeuristicType):
        heuristic = heuristic.value
    if not isinstance(heuristic, str):
        raise ConfigurationError(
            f"heuristic must be a name or Heuristic instance, got {type(heuristic).__name__}"
        )

    key = heuristic.strip().lower()
    strategy = HEURISTICS.get(key)
    if strategy is None:
        if key != HeuristicType.HAVERSINE.value:
            logger.debug(f"Unknown heuristic '{heuristic}', falling back to octile")
        strategy = FALLBACK_HEURISTIC
    return strategy()
