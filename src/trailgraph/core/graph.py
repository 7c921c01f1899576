"""
Proximity graph built from an ordered list of geographic coordinates.

The graph is undirected: two nodes are connected when their great-circle
distance is within the connectivity threshold (500 m by default), and the
edge weight is that same distance. Every edge is stored on both endpoints.

The graph is built once and never modified afterwards, which lets any number
of searches read it at the same time.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .exceptions import ConfigurationError, NodeNotFoundError
from .geo import CONNECTIVITY_THRESHOLD_KM, haversine_distance
from .models import Coordinate, CoordinateLike, GraphNode, Neighbor

logger = logging.getLogger(__name__)


class ProximityGraph:
    """
    Immutable, ordered collection of graph nodes.

    Nodes are indexed by build order, which is also the order used to break
    ties when snapping a coordinate to its nearest node.

    Attributes:
        threshold_km: Connectivity threshold the graph was built with
    """

    def __init__(self, nodes: Sequence[GraphNode], threshold_km: float = CONNECTIVITY_THRESHOLD_KM):
        self._nodes: Tuple[GraphNode, ...] = tuple(nodes)
        self._node_ids = frozenset(id(node) for node in self._nodes)
        self.threshold_km = threshold_km
        self._edge_count = sum(len(node.neighbors) for node in self._nodes) // 2

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self._nodes)

    def __getitem__(self, index: int) -> GraphNode:
        return self._nodes[index]

    @property
    def nodes(self) -> Tuple[GraphNode, ...]:
        return self._nodes

    @property
    def edge_count(self) -> int:
        """Number of undirected edges."""
        return self._edge_count

    def has_node(self, node: GraphNode) -> bool:
        """Check node membership by identity."""
        return id(node) in self._node_ids

    def get_neighbors(self, node: GraphNode) -> Tuple[Neighbor, ...]:
        """Get the adjacency entries of a node belonging to this graph."""
        if not self.has_node(node):
            raise NodeNotFoundError(f"Node {node!r} not found in graph")
        return tuple(node.neighbors)

    def get_edge_weight(self, i: int, j: int) -> Optional[float]:
        """Weight of the edge between nodes ``i`` and ``j``, or None if absent."""
        target = self._nodes[j]
        for neighbor in self._nodes[i].neighbors:
            if neighbor.node is target:
                return neighbor.weight
        return None

    def has_edge(self, i: int, j: int) -> bool:
        """Check if nodes ``i`` and ``j`` are connected."""
        return self.get_edge_weight(i, j) is not None

    def nearest_node(self, coordinate: CoordinateLike) -> Optional[GraphNode]:
        """
        Snap a coordinate to the closest node by haversine distance.

        Ties go to the node that comes first in build order.

        Returns:
            The nearest node, or None if the graph is empty
        """
        target = Coordinate.coerce(coordinate)
        best: Optional[GraphNode] = None
        best_distance = float("inf")
        for node in self._nodes:
            distance = haversine_distance(node.lat, node.lng, target.latitude, target.longitude)
            if best is None or distance < best_distance:
                best = node
                best_distance = distance
        return best

    def coordinates(self) -> List[Coordinate]:
        """Node positions in build order."""
        return [node.coordinate for node in self._nodes]


class ProximityGraphBuilder:
    """
    Builds a ProximityGraph by connecting every pair of nearby coordinates.

    Pair enumeration is O(N^2), which is fine for the local point sets
    (route polylines) this is meant for.

    Example:
        >>> graph = ProximityGraphBuilder().build([(51.5, -0.12), (51.501, -0.12)])
        >>> graph.edge_count
        1
    """

    def __init__(self, threshold_km: float = CONNECTIVITY_THRESHOLD_KM):
        if isinstance(threshold_km, bool) or not isinstance(threshold_km, (int, float)):
            raise ConfigurationError("threshold_km must be a number")
        if threshold_km <= 0:
            raise ConfigurationError("threshold_km must be positive")
        self.threshold_km = float(threshold_km)

    def build(self, coordinates: Iterable[CoordinateLike]) -> ProximityGraph:
        """
        Create one node per coordinate and connect all pairs within the threshold.

        Args:
            coordinates: Ordered coordinates; duplicates are kept as separate nodes

        Returns:
            Graph with exactly one node per input coordinate, in input order
        """
        points = [Coordinate.coerce(value) for value in coordinates]
        nodes = [GraphNode(point.latitude, point.longitude, index) for index, point in enumerate(points)]

        edges = 0
        for i in range(len(nodes)):
            for j in range(i + 1, len(nodes)):
                distance = haversine_distance(nodes[i].lat, nodes[i].lng, nodes[j].lat, nodes[j].lng)
                if distance <= self.threshold_km:
                    nodes[i].add_neighbor(nodes[j], distance)
                    nodes[j].add_neighbor(nodes[i], distance)
                    edges += 1

        for node in nodes:
            node.seal()

        logger.debug(f"Built proximity graph: {len(nodes)} nodes, {edges} edges")
        return ProximityGraph(nodes, self.threshold_km)


def build_graph(
    coordinates: Iterable[CoordinateLike], threshold_km: float = CONNECTIVITY_THRESHOLD_KM
) -> ProximityGraph:
    """Build a proximity graph from coordinates."""
    return ProximityGraphBuilder(threshold_km).build(coordinates)
