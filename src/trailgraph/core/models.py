"""
Value types and graph vertices for the route graph.

This module defines:
- Coordinate: immutable (latitude, longitude) pair used at the package boundary
- Neighbor: an adjacency entry (neighbor node, edge weight in km)
- GraphNode: a vertex of the proximity graph

Graph nodes hold only static structure. Per-search bookkeeping (costs and
parents) lives in ``graph_paths.models.SearchRecord`` maps owned by each search.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Sequence, Tuple, Union

from .exceptions import GraphOperationError, ValidationError


def _require_number(name: str, value: Any) -> float:
    """Return value as float, rejecting non-numeric input."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number, got {type(value).__name__}")
    return float(value)


@dataclass(frozen=True)
class Coordinate:
    """
    Geographic coordinate in decimal degrees.

    Ranges are deliberately not checked; out-of-range values simply produce
    degenerate distances.

    Attributes:
        latitude: Latitude in degrees
        longitude: Longitude in degrees

    Example:
        >>> Coordinate.coerce({"latitude": 51.5, "longitude": -0.12})
        Coordinate(latitude=51.5, longitude=-0.12)
    """

    latitude: float
    longitude: float

    def __post_init__(self):
        """Normalize both components to float."""
        object.__setattr__(self, "latitude", _require_number("latitude", self.latitude))
        object.__setattr__(self, "longitude", _require_number("longitude", self.longitude))

    def __iter__(self) -> Iterator[float]:
        """Allow ``lat, lng = coordinate`` unpacking."""
        yield self.latitude
        yield self.longitude

    def to_dict(self) -> Dict[str, float]:
        """Convert to the ``{"latitude", "longitude"}`` mapping used by callers."""
        return {"latitude": self.latitude, "longitude": self.longitude}

    @classmethod
    def coerce(cls, value: "CoordinateLike") -> "Coordinate":
        """
        Build a Coordinate from any supported representation.

        Accepts a Coordinate, a ``(lat, lng)`` sequence, or a mapping keyed by
        ``latitude``/``longitude`` (or ``lat``/``lng``).

        Raises:
            ValidationError: If the value has an unsupported shape
        """
        if isinstance(value, Coordinate):
            return value
        if isinstance(value, Mapping):
            if "latitude" in value and "longitude" in value:
                return cls(value["latitude"], value["longitude"])
            if "lat" in value and "lng" in value:
                return cls(value["lat"], value["lng"])
            raise ValidationError(f"Coordinate mapping missing latitude/longitude: {dict(value)}")
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            if len(value) != 2:
                raise ValidationError(f"Coordinate sequence must have 2 items, got {len(value)}")
            return cls(value[0], value[1])
        raise ValidationError(f"Unsupported coordinate value: {value!r}")


CoordinateLike = Union[Coordinate, Tuple[float, float], Sequence[float], Mapping[str, float]]


@dataclass(frozen=True)
class Neighbor:
    """Adjacency entry: the node on the other end of an edge and its weight in km."""

    node: "GraphNode"
    weight: float


@dataclass(eq=False)
class GraphNode:
    """
    Vertex of the proximity graph.

    Nodes compare and hash by identity, so two nodes at the same position are
    still distinct vertices. ``neighbors`` is filled while the graph is built
    and sealed into a tuple once building finishes.

    Attributes:
        lat: Latitude in degrees
        lng: Longitude in degrees
        index: Position of the node in build order
        neighbors: Ordered adjacency entries
    """

    lat: float
    lng: float
    index: int
    neighbors: Union[List[Neighbor], Tuple[Neighbor, ...]] = field(default_factory=list)

    def add_neighbor(self, node: "GraphNode", weight: float) -> None:
        """Append an adjacency entry; only valid before the node is sealed."""
        if self.sealed:
            raise GraphOperationError(f"Node {self.index} is sealed; edges cannot be added")
        self.neighbors.append(Neighbor(node, weight))

    def seal(self) -> None:
        """Freeze the adjacency list."""
        self.neighbors = tuple(self.neighbors)

    @property
    def sealed(self) -> bool:
        return isinstance(self.neighbors, tuple)

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.lat, self.lng)

    def __repr__(self) -> str:
        return f"GraphNode(index={self.index}, lat={self.lat}, lng={self.lng}, degree={len(self.neighbors)})"
