"""Core graph functionality."""

from .exceptions import (
    ConfigurationError,
    GraphOperationError,
    NodeNotFoundError,
    ValidationError,
)
from .geo import CONNECTIVITY_THRESHOLD_KM, EARTH_RADIUS_KM, KM_PER_DEGREE, haversine_distance, path_length
from .graph import ProximityGraph, ProximityGraphBuilder, build_graph
from .models import Coordinate, GraphNode, Neighbor

__all__ = [
    "CONNECTIVITY_THRESHOLD_KM",
    "ConfigurationError",
    "Coordinate",
    "EARTH_RADIUS_KM",
    "GraphNode",
    "GraphOperationError",
    "KM_PER_DEGREE",
    "Neighbor",
    "NodeNotFoundError",
    "ProximityGraph",
    "ProximityGraphBuilder",
    "ValidationError",
    "build_graph",
    "haversine_distance",
    "path_length",
]
