"""
Trailgraph - proximity graphs and shortest paths over walking routes

This package turns a small set of geographic points (for example the polyline
of a suggested route) into a proximity graph and finds paths over it:

- Graph construction with great-circle edge weights
- A* search with selectable heuristics
- Dijkstra search
- Command line access for ad-hoc queries
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Trailgraph requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import ProximityGraph, build_graph
from .core.graph_paths import PathResult, PathSearchEngine, find_path_astar, find_path_dijkstra
from .core.models import Coordinate

__all__ = [
    "Coordinate",
    "PathResult",
    "PathSearchEngine",
    "ProximityGraph",
    "build_graph",
    "find_path_astar",
    "find_path_dijkstra",
]
