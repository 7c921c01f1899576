"""Path finding algorithms."""

from .astar import AStarPathFinder
from .dijkstra import DijkstraPathFinder

__all__ = ["AStarPathFinder", "DijkstraPathFinder"]
