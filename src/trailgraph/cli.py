"""Command line interface for building route graphs and querying paths.

The CLI supports the following commands:
    - graph: Build a proximity graph and report its size
    - route: Find a path between two coordinates over the graph

Coordinates can be provided either as a JSON string or as a file path prefixed
with '@'. The JSON must be a list of ``{"latitude": .., "longitude": ..}``
objects or ``[lat, lng]`` pairs.

Example Usage:
    python -m trailgraph graph @data/route.json
    python -m trailgraph route @data/route.json --start 51.5,-0.12 --end 51.51,-0.12
    python -m trailgraph route '[[0, 0], [0, 0.003]]' --start 0,0 --end 0,0.003 --algorithm both
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from trailgraph.core.exceptions import GraphOperationError, ValidationError
from trailgraph.core.graph import build_graph
from trailgraph.core.graph_paths import DEFAULT_HEURISTIC, PathSearchEngine, PathType
from trailgraph.core.models import Coordinate
from trailgraph.utils.validation import parse_coordinates

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.

    Returns:
        Any: Parsed JSON data.

    Raises:
        ValidationError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        path = Path(json_str[1:])
        try:
            json_str = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ValidationError(f"Cannot read coordinate file '{path}': {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}")


def parse_point(value: str) -> Coordinate:
    """Parse a ``LAT,LNG`` string into a Coordinate."""
    parts = value.split(",")
    if len(parts) != 2:
        raise ValidationError(f"Expected LAT,LNG but got '{value}'")
    try:
        return Coordinate(float(parts[0]), float(parts[1]))
    except ValueError:
        raise ValidationError(f"Expected numeric LAT,LNG but got '{value}'")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="trailgraph", description="Proximity graph path finding over route coordinates"
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    subparsers = parser.add_subparsers(dest="command", required=True)

    graph_parser = subparsers.add_parser("graph", help="Build a graph and print its size")
    graph_parser.add_argument("coordinates", help="JSON coordinate list or @file")

    route_parser = subparsers.add_parser("route", help="Find a path between two points")
    route_parser.add_argument("coordinates", help="JSON coordinate list or @file")
    route_parser.add_argument("--start", required=True, help="Start point as LAT,LNG")
    route_parser.add_argument("--end", required=True, help="End point as LAT,LNG")
    route_parser.add_argument(
        "--algorithm",
        choices=["astar", "dijkstra", "both"],
        default="astar",
        help="Search algorithm (default: astar)",
    )
    route_parser.add_argument(
        "--heuristic",
        default=DEFAULT_HEURISTIC,
        help="A* heuristic: manhattan, euclidean, octile or chebyshev (others use octile)",
    )
    return parser


def configure_logging(verbosity: int) -> None:
    """Configure root logging from the -v count."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def run_graph(coordinates: List[Coordinate]) -> Dict[str, Any]:
    """Build a graph and summarize it."""
    graph = build_graph(coordinates)
    return {
        "nodes": len(graph),
        "edges": graph.edge_count,
        "threshold_km": graph.threshold_km,
    }


def run_route(
    coordinates: List[Coordinate], start: Coordinate, end: Coordinate, algorithm: str, heuristic: str
) -> Dict[str, Any]:
    """Run one or both searches and collect their results."""
    engine = PathSearchEngine.from_coordinates(coordinates, heuristic=heuristic)
    if algorithm == "both":
        results = engine.compare(start, end)
    else:
        path_type = PathType.from_name(algorithm)
        results = {path_type: engine.search(start, end, path_type)}

    return {
        "heuristic": engine.heuristic.name,
        "results": [result.to_dict() for result in results.values()],
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the command line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        coordinates = parse_coordinates(parse_json_input(args.coordinates))
        if args.command == "graph":
            output = run_graph(coordinates)
        else:
            output = run_route(
                coordinates,
                parse_point(args.start),
                parse_point(args.end),
                args.algorithm,
                args.heuristic,
            )
    except (ValidationError, GraphOperationError) as e:
        logger.error(str(e))
        print(str(e), file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(json.dumps(output, indent=2))
    return EXIT_OK
