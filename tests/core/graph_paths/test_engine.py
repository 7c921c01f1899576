"""Tests for the path search engine and module level path functions."""

import itertools
import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from trailgraph.core.exceptions import ConfigurationError, GraphOperationError
from trailgraph.core.geo import path_length
from trailgraph.core.graph import build_graph
from trailgraph.core.graph_paths import (
    DEFAULT_HEURISTIC,
    HaversineHeuristic,
    OctileHeuristic,
    PathSearchEngine,
    PathType,
    find_path_astar,
    find_path_dijkstra,
)
from trailgraph.core.graph_paths.heuristics import ChebyshevHeuristic, ManhattanHeuristic
from trailgraph.core.models import Coordinate

HEURISTIC_CHOICES = ["manhattan", "euclidean", "octile", "chebyshev", HaversineHeuristic()]


def test_chain_scenario_both_algorithms(chain_graph, chain_coordinates):
    """Test A and D of a 0.3 km chain are joined by A-B-C-D, about 0.9 km long."""
    a, d = chain_coordinates[0], chain_coordinates[3]

    astar_path = find_path_astar(chain_graph, a, d)
    dijkstra_path = find_path_dijkstra(chain_graph, a, d)

    assert astar_path == chain_coordinates
    assert dijkstra_path == chain_coordinates
    assert path_length(astar_path) == pytest.approx(0.9, abs=1e-6)


def test_single_coordinate_scenario():
    """Test a one-point graph returns a one-element path to itself."""
    point = Coordinate(40.7128, -74.0060)
    graph = build_graph([point])
    assert len(graph) == 1 and graph.edge_count == 0

    assert find_path_astar(graph, point, point) == [point]
    assert find_path_dijkstra(graph, point, point) == [point]


def test_empty_graph_returns_none():
    graph = build_graph([])
    assert find_path_astar(graph, (0.0, 0.0), (0.0, 0.0)) is None
    assert find_path_dijkstra(graph, (0.0, 0.0), (0.0, 0.0)) is None


def test_no_path_between_isolated_points():
    """Test points farther than 0.5 km from every other point are unreachable."""
    graph = build_graph([(0.0, 0.0), (0.0, 0.01), (0.01, 0.0)])
    engine = PathSearchEngine(graph)
    assert engine.find_path_astar((0.0, 0.0), (0.0, 0.01)) is None
    assert engine.find_path_dijkstra((0.0, 0.0), (0.0, 0.01)) is None

    result = engine.search((0.0, 0.0), (0.0, 0.01))
    assert not result.found
    assert result.to_dict()["found"] is False


def test_endpoints_are_snapped_nodes(chain_graph, chain_coordinates, north_of):
    """Test the path starts and ends at the nodes nearest the requested points."""
    start = Coordinate(chain_coordinates[0].latitude, chain_coordinates[0].longitude + 0.0005)
    end = north_of(chain_coordinates[0], 0.95)
    engine = PathSearchEngine(chain_graph)

    for path in (engine.find_path_astar(start, end), engine.find_path_dijkstra(start, end)):
        assert path[0] == chain_coordinates[0]
        assert path[-1] == chain_coordinates[3]
        assert path[0] != start and path[-1] != end


def test_default_heuristic_resolves_to_octile(chain_graph):
    """Test the default 'haversine' name selects octile."""
    assert DEFAULT_HEURISTIC == "haversine"
    assert isinstance(PathSearchEngine(chain_graph).heuristic, OctileHeuristic)


def test_set_heuristic(chain_graph):
    engine = PathSearchEngine(chain_graph)
    engine.set_heuristic("Manhattan")
    assert isinstance(engine.heuristic, ManhattanHeuristic)
    engine.set_heuristic("chebyshev")
    assert isinstance(engine.heuristic, ChebyshevHeuristic)
    engine.set_heuristic("haversine")
    assert isinstance(engine.heuristic, OctileHeuristic)


def test_unrecognized_heuristic_behaves_like_octile(random_cluster):
    """Test an unknown heuristic name gives the same results as octile."""
    graph = build_graph(random_cluster)
    octile = PathSearchEngine(graph, heuristic="octile")
    unknown = PathSearchEngine(graph, heuristic="not-a-heuristic")
    assert isinstance(unknown.heuristic, OctileHeuristic)

    for start, end in itertools.combinations(random_cluster[:8], 2):
        expected = octile.search(start, end)
        actual = unknown.search(start, end)
        assert actual.path == expected.path
        assert actual.total_cost == expected.total_cost
        assert actual.metrics.nodes_explored == expected.metrics.nodes_explored


@pytest.mark.parametrize("heuristic", HEURISTIC_CHOICES)
def test_astar_matches_dijkstra_on_corridor(corridor_coordinates, heuristic):
    """Test every heuristic finds the Dijkstra-optimal route along a corridor."""
    engine = PathSearchEngine.from_coordinates(corridor_coordinates, heuristic=heuristic)
    for start, end in itertools.permutations(corridor_coordinates, 2):
        astar = engine.search(start, end, PathType.A_STAR)
        dijkstra = engine.search(start, end, PathType.DIJKSTRA)
        assert astar.found and dijkstra.found
        assert astar.total_cost == pytest.approx(dijkstra.total_cost)
        assert astar.path == dijkstra.path


@pytest.mark.parametrize("heuristic", ["euclidean", "chebyshev", HaversineHeuristic()])
def test_astar_cost_matches_dijkstra_on_random_cluster(random_cluster, heuristic):
    """Test near-admissible heuristics give optimal costs on a random equatorial cluster."""
    engine = PathSearchEngine.from_coordinates(random_cluster, heuristic=heuristic)
    rng = random.Random(99)
    for _ in range(60):
        start, end = rng.sample(random_cluster, 2)
        astar = engine.search(start, end, PathType.A_STAR)
        dijkstra = engine.search(start, end, PathType.DIJKSTRA)
        assert astar.found == dijkstra.found
        assert astar.total_cost == pytest.approx(dijkstra.total_cost, rel=1e-4)


@pytest.mark.parametrize("heuristic", HEURISTIC_CHOICES)
def test_astar_never_beats_dijkstra(random_cluster, heuristic):
    """Test A* finds a path exactly when Dijkstra does and is never cheaper."""
    engine = PathSearchEngine.from_coordinates(random_cluster, heuristic=heuristic)
    rng = random.Random(7)
    for _ in range(40):
        start, end = rng.sample(random_cluster, 2)
        astar = engine.search(start, end, PathType.A_STAR)
        dijkstra = engine.search(start, end, PathType.DIJKSTRA)
        assert astar.found == dijkstra.found
        assert astar.total_cost >= dijkstra.total_cost - 1e-9


def test_path_cost_matches_reported_length(random_cluster):
    """Test the summed edge weights equal the haversine length of the path."""
    engine = PathSearchEngine.from_coordinates(random_cluster)
    for start, end in itertools.combinations(random_cluster[:10], 2):
        for result in engine.compare(start, end).values():
            if result.found:
                assert result.total_cost == pytest.approx(result.length_km)
                assert result.metrics.path_length_km == pytest.approx(result.length_km)


def test_queries_are_idempotent(random_cluster):
    """Test repeating a query on an unchanged graph returns the same path."""
    engine = PathSearchEngine.from_coordinates(random_cluster, heuristic="euclidean")
    start, end = random_cluster[0], random_cluster[-1]
    for algorithm in PathType:
        first = engine.search(start, end, algorithm)
        second = engine.search(start, end, algorithm)
        assert first.path == second.path
        assert first.total_cost == second.total_cost


def test_algorithms_back_to_back_do_not_interfere(chain_graph, chain_coordinates):
    engine = PathSearchEngine(chain_graph)
    a, d = chain_coordinates[0], chain_coordinates[3]
    first = engine.find_path_astar(a, d)
    engine.find_path_dijkstra(d, a)
    assert engine.find_path_astar(a, d) == first


def test_concurrent_searches_share_one_graph(random_cluster):
    """Test parallel searches over one graph match sequential results."""
    engine = PathSearchEngine.from_coordinates(random_cluster, heuristic="chebyshev")
    queries = [
        (start, end, algorithm)
        for start, end in itertools.combinations(random_cluster[:12], 2)
        for algorithm in PathType
    ]
    expected = [engine.search(*query).path for query in queries]

    with ThreadPoolExecutor(max_workers=8) as executor:
        actual = list(executor.map(lambda query: engine.search(*query).path, queries))

    assert actual == expected


def test_compare_runs_both_algorithms(chain_graph, chain_coordinates):
    results = PathSearchEngine(chain_graph).compare(chain_coordinates[0], chain_coordinates[3])
    assert set(results) == {PathType.A_STAR, PathType.DIJKSTRA}
    assert results[PathType.A_STAR].path == results[PathType.DIJKSTRA].path


@pytest.mark.parametrize("name, expected", [("astar", PathType.A_STAR), ("A*", PathType.A_STAR), ("dijkstra", PathType.DIJKSTRA)])
def test_search_accepts_algorithm_names(chain_graph, chain_coordinates, name, expected):
    result = PathSearchEngine(chain_graph).search(chain_coordinates[0], chain_coordinates[1], name)
    assert result.algorithm == expected


def test_search_rejects_unknown_algorithm(chain_graph, chain_coordinates):
    with pytest.raises(GraphOperationError, match="Unknown path finding algorithm"):
        PathSearchEngine(chain_graph).search(chain_coordinates[0], chain_coordinates[1], "bfs")


def test_from_coordinates_builds_graph(chain_coordinates):
    engine = PathSearchEngine.from_coordinates(chain_coordinates, heuristic="euclidean")
    assert len(engine.graph) == 4
    assert engine.graph.edge_count == 3


def test_find_path_accepts_mapping_endpoints(chain_graph, chain_coordinates):
    """Test endpoints in the latitude/longitude mapping form are accepted."""
    path = find_path_astar(chain_graph, chain_coordinates[0].to_dict(), chain_coordinates[2].to_dict())
    assert path == chain_coordinates[:3]


@pytest.mark.parametrize("limit", [0, -1, "64", True])
def test_invalid_memory_limit_rejected_at_construction(chain_graph, limit):
    with pytest.raises(ConfigurationError, match="max_memory_mb"):
        PathSearchEngine(chain_graph, max_memory_mb=limit)


def test_memory_limit_is_passed_to_searches(chain_graph, chain_coordinates):
    engine = PathSearchEngine(chain_graph, max_memory_mb=1024)
    assert engine.search(chain_coordinates[0], chain_coordinates[3]).found
