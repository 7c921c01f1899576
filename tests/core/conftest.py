"""Shared test fixtures."""

import math
import random
from typing import Callable, List

import pytest

from trailgraph.core.geo import EARTH_RADIUS_KM
from trailgraph.core.graph import ProximityGraph, build_graph
from trailgraph.core.models import Coordinate

ORIGIN = Coordinate(51.5007, -0.1246)


def km_north(origin: Coordinate, km: float) -> Coordinate:
    """Point ``km`` kilometers due north of origin (exact along a meridian)."""
    return Coordinate(origin.latitude + math.degrees(km / EARTH_RADIUS_KM), origin.longitude)


@pytest.fixture
def north_of() -> Callable[[Coordinate, float], Coordinate]:
    return km_north


@pytest.fixture
def make_chain() -> Callable[..., List[Coordinate]]:
    """Factory for points spaced evenly along a meridian."""

    def _make_chain(count: int, spacing_km: float, origin: Coordinate = ORIGIN) -> List[Coordinate]:
        return [km_north(origin, i * spacing_km) for i in range(count)]

    return _make_chain


@pytest.fixture
def chain_coordinates(make_chain) -> List[Coordinate]:
    """
    Four points A, B, C, D 0.3 km apart:
    A - B - C - D
    Only consecutive points are within 0.5 km of each other.
    """
    return make_chain(4, 0.3)


@pytest.fixture
def chain_graph(chain_coordinates) -> ProximityGraph:
    return build_graph(chain_coordinates)


@pytest.fixture
def random_cluster() -> List[Coordinate]:
    """Forty seeded random points in a ~2.2 km square at the equator."""
    rng = random.Random(1234)
    return [Coordinate(rng.uniform(0.0, 0.02), rng.uniform(0.0, 0.02)) for _ in range(40)]


@pytest.fixture
def corridor_coordinates(make_chain) -> List[Coordinate]:
    """
    A tree-shaped route: a main corridor of 6 points 0.4 km apart plus a
    dead-end spur branching east from the third point.

    P0 - P1 - P2 - P3 - P4 - P5
               |
               S0 - S1
    """
    corridor = make_chain(6, 0.4)
    spur_origin = corridor[2]
    spur = [
        Coordinate(spur_origin.latitude, spur_origin.longitude + 0.005),
        Coordinate(spur_origin.latitude, spur_origin.longitude + 0.010),
    ]
    return corridor + spur
