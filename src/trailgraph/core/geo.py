"""
Great-circle helpers shared by the graph builder and the searches.

Edge weights, snapping and reported path lengths all go through
``haversine_distance`` so the builder and the searches never disagree on
distance.
"""

import math
from typing import Iterable, Sequence

# Constants
EARTH_RADIUS_KM = 6371.0
KM_PER_DEGREE = 111.2  # flat equatorial approximation used by grid heuristics
CONNECTIVITY_THRESHOLD_KM = 0.5


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Great-circle distance in kilometers between two points given in degrees.

    Args:
        lat1: Latitude of the first point
        lng1: Longitude of the first point
        lat2: Latitude of the second point
        lng2: Longitude of the second point

    Returns:
        Distance in kilometers on a sphere of radius ``EARTH_RADIUS_KM``
    """
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    # rounding can push a just past 1 for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def path_length(points: Iterable[Sequence[float]]) -> float:
    """
    Sum of haversine distances between consecutive ``(lat, lng)`` points.

    The first point contributes zero; empty and single-point inputs give 0.0.
    """
    total = 0.0
    previous = None
    for lat, lng in points:
        if previous is not None:
            total += haversine_distance(previous[0], previous[1], lat, lng)
        previous = (lat, lng)
    return total
