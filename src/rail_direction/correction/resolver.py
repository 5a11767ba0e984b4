"""Decide whether a line segment is stored against its code1 -> code2 direction."""
from __future__ import annotations

from typing import Callable

from rail_direction.core.geodesy import haversine_m
from rail_direction.data.features import LineFeature
from rail_direction.data.stations import StationIndex


DistanceFn = Callable[[float, float, float, float], float]


def should_reverse(segment: LineFeature, index: StationIndex, distance: DistanceFn = haversine_m) -> bool:
    """Return True when the path starts nearer the code2 station than the code1 station.

    Raises StationLookupError if either code is missing from the index. Equal
    distances keep the stored direction.
    """
    start = index.lookup(segment.code1)
    end = index.lookup(segment.code2)
    x, y = segment.geometry.first_position[:2]

    dist_to_start = distance(x, y, start.x, start.y)
    dist_to_end = distance(x, y, end.x, end.y)
    return dist_to_start > dist_to_end
