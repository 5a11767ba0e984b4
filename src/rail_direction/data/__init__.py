"""Feature records and the station index."""

from rail_direction.data.features import (
    EditError,
    EditResult,
    LineFeature,
    PointGeometry,
    PolylineGeometry,
    StationFeature,
)
from rail_direction.data.stations import StationIndex, StationPoint

__all__ = [
    "EditError",
    "EditResult",
    "LineFeature",
    "PointGeometry",
    "PolylineGeometry",
    "StationFeature",
    "StationIndex",
    "StationPoint",
]
