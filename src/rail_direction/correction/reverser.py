"""Reverse the vertex order of a line segment."""
from __future__ import annotations

from rail_direction.data.features import LineFeature


def reverse_path(segment: LineFeature) -> LineFeature:
    """Return a copy of segment with every part's vertices in reverse order.

    Part order, attributes and the remaining geometry keys are kept as is.
    """
    paths = [[list(position) for position in reversed(part)] for part in segment.geometry.paths]
    geometry = segment.geometry.model_copy(update={"paths": paths})
    return segment.model_copy(update={"attributes": dict(segment.attributes), "geometry": geometry})
