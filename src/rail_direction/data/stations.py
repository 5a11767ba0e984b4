"""Station code to location lookup built from a station layer query."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from rail_direction.core.errors import StationLookupError
from rail_direction.data.features import StationFeature


@dataclass(frozen=True, slots=True)
class StationPoint:
    code: str
    x: float
    y: float


class StationIndex:
    """Mapping of station code to StationPoint.

    Duplicate codes are not rejected: the record seen last wins.
    """

    def __init__(self, points: Dict[str, StationPoint] | None = None) -> None:
        self._points: Dict[str, StationPoint] = dict(points or {})

    @classmethod
    def build(cls, features: Iterable[StationFeature]) -> "StationIndex":
        points: Dict[str, StationPoint] = {}
        for feature in features:
            code = feature.code
            points[code] = StationPoint(code=code, x=feature.geometry.x, y=feature.geometry.y)
        return cls(points)

    def lookup(self, code: str) -> StationPoint:
        try:
            return self._points[code]
        except KeyError:
            raise StationLookupError(code) from None

    def __contains__(self, code: object) -> bool:
        return code in self._points

    def __len__(self) -> int:
        return len(self._points)
