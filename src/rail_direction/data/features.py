"""Models for Esri JSON feature records exchanged with the feature service."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# z and m slots may be null in Esri JSON; x and y are checked in PolylineGeometry.
Position = List[Optional[float]]
Part = List[Position]


class PointGeometry(BaseModel):
    model_config = ConfigDict(extra="allow")

    x: float
    y: float


class PolylineGeometry(BaseModel):
    """Polyline made of one or more parts, each an ordered list of vertices."""

    model_config = ConfigDict(extra="allow")

    paths: List[Part]

    @field_validator("paths")
    @classmethod
    def _check_paths(cls, paths: List[Part]) -> List[Part]:
        if not paths:
            raise ValueError("polyline has no parts")
        for i, part in enumerate(paths):
            if not part:
                raise ValueError(f"polyline part {i} has no vertices")
            if any(len(position) < 2 or None in position[:2] for position in part):
                raise ValueError(f"polyline part {i} has a vertex without x/y")
        return paths

    @property
    def first_position(self) -> Position:
        return self.paths[0][0]


class StationFeature(BaseModel):
    model_config = ConfigDict(extra="allow")

    attributes: Dict[str, Any] = Field(default_factory=dict)
    geometry: PointGeometry

    @property
    def code(self) -> str:
        return str(self.attributes["code"])


class LineFeature(BaseModel):
    """Rail line segment; code1 -> code2 is the canonical direction."""

    model_config = ConfigDict(extra="allow")

    attributes: Dict[str, Any] = Field(default_factory=dict)
    geometry: PolylineGeometry

    @property
    def code1(self) -> str:
        return str(self.attributes["code1"])

    @property
    def code2(self) -> str:
        return str(self.attributes["code2"])


class EditError(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: Optional[int] = None
    description: Optional[str] = None


class EditResult(BaseModel):
    """Outcome of one item of an applyEdits/updateFeatures call."""

    model_config = ConfigDict(extra="allow")

    objectId: Optional[int] = None
    globalId: Optional[str] = None
    success: bool
    error: Optional[EditError] = None
