"""Feature service access."""

from rail_direction.service.arcgis import ArcGISFeatureClient

__all__ = ["ArcGISFeatureClient"]
