"""Data models and schemas.

Defines the data structures returned by the validation engine:
- GeoJSON output models: Point / LineString / Polygon, Feature, FeatureCollection
- ValidationResult: Per-call outcome with warnings and errors
"""

from incident_geo.models.geojson import (
    GeoJsonFeature,
    GeoJsonFeatureCollection,
    Geometry,
    LineStringGeometry,
    PointGeometry,
    PolygonGeometry,
    Position,
)
from incident_geo.models.validation_result import ValidationResult

__all__ = [
    "GeoJsonFeature",
    "GeoJsonFeatureCollection",
    "Geometry",
    "LineStringGeometry",
    "PointGeometry",
    "PolygonGeometry",
    "Position",
    "ValidationResult",
]
