"""GeoJSON validation and coordinate-order correction.

Accepts untrusted GeoJSON from the incident collectors and returns a
``ValidationResult`` holding either a clean ``FeatureCollection`` or the
reasons it could not be salvaged.

The engine is split into focused stages:
- **_swap**: detection and repair of transposed ``[lat, lng]`` pairs
- **_geometry**: Point / LineString / Polygon validators and dispatch
- **_collection**: per-feature orchestration and result assembly

Supported geometry: Point, LineString, Polygon.  MultiPoint,
MultiLineString, MultiPolygon and GeometryCollection are rejected.

The engine is pure and stateless: no I/O, no shared mutable state, safe
to call concurrently.  Problems are reported, never raised.
"""

from __future__ import annotations

from incident_geo.core.bounds import is_valid_global_coordinate, is_within_region
from incident_geo.validation._collection import (
    validate_and_fix_features,
    validate_and_fix_geojson,
)
from incident_geo.validation._geometry import (
    GEOMETRY_VALIDATORS,
    GeometryCheck,
    validate_geometry,
    validate_line_string,
    validate_point,
    validate_polygon,
)
from incident_geo.validation._swap import detect_swap, fix_swap

__all__ = [
    "GEOMETRY_VALIDATORS",
    "GeometryCheck",
    "detect_swap",
    "fix_swap",
    "is_valid_global_coordinate",
    "is_within_region",
    "validate_and_fix_features",
    "validate_and_fix_geojson",
    "validate_geometry",
    "validate_line_string",
    "validate_point",
    "validate_polygon",
]
