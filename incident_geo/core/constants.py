"""Shared constants — single source of truth.

Centralises the service-region target and the GeoJSON type names that
the validators, models and collectors would otherwise spell out inline.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Service region
# ---------------------------------------------------------------------------

DEFAULT_TARGET: str = "bg.sofia"
"""Registry key of the one service region the swap heuristic is calibrated for."""

DEFAULT_COORDINATE_PRECISION: int = 6
"""Decimal places kept when collectors round coordinates (~11 cm)."""

MAX_COORDINATE_PRECISION: int = 15

# ---------------------------------------------------------------------------
# GeoJSON type names (RFC 7946)
# ---------------------------------------------------------------------------

FEATURE_COLLECTION: str = "FeatureCollection"
FEATURE: str = "Feature"

POINT: str = "Point"
LINE_STRING: str = "LineString"
POLYGON: str = "Polygon"

REJECTED_GEOMETRY_TYPES: frozenset[str] = frozenset(
    {"MultiPoint", "MultiLineString", "MultiPolygon", "GeometryCollection"}
)
"""Valid RFC 7946 types that collectors must not emit; always rejected."""

# ---------------------------------------------------------------------------
# WGS 84 coordinate bounds
# ---------------------------------------------------------------------------

MIN_LONGITUDE: float = -180.0
MAX_LONGITUDE: float = 180.0
MIN_LATITUDE: float = -90.0
MAX_LATITUDE: float = 90.0
