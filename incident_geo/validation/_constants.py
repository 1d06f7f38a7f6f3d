"""Cardinality constants for GeoJSON geometry validation."""

from __future__ import annotations

# A position is exactly [lng, lat]; altitude is not accepted
POSITION_ARITY = 2

MIN_LINESTRING_POSITIONS = 2

# 3 distinct + closing = 4
MIN_RING_POSITIONS = 4

MIN_POLYGON_RINGS = 1
