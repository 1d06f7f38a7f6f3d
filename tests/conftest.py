"""Shared pytest fixtures for the incident-geo test suite."""

from __future__ import annotations

from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Coordinates inside the Sofia service region
# ---------------------------------------------------------------------------

SOFIA_LNG = 23.32
SOFIA_LAT = 42.7


def make_feature(geometry: Any, properties: Any = None) -> dict[str, Any]:
    """Build a raw GeoJSON Feature dict."""
    feature: dict[str, Any] = {"type": "Feature", "geometry": geometry}
    if properties is not None:
        feature["properties"] = properties
    return feature


def make_collection(*features: Any) -> dict[str, Any]:
    """Build a raw GeoJSON FeatureCollection dict."""
    return {"type": "FeatureCollection", "features": list(features)}


# ---------------------------------------------------------------------------
# Geometry fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def point_geometry() -> dict[str, Any]:
    """Point in central Sofia, correct [lng, lat] order."""
    return {"type": "Point", "coordinates": [SOFIA_LNG, SOFIA_LAT]}


@pytest.fixture()
def swapped_point_geometry() -> dict[str, Any]:
    """Same point emitted as [lat, lng]."""
    return {"type": "Point", "coordinates": [SOFIA_LAT, SOFIA_LNG]}


@pytest.fixture()
def line_string_geometry() -> dict[str, Any]:
    """Three-vertex road segment."""
    return {
        "type": "LineString",
        "coordinates": [[23.32, 42.7], [23.33, 42.71], [23.34, 42.72]],
    }


@pytest.fixture()
def polygon_geometry() -> dict[str, Any]:
    """Closed rectangular outage zone."""
    return {
        "type": "Polygon",
        "coordinates": [
            [
                [23.32, 42.7],
                [23.33, 42.7],
                [23.33, 42.71],
                [23.32, 42.71],
                [23.32, 42.7],
            ]
        ],
    }


@pytest.fixture()
def swapped_polygon_geometry() -> dict[str, Any]:
    """Closed outage zone with every position emitted as [lat, lng]."""
    return {
        "type": "Polygon",
        "coordinates": [
            [
                [42.7, 23.32],
                [42.7, 23.33],
                [42.71, 23.33],
                [42.71, 23.32],
                [42.7, 23.32],
            ]
        ],
    }


@pytest.fixture()
def mixed_collection(
    point_geometry: dict[str, Any],
    line_string_geometry: dict[str, Any],
    polygon_geometry: dict[str, Any],
) -> dict[str, Any]:
    """One feature of each supported geometry type."""
    return make_collection(
        make_feature(point_geometry, {"kind": "pin"}),
        make_feature(line_string_geometry, {"kind": "street"}),
        make_feature(polygon_geometry, {"kind": "zone"}),
    )
