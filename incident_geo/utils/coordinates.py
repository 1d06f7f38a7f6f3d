"""Coordinate helpers shared by the collectors.

Some sources report the same physical point several times with jitter
in the seventh decimal place.  Rounding to six places (~11 cm) collapses
those near-duplicates before features are stored.
"""

from __future__ import annotations

from incident_geo.core.constants import DEFAULT_COORDINATE_PRECISION
from incident_geo.models.geojson import (
    GeoJsonFeature,
    GeoJsonFeatureCollection,
    Geometry,
    LineStringGeometry,
    PointGeometry,
    Position,
)


def round_coordinate(value: float, decimals: int = DEFAULT_COORDINATE_PRECISION) -> float:
    """Round a latitude or longitude to ``decimals`` places.

    Negative zero is normalised to ``0.0`` so rounded values compare and
    serialise consistently.
    """
    rounded = round(value, decimals)
    return rounded + 0.0


def round_position(position: Position, decimals: int = DEFAULT_COORDINATE_PRECISION) -> Position:
    lng, lat = position
    return (round_coordinate(lng, decimals), round_coordinate(lat, decimals))


def round_geometry(geometry: Geometry, decimals: int = DEFAULT_COORDINATE_PRECISION) -> Geometry:
    """Return a copy of ``geometry`` with every position rounded.

    Equal positions stay equal, so closed polygon rings remain closed.
    """
    if isinstance(geometry, PointGeometry):
        coordinates: object = round_position(geometry.coordinates, decimals)
    elif isinstance(geometry, LineStringGeometry):
        coordinates = [round_position(p, decimals) for p in geometry.coordinates]
    else:
        coordinates = [
            [round_position(p, decimals) for p in ring] for ring in geometry.coordinates
        ]
    return geometry.model_copy(update={"coordinates": coordinates})


def round_collection(
    collection: GeoJsonFeatureCollection, decimals: int = DEFAULT_COORDINATE_PRECISION
) -> GeoJsonFeatureCollection:
    """Round every feature's geometry in ``collection``; properties are untouched."""
    features = [
        GeoJsonFeature(geometry=round_geometry(f.geometry, decimals), properties=f.properties)
        for f in collection.features
    ]
    return collection.model_copy(update={"features": features})
