"""Pydantic models for validated GeoJSON output (RFC 7946 subset).

These models describe what the validation engine *emits*, not what it
accepts: input arrives as untyped JSON and is checked by hand in
``incident_geo.validation``.  Once a geometry has passed those checks it
is materialised as one of exactly three variants, discriminated on
``type``:

- ``PointGeometry``       — a single ``[lng, lat]`` position
- ``LineStringGeometry``  — two or more positions, in path order
- ``PolygonGeometry``     — one or more closed rings of four or more positions

Multi* geometries and ``GeometryCollection`` have no model on purpose; a
collector that emits them gets its feature rejected.

All coordinates are WGS 84 (EPSG:4326), longitude first.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Position = tuple[float, float]
"""A ``(lng, lat)`` coordinate pair."""


class PointGeometry(BaseModel):
    """GeoJSON Point."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Point"] = "Point"
    coordinates: Position


class LineStringGeometry(BaseModel):
    """GeoJSON LineString; position order is the path order."""

    model_config = ConfigDict(frozen=True)

    type: Literal["LineString"] = "LineString"
    coordinates: list[Position]


class PolygonGeometry(BaseModel):
    """GeoJSON Polygon.

    Attributes:
        coordinates: ``[exterior_ring, *interior_rings]``; every ring is
            closed (first position equals last).
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["Polygon"] = "Polygon"
    coordinates: list[list[Position]]


Geometry = Annotated[
    PointGeometry | LineStringGeometry | PolygonGeometry,
    Field(discriminator="type"),
]


class GeoJsonFeature(BaseModel):
    """A validated geometry plus its pass-through property bag."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Feature"] = "Feature"
    geometry: Geometry
    properties: dict[str, Any] = Field(default_factory=dict)


class GeoJsonFeatureCollection(BaseModel):
    """Ordered collection of validated features.

    Feature order is significant to downstream consumers (map pin order)
    and is always the input order.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[GeoJsonFeature] = Field(default_factory=list)

    def to_geojson(self) -> dict[str, Any]:
        """Return a plain, JSON-compatible GeoJSON dict."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        """Serialise to the compact JSON string stored on message documents."""
        return self.model_dump_json()
