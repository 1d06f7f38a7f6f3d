"""Service-region bounds registry and coordinate range checks.

Holds the rectangular envelope of every supported locality and answers
the two questions the geometry validators ask of a coordinate pair:

- ``is_within_region(lat, lng)`` — is the point inside the service area?
- ``is_valid_global_coordinate(lng, lat)`` — is it a plausible WGS 84 pair?

Note the argument order: region checks take ``(lat, lng)`` like the
registry, global checks take GeoJSON's ``(lng, lat)``.

The registries are read-only for the lifetime of the process.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType

from incident_geo.core.constants import (
    DEFAULT_TARGET,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from incident_geo.core.exceptions import ValidationError


class UnknownTargetError(ValidationError):
    """Raised when a target id is not present in the bounds registry."""

    default_stage = "bounds"
    default_code = "UNKNOWN_TARGET"


@dataclass(frozen=True, slots=True)
class RegionBounds:
    """Rectangular geographic envelope in degrees (WGS 84).

    Attributes:
        south: Minimum latitude.
        west: Minimum longitude.
        north: Maximum latitude.
        east: Maximum longitude.
    """

    south: float
    west: float
    north: float
    east: float

    def contains(self, lat: float, lng: float) -> bool:
        """Whether ``(lat, lng)`` lies inside the envelope (edges inclusive)."""
        return self.south <= lat <= self.north and self.west <= lng <= self.east

    def to_bbox_string(self) -> str:
        """Return ``"south,west,north,east"`` as expected by Overpass-style APIs."""
        return f"{self.south},{self.west},{self.north},{self.east}"


@dataclass(frozen=True, slots=True)
class RegionCenter:
    """Map center of a service region."""

    lat: float
    lng: float


# ---------------------------------------------------------------------------
# Registries — add new localities here
# ---------------------------------------------------------------------------

BOUNDS: MappingProxyType[str, RegionBounds] = MappingProxyType(
    {
        "bg.sofia": RegionBounds(south=42.605, west=23.188, north=42.83, east=23.528),
    }
)

CENTERS: MappingProxyType[str, RegionCenter] = MappingProxyType(
    {
        "bg.sofia": RegionCenter(lat=42.6977, lng=23.3219),
    }
)


def _valid_targets(registry: MappingProxyType[str, object]) -> str:
    return ", ".join(sorted(registry))


def get_bounds_for_target(target: str) -> RegionBounds:
    """Return the bounds registered for ``target``.

    Raises:
        UnknownTargetError: If the target is not registered.
    """
    bounds = BOUNDS.get(target)
    if bounds is None:
        msg = f"Unknown target: {target}. Valid targets: {_valid_targets(BOUNDS)}"
        raise UnknownTargetError(msg)
    return bounds


def get_center_for_target(target: str) -> RegionCenter:
    """Return the map center registered for ``target``.

    Raises:
        UnknownTargetError: If the target is not registered.
    """
    center = CENTERS.get(target)
    if center is None:
        msg = f"Unknown target: {target}. Valid targets: {_valid_targets(CENTERS)}"
        raise UnknownTargetError(msg)
    return center


def get_bbox_for_target(target: str) -> str:
    """Return the ``"south,west,north,east"`` bbox string for ``target``."""
    return get_bounds_for_target(target).to_bbox_string()


def is_within_bounds(target: str, lat: float, lng: float) -> bool:
    """Whether ``(lat, lng)`` falls inside the bounds of ``target``."""
    return get_bounds_for_target(target).contains(lat, lng)


def validate_target(target: str) -> None:
    """Raise ``UnknownTargetError`` unless ``target`` is registered."""
    if target not in BOUNDS:
        msg = f"Invalid target: {target}. Valid targets: {_valid_targets(BOUNDS)}"
        raise UnknownTargetError(msg)


REGION_BOUNDS: RegionBounds = get_bounds_for_target(DEFAULT_TARGET)
"""Bounds of the default service region."""


# ---------------------------------------------------------------------------
# Coordinate checks
# ---------------------------------------------------------------------------


def is_within_region(lat: float, lng: float, bounds: RegionBounds = REGION_BOUNDS) -> bool:
    """Whether ``(lat, lng)`` lies inside the service region."""
    return bounds.contains(lat, lng)


def is_valid_global_coordinate(lng: float, lat: float) -> bool:
    """Whether ``(lng, lat)`` is a finite pair within WGS 84 ranges."""
    return (
        math.isfinite(lng)
        and math.isfinite(lat)
        and MIN_LONGITUDE <= lng <= MAX_LONGITUDE
        and MIN_LATITUDE <= lat <= MAX_LATITUDE
    )
