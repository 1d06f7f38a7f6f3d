"""Per-type geometry validators: Point, LineString, Polygon.

Each validator is a total function over untyped JSON: it never raises,
never assumes shape, and returns a ``GeometryCheck`` holding either the
normalised geometry model or ``None`` together with the swap warnings it
produced.  Every position goes through the same three steps:

1. Shape check — exactly two numbers (booleans are not numbers).
2. Swap repair — ``detect_swap`` / ``fix_swap``.
3. Global bounds check — one bad position rejects the whole geometry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from incident_geo.core.bounds import REGION_BOUNDS, RegionBounds, is_valid_global_coordinate
from incident_geo.core.constants import LINE_STRING, POINT, POLYGON, REJECTED_GEOMETRY_TYPES
from incident_geo.models.geojson import (
    Geometry,
    LineStringGeometry,
    PointGeometry,
    PolygonGeometry,
    Position,
)
from incident_geo.validation._constants import (
    MIN_LINESTRING_POSITIONS,
    MIN_POLYGON_RINGS,
    MIN_RING_POSITIONS,
    POSITION_ARITY,
)
from incident_geo.validation._swap import detect_swap, fix_swap

logger = logging.getLogger("incident_geo.validation")


@dataclass(frozen=True, slots=True)
class GeometryCheck:
    """Result of validating one geometry.

    Attributes:
        geometry: The normalised geometry, or ``None`` if rejected.
        warnings: Swap corrections applied (unprefixed).
    """

    geometry: Geometry | None = None
    warnings: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.geometry is not None


_REJECTED = GeometryCheck()


# ---------------------------------------------------------------------------
# Position helpers
# ---------------------------------------------------------------------------


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _read_position(value: object) -> Position | None:
    """Return ``(lng, lat)`` if ``value`` is a two-number array, else ``None``."""
    if not isinstance(value, list | tuple) or len(value) != POSITION_ARITY:
        return None
    lng, lat = value
    if not (_is_number(lng) and _is_number(lat)):
        return None
    try:
        return (float(lng), float(lat))
    except OverflowError:
        # int too large for a float; cannot be a coordinate
        return None


def _correct_position(position: Position, bounds: RegionBounds) -> tuple[Position, bool] | None:
    """Swap-repair ``position`` and check global bounds.

    Returns ``(corrected, swapped)`` or ``None`` if out of bounds.
    """
    swapped = detect_swap(*position, bounds)
    if swapped:
        position = fix_swap(position)
    if not is_valid_global_coordinate(*position):
        return None
    return position, swapped


def _coordinates_of(geometry: object) -> object | None:
    if not isinstance(geometry, Mapping) or "coordinates" not in geometry:
        return None
    return geometry["coordinates"]


def _format_number(value: float) -> str:
    # 23.0 -> "23", matching how the number appeared in the source JSON
    return str(int(value)) if value.is_integer() else repr(value)


def _correct_positions(
    raw_positions: list | tuple, bounds: RegionBounds
) -> tuple[list[Position], bool] | None:
    """Correct every position of a line or ring; ``None`` on the first failure."""
    corrected: list[Position] = []
    any_swapped = False
    for raw in raw_positions:
        position = _read_position(raw)
        if position is None:
            return None
        outcome = _correct_position(position, bounds)
        if outcome is None:
            return None
        fixed, swapped = outcome
        any_swapped = any_swapped or swapped
        corrected.append(fixed)
    return corrected, any_swapped


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def validate_point(geometry: object, bounds: RegionBounds = REGION_BOUNDS) -> GeometryCheck:
    """Validate a Point; a swapped pair is repaired with a warning naming both orders."""
    position = _read_position(_coordinates_of(geometry))
    if position is None:
        return _REJECTED

    outcome = _correct_position(position, bounds)
    if outcome is None:
        return _REJECTED
    corrected, swapped = outcome

    warnings: tuple[str, ...] = ()
    if swapped:
        lng, lat = (_format_number(v) for v in position)
        warnings = (f"Point coordinates swapped from [{lng}, {lat}] to [{lat}, {lng}]",)

    return GeometryCheck(PointGeometry(coordinates=corrected), warnings)


def validate_line_string(
    geometry: object, bounds: RegionBounds = REGION_BOUNDS
) -> GeometryCheck:
    """Validate a LineString of two or more positions.

    Swaps are reported as one aggregate warning for the whole line.
    """
    raw = _coordinates_of(geometry)
    if not isinstance(raw, list | tuple) or len(raw) < MIN_LINESTRING_POSITIONS:
        return _REJECTED

    outcome = _correct_positions(raw, bounds)
    if outcome is None:
        return _REJECTED
    positions, swapped = outcome

    warnings: tuple[str, ...] = ()
    if swapped:
        warnings = (f"LineString had {len(positions)} coordinates swapped",)

    return GeometryCheck(LineStringGeometry(coordinates=positions), warnings)


def validate_polygon(geometry: object, bounds: RegionBounds = REGION_BOUNDS) -> GeometryCheck:
    """Validate a Polygon: every ring has four or more positions and is closed.

    Closure is checked after swap repair and uses exact equality.
    """
    raw = _coordinates_of(geometry)
    if not isinstance(raw, list | tuple) or len(raw) < MIN_POLYGON_RINGS:
        return _REJECTED

    rings: list[list[Position]] = []
    any_swapped = False
    for raw_ring in raw:
        if not isinstance(raw_ring, list | tuple) or len(raw_ring) < MIN_RING_POSITIONS:
            return _REJECTED
        outcome = _correct_positions(raw_ring, bounds)
        if outcome is None:
            return _REJECTED
        ring, swapped = outcome
        if ring[0] != ring[-1]:
            logger.debug("Polygon ring not closed | first=%s | last=%s", ring[0], ring[-1])
            return _REJECTED
        any_swapped = any_swapped or swapped
        rings.append(ring)

    warnings: tuple[str, ...] = ()
    if any_swapped:
        warnings = ("Polygon had coordinates swapped",)

    return GeometryCheck(PolygonGeometry(coordinates=rings), warnings)


GeometryValidator = Callable[[object, RegionBounds], GeometryCheck]

GEOMETRY_VALIDATORS: Mapping[str, GeometryValidator] = MappingProxyType(
    {
        POINT: validate_point,
        LINE_STRING: validate_line_string,
        POLYGON: validate_polygon,
    }
)
"""Closed dispatch table; any type not listed here is rejected."""


def validate_geometry(geometry: object, bounds: RegionBounds = REGION_BOUNDS) -> GeometryCheck:
    """Dispatch ``geometry`` to the validator for its ``type``."""
    if not isinstance(geometry, Mapping) or "type" not in geometry:
        return _REJECTED

    geometry_type = geometry["type"]
    if not isinstance(geometry_type, str):
        return _REJECTED

    validator = GEOMETRY_VALIDATORS.get(geometry_type)
    if validator is None:
        if geometry_type in REJECTED_GEOMETRY_TYPES:
            logger.debug("Unsupported geometry type rejected | type=%s", geometry_type)
        else:
            logger.debug("Unknown geometry type | type=%s", geometry_type)
        return _REJECTED

    return validator(geometry, bounds)
