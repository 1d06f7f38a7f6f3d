"""Detection and repair of transposed ``[lat, lng]`` coordinate pairs.

Several upstream sources emit positions as ``[lat, lng]`` instead of
GeoJSON's ``[lng, lat]``.  The heuristic here is anchored to the service
region: a pair is only considered swapped when it is *outside* the region
as given and *inside* it once transposed.  Points legitimately outside the
region whose transpose lands inside it are therefore "corrected" too; this
is a known limitation of a single-region heuristic.
"""

from __future__ import annotations

from incident_geo.core.bounds import REGION_BOUNDS, RegionBounds, is_within_region
from incident_geo.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)


def detect_swap(lng: float, lat: float, bounds: RegionBounds = REGION_BOUNDS) -> bool:
    """Return ``True`` if ``(lng, lat)`` looks like a transposed ``(lat, lng)``.

    All three must hold:

    1. ``lng`` is a plausible latitude and ``lat`` a plausible longitude.
    2. The pair as given is not inside the region.
    3. The transposed pair is inside the region.
    """
    structurally_swappable = (
        MIN_LATITUDE <= lng <= MAX_LATITUDE and MIN_LONGITUDE <= lat <= MAX_LONGITUDE
    )
    return (
        structurally_swappable
        and not is_within_region(lat, lng, bounds)
        and is_within_region(lng, lat, bounds)
    )


def fix_swap(pair: tuple[float, float]) -> tuple[float, float]:
    """Exchange the two components of ``pair``."""
    return (pair[1], pair[0])
