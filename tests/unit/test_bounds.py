"""Tests for the service-region bounds registry and coordinate checks.

Covers:
- Region membership (edges inclusive)
- Global WGS 84 validity, including NaN and infinity
- Registry lookups and unknown-target errors
"""

from __future__ import annotations

import math

import pytest

from incident_geo.core.bounds import (
    BOUNDS,
    REGION_BOUNDS,
    RegionBounds,
    UnknownTargetError,
    get_bbox_for_target,
    get_bounds_for_target,
    get_center_for_target,
    is_valid_global_coordinate,
    is_within_bounds,
    is_within_region,
    validate_target,
)

SOFIA = BOUNDS["bg.sofia"]


class TestIsWithinRegion:
    """Membership in the default service region."""

    def test_central_sofia(self) -> None:
        assert is_within_region(42.7, 23.32) is True
        assert is_within_region(42.698, 23.319) is True

    def test_edges_are_inclusive(self) -> None:
        assert is_within_region(SOFIA.south, SOFIA.west) is True
        assert is_within_region(SOFIA.north, SOFIA.east) is True

    def test_outside(self) -> None:
        assert is_within_region(50.0, 23.32) is False
        assert is_within_region(42.7, 20.0) is False
        assert is_within_region(0, 0) is False

    def test_argument_order_is_lat_lng(self) -> None:
        assert is_within_region(23.32, 42.7) is False

    def test_custom_bounds(self) -> None:
        box = RegionBounds(south=0.0, west=0.0, north=1.0, east=1.0)
        assert is_within_region(0.5, 0.5, box) is True
        assert is_within_region(42.7, 23.32, box) is False


class TestIsValidGlobalCoordinate:
    """WGS 84 range and finiteness checks."""

    @pytest.mark.parametrize(
        ("lng", "lat"),
        [(23.32, 42.7), (0, 0), (-180, -90), (180, 90)],
    )
    def test_accepts_valid(self, lng: float, lat: float) -> None:
        assert is_valid_global_coordinate(lng, lat) is True

    @pytest.mark.parametrize(
        ("lng", "lat"),
        [
            (181, 42.7),
            (200, 42.7),
            (23.32, 91),
            (-181, 0),
            (0, -91),
            (math.nan, 42.7),
            (23.32, math.inf),
            (-math.inf, 0),
        ],
    )
    def test_rejects_invalid(self, lng: float, lat: float) -> None:
        assert is_valid_global_coordinate(lng, lat) is False


class TestRegistry:
    """Target lookups."""

    def test_default_region_is_sofia(self) -> None:
        assert REGION_BOUNDS == SOFIA
        assert SOFIA == RegionBounds(south=42.605, west=23.188, north=42.83, east=23.528)

    def test_get_bounds_for_target(self) -> None:
        assert get_bounds_for_target("bg.sofia") is SOFIA

    def test_get_center_for_target(self) -> None:
        center = get_center_for_target("bg.sofia")
        assert center.lat == 42.6977
        assert center.lng == 23.3219

    def test_bbox_string_order(self) -> None:
        assert get_bbox_for_target("bg.sofia") == "42.605,23.188,42.83,23.528"

    def test_is_within_bounds(self) -> None:
        assert is_within_bounds("bg.sofia", 42.7, 23.32) is True
        assert is_within_bounds("bg.sofia", 51.5, -0.1) is False

    @pytest.mark.parametrize(
        "lookup",
        [get_bounds_for_target, get_center_for_target, get_bbox_for_target, validate_target],
    )
    def test_unknown_target_raises(self, lookup: object) -> None:
        with pytest.raises(UnknownTargetError, match="bg.sofia"):
            lookup("xx.nowhere")  # type: ignore[operator]

    def test_unknown_target_error_fields(self) -> None:
        with pytest.raises(UnknownTargetError) as exc_info:
            validate_target("xx.nowhere")
        err = exc_info.value
        assert err.stage == "bounds"
        assert err.code == "UNKNOWN_TARGET"
        assert err.category == "validation"

    def test_validate_known_target(self) -> None:
        validate_target("bg.sofia")

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            BOUNDS["xx.new"] = SOFIA  # type: ignore[index]

    def test_bounds_are_frozen(self) -> None:
        with pytest.raises(AttributeError):
            SOFIA.north = 0.0  # type: ignore[misc]
