"""Feature and FeatureCollection validation.

Walks a candidate ``FeatureCollection`` one feature at a time, dispatching
each geometry to its validator and dropping features that cannot be
salvaged.  One bad feature never sinks the rest: the collection is only
rejected when its top-level structure is wrong or when it had features
and none of them survived.  An empty input collection is valid.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from incident_geo.core.bounds import REGION_BOUNDS, RegionBounds
from incident_geo.core.constants import FEATURE, FEATURE_COLLECTION
from incident_geo.models.geojson import GeoJsonFeature, GeoJsonFeatureCollection
from incident_geo.models.validation_result import ValidationResult
from incident_geo.validation._geometry import validate_geometry

logger = logging.getLogger("incident_geo.validation")


def _type_name(data: Mapping[str, Any]) -> str:
    return str(data["type"]) if "type" in data else "unknown"


def _properties_of(feature: Mapping[str, Any]) -> dict[str, Any]:
    """Pass-through property bag; empty when absent or not a string-keyed mapping."""
    properties = feature.get("properties")
    if not isinstance(properties, Mapping) or not all(isinstance(k, str) for k in properties):
        return {}
    return dict(properties)


def validate_and_fix_geojson(
    data: object,
    context: str | None = None,
    *,
    bounds: RegionBounds = REGION_BOUNDS,
) -> ValidationResult:
    """Validate a GeoJSON ``FeatureCollection`` and repair swapped coordinates.

    Args:
        data: Untrusted decoded JSON claiming to be a ``FeatureCollection``.
        context: Source record identifier (e.g. an incident id).  When
            given, every error and warning is prefixed with ``[context] ``.
        bounds: Service region the swap heuristic is anchored to.

    Returns:
        A ``ValidationResult``.  Never raises for bad input.
    """
    prefix = f"[{context}] " if context else ""
    warnings: list[str] = []
    errors: list[str] = []

    if not isinstance(data, Mapping):
        return ValidationResult.invalid([f"{prefix}GeoJSON is not an object"])

    if data.get("type") != FEATURE_COLLECTION:
        return ValidationResult.invalid(
            [f'{prefix}GeoJSON type must be "{FEATURE_COLLECTION}", got "{_type_name(data)}"']
        )

    raw_features = data.get("features")
    if not isinstance(raw_features, list | tuple):
        return ValidationResult.invalid([f"{prefix}GeoJSON features must be an array"])

    features: list[GeoJsonFeature] = []
    for i, feature in enumerate(raw_features):
        if not isinstance(feature, Mapping):
            errors.append(f"{prefix}Feature {i} is not an object")
            continue

        if feature.get("type") != FEATURE:
            errors.append(
                f'{prefix}Feature {i} type must be "{FEATURE}", got "{_type_name(feature)}"'
            )
            continue

        geometry = feature.get("geometry")
        if not geometry:
            errors.append(f"{prefix}Feature {i} missing geometry")
            continue

        check = validate_geometry(geometry, bounds)
        if not check.ok:
            errors.append(f"{prefix}Feature {i} has invalid geometry")
            continue

        warnings.extend(f"{prefix}Feature {i}: {warning}" for warning in check.warnings)
        features.append(
            GeoJsonFeature(geometry=check.geometry, properties=_properties_of(feature))
        )

    if raw_features and not features:
        errors.append(f"{prefix}All features are invalid")
        logger.debug(
            "GeoJSON rejected | context=%s | features=%d | errors=%d",
            context,
            len(raw_features),
            len(errors),
        )
        return ValidationResult.invalid(errors, warnings)

    logger.debug(
        "GeoJSON validated | context=%s | kept=%d/%d | warnings=%d | errors=%d",
        context,
        len(features),
        len(raw_features),
        len(warnings),
        len(errors),
    )
    return ValidationResult(
        is_valid=True,
        collection=GeoJsonFeatureCollection(features=features),
        warnings=tuple(warnings),
        errors=tuple(errors),
        fixed_coordinates=bool(warnings),
    )


def validate_and_fix_features(
    features: object,
    context: str | None = None,
    *,
    bounds: RegionBounds = REGION_BOUNDS,
) -> ValidationResult:
    """Validate a bare array of features by wrapping it in a ``FeatureCollection``.

    Some sources emit ``[{"type": "Feature", ...}, ...]`` with no wrapper.
    """
    return validate_and_fix_geojson(
        {"type": FEATURE_COLLECTION, "features": features},
        context,
        bounds=bounds,
    )
