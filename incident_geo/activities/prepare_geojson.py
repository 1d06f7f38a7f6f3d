"""GeoJSON preparation activity for the incident collectors.

Every crawler ends up with the same job for each scraped record: turn
whatever geometry the source gave it into the JSON string stored on the
message document, or skip the record.  This module does that once:

1. Decode raw JSON text (sources embed GeoJSON as strings in pages and
   API payloads); a bare feature array is wrapped in a collection.
2. Validate and repair with ``validate_and_fix_geojson``.
3. Log the outcome against the record's context id.
4. Round positions to the configured precision and serialise the
   cleaned collection for storage.

Nothing here raises for bad geometry.  A record whose geometry cannot be
salvaged is left out of the dataset, with the reason in the logs only.
"""

from __future__ import annotations

import json
import logging

from incident_geo.core.config import GeoConfig, load_config
from incident_geo.models.validation_result import ValidationResult
from incident_geo.utils.coordinates import round_collection
from incident_geo.validation import validate_and_fix_features, validate_and_fix_geojson

logger = logging.getLogger("incident_geo.activities.prepare_geojson")


def parse_geojson_text(
    text: str | bytes | bytearray,
    context: str | None = None,
    *,
    config: GeoConfig | None = None,
) -> ValidationResult:
    """Decode GeoJSON text and validate it.

    A decoded JSON array is treated as a bare list of features.

    Args:
        text: JSON text as scraped from the source.
        context: Source record identifier for message prefixes.
        config: Selects the service region; defaults to ``load_config()``,
            read from the environment once per process.

    Returns:
        A ``ValidationResult``; undecodable or too deeply nested text
        yields an invalid result.
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError, RecursionError) as exc:
        prefix = f"[{context}] " if context else ""
        return ValidationResult.invalid([f"{prefix}GeoJSON is not valid JSON: {exc}"])

    return _validate_decoded(data, context, config)


def validate_raw_geojson(
    raw: object,
    context: str | None = None,
    *,
    config: GeoConfig | None = None,
) -> ValidationResult:
    """Validate GeoJSON given as text, a bare feature list, or a decoded mapping."""
    if isinstance(raw, str | bytes | bytearray):
        return parse_geojson_text(raw, context, config=config)
    return _validate_decoded(raw, context, config)


def _validate_decoded(
    data: object, context: str | None, config: GeoConfig | None
) -> ValidationResult:
    bounds = (config or load_config()).bounds
    if isinstance(data, list | tuple):
        return validate_and_fix_features(data, context, bounds=bounds)
    return validate_and_fix_geojson(data, context, bounds=bounds)


def prepare_geojson_field(
    raw: object,
    context: str | None = None,
    *,
    config: GeoConfig | None = None,
) -> str | None:
    """Return the stored-document GeoJSON string for ``raw``, or ``None``.

    Invalid geometry is logged with its errors and ``None`` is returned so
    the caller skips the record.  Coordinate fixes are logged as warnings
    but the corrected collection is still returned.  Positions are rounded
    to ``config.coordinate_precision`` decimal places before serialising.
    """
    config = config or load_config()
    result = validate_raw_geojson(raw, context, config=config)

    if not result.is_valid or result.collection is None:
        logger.warning(
            "Invalid GeoJSON | context=%s | errors=%s",
            context,
            list(result.errors),
        )
        return None

    if result.warnings:
        logger.warning(
            "Fixed GeoJSON | context=%s | warnings=%s",
            context,
            list(result.warnings),
        )

    if result.errors:
        logger.info(
            "Dropped features from GeoJSON | context=%s | errors=%s",
            context,
            list(result.errors),
        )

    logger.info(
        "GeoJSON prepared | context=%s | features=%d | fixed=%s",
        context,
        result.feature_count,
        result.fixed_coordinates,
    )
    return round_collection(result.collection, config.coordinate_precision).to_json()
