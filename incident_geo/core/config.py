"""Ingest configuration loaded from environment variables.

All values have defaults matching the single production locality, so a
collector started without any environment still validates against the
Sofia service region.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if the target is not
    registered or the coordinate precision is out of range.  Bad
    configuration is caught at startup rather than on the first record.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from incident_geo.core.bounds import BOUNDS, RegionBounds, get_bounds_for_target
from incident_geo.core.constants import (
    DEFAULT_COORDINATE_PRECISION,
    DEFAULT_TARGET,
    MAX_COORDINATE_PRECISION,
)
from incident_geo.core.exceptions import ValidationError


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class GeoConfig:
    """Immutable geometry-validation configuration.

    Attributes:
        target: Registry key of the service region (``GEO_TARGET``).
        coordinate_precision: Decimal places kept in stored coordinates
            (``GEO_COORDINATE_PRECISION``).
    """

    target: str = DEFAULT_TARGET
    coordinate_precision: int = DEFAULT_COORDINATE_PRECISION

    @property
    def bounds(self) -> RegionBounds:
        """Bounds of the configured service region."""
        return get_bounds_for_target(self.target)

    @classmethod
    def from_env(cls) -> GeoConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If the target is unknown or the
                precision is outside ``0..15``.
            ValueError: If ``GEO_COORDINATE_PRECISION`` is not an integer.
        """
        config = cls(
            target=os.getenv("GEO_TARGET", DEFAULT_TARGET),
            coordinate_precision=int(
                os.getenv("GEO_COORDINATE_PRECISION", str(DEFAULT_COORDINATE_PRECISION))
            ),
        )
        _validate(config)
        return config


def _validate(config: GeoConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.target not in BOUNDS:
        raise ConfigValidationError(
            "GEO_TARGET",
            config.target,
            f"must be one of: {', '.join(sorted(BOUNDS))}",
        )

    if not 0 <= config.coordinate_precision <= MAX_COORDINATE_PRECISION:
        raise ConfigValidationError(
            "GEO_COORDINATE_PRECISION",
            config.coordinate_precision,
            f"must be between 0 and {MAX_COORDINATE_PRECISION} (decimal places)",
        )


@lru_cache(maxsize=1)
def load_config() -> GeoConfig:
    """Return the process-wide configuration, read from the environment once.

    Tests that change the environment call ``load_config.cache_clear()``.
    """
    return GeoConfig.from_env()
