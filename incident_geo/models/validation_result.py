"""Outcome of a single GeoJSON validation call.

A ``ValidationResult`` is built once per call and never mutated.  It is
the only thing the engine hands back: errors are reported here rather
than raised, so a collector can decide whether to persist, skip, or log
the record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from incident_geo.models.geojson import GeoJsonFeatureCollection


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Validated collection plus the diagnostics gathered on the way.

    Attributes:
        is_valid: Whether ``collection`` may be persisted.
        collection: The cleaned ``FeatureCollection``; ``None`` when invalid.
        warnings: Non-fatal corrections (coordinate swaps), in input order.
        errors: Reasons features, or the whole collection, were rejected.
        fixed_coordinates: ``True`` iff any warning was recorded.
    """

    is_valid: bool
    collection: GeoJsonFeatureCollection | None = None
    warnings: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()
    fixed_coordinates: bool = False

    @classmethod
    def invalid(
        cls,
        errors: list[str] | tuple[str, ...],
        warnings: list[str] | tuple[str, ...] = (),
    ) -> ValidationResult:
        """Build a rejected result carrying ``errors``."""
        return cls(is_valid=False, warnings=tuple(warnings), errors=tuple(errors))

    @property
    def feature_count(self) -> int:
        """Number of features that survived validation."""
        return len(self.collection.features) if self.collection is not None else 0

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-compatible summary for structured logging."""
        return {
            "is_valid": self.is_valid,
            "feature_count": self.feature_count,
            "fixed_coordinates": self.fixed_coordinates,
            "warnings": list(self.warnings),
            "errors": list(self.errors),
        }
