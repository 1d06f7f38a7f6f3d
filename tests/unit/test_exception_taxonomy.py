"""Tests for the ingest exception taxonomy.

Validates:
- IngestError attributes and ``to_error_dict()`` keys
- Category classification
- Concrete exceptions carry their stage and code
"""

from __future__ import annotations

from typing import ClassVar

from incident_geo.core.bounds import UnknownTargetError
from incident_geo.core.config import ConfigValidationError
from incident_geo.core.exceptions import IngestError, ValidationError


class TestIngestErrorBase:
    """IngestError base class behavior."""

    def test_default_attributes(self) -> None:
        err = IngestError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""
        assert err.retryable is False
        assert err.context == ""

    def test_custom_attributes(self) -> None:
        err = IngestError(
            "fail",
            stage="crawl",
            code="FETCH_FAILED",
            retryable=True,
            context="toplo-bg",
        )
        assert err.stage == "crawl"
        assert err.code == "FETCH_FAILED"
        assert err.retryable is True
        assert err.context == "toplo-bg"

    def test_str_is_message(self) -> None:
        assert str(IngestError("human-readable error")) == "human-readable error"

    def test_to_error_dict(self) -> None:
        err = IngestError("x", stage="s", code="C", retryable=True, context="ctx")
        assert err.to_error_dict() == {
            "category": "transient",
            "code": "C",
            "stage": "s",
            "message": "x",
            "retryable": True,
            "context": "ctx",
        }

    def test_dynamic_category_from_retryable(self) -> None:
        assert IngestError("x", retryable=True).category == "transient"
        assert IngestError("x", retryable=False).category == "permanent"


class TestValidationErrorCategory:
    """Validation errors are never retryable."""

    def test_not_retryable(self) -> None:
        err = ValidationError("bad input")
        assert err.retryable is False
        assert err.category == "validation"

    EXCEPTION_CLASSES: ClassVar[list[type[IngestError]]] = [
        UnknownTargetError,
        ConfigValidationError,
    ]

    def test_all_concrete_errors_are_validation_errors(self) -> None:
        for cls in self.EXCEPTION_CLASSES:
            assert issubclass(cls, ValidationError)
            assert issubclass(cls, IngestError)


class TestConcreteStageAndCode:
    """Every concrete exception has a default stage and code."""

    def test_unknown_target_error(self) -> None:
        err = UnknownTargetError("Unknown target: xx")
        assert err.stage == "bounds"
        assert err.code == "UNKNOWN_TARGET"

    def test_config_validation_error(self) -> None:
        err = ConfigValidationError("GEO_TARGET", "xx", "must be one of: bg.sofia")
        assert err.stage == "config"
        assert err.code == "CONFIG_VALIDATION_FAILED"
        assert err.key == "GEO_TARGET"
        assert err.value == "xx"
        assert str(err) == "Invalid configuration GEO_TARGET='xx': must be one of: bg.sofia"
        assert err.to_error_dict()["category"] == "validation"
