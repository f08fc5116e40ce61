"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from zenkaku.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success(self) -> None:
        result = ServiceResult.success("encode", lines=["２"], count=1)
        assert result.ok is True
        assert result.op == "encode"
        assert result.data == {"lines": ["２"], "count": 1}
        assert result.error is None

    def test_failure(self) -> None:
        result = ServiceResult.failure("encode", "UNKNOWN_SCHEME", "Unknown scheme 'x'", name="x")
        assert result.ok is False
        assert result.data == {}
        assert result.error == ServiceError(
            code="UNKNOWN_SCHEME", message="Unknown scheme 'x'", detail={"name": "x"}
        )

    def test_failed_result_needs_error(self) -> None:
        with pytest.raises(ValidationError, match="exactly when ok is False"):
            ServiceResult(ok=False, op="encode")

    def test_successful_result_rejects_error(self) -> None:
        with pytest.raises(ValidationError):
            ServiceResult(ok=True, op="encode", error=ServiceError(code="E", message="m"))

    def test_json_serialization_keeps_glyphs(self) -> None:
        result = ServiceResult.success("encode", lines=["一二"])
        parsed = json.loads(result.model_dump_json())
        assert parsed["data"]["lines"] == ["一二"]
        assert parsed["error"] is None

    def test_frozen(self) -> None:
        result = ServiceResult.success("encode")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        assert ServiceError(code="E", message="m").detail == {}
