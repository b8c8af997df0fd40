"""Tests for the FunctionDefinition value type."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from functions_registry import FunctionDefinition, FunctionKind


def handler(request):
    return "ok"


class TestFunctionKind:
    """Tests for the kind enum."""

    def test_values(self):
        """Exactly three kinds exist with their wire names."""
        assert [k.value for k in FunctionKind] == ["http", "event", "cloud_event"]

    def test_from_string(self):
        """Kinds can be built from their string values."""
        assert FunctionKind("cloud_event") is FunctionKind.CLOUD_EVENT

    def test_unknown_kind_rejected(self):
        """Unknown kind strings raise ValueError."""
        with pytest.raises(ValueError):
            FunctionKind("rpc")

    def test_str_is_value(self):
        assert str(FunctionKind.EVENT) == "event"


class TestFunctionDefinition:
    """Tests for construction and immutability."""

    def test_fields(self):
        """Name, kind and body are stored as given."""
        definition = FunctionDefinition(name="greet", kind="http", body=handler)
        assert definition.name == "greet"
        assert definition.kind is FunctionKind.HTTP
        assert definition.body is handler

    def test_lambda_body_kept_by_identity(self):
        """Closures are stored without copying or wrapping."""
        body = lambda data, context: None  # noqa: E731
        definition = FunctionDefinition(name="audit", kind=FunctionKind.EVENT, body=body)
        assert definition.body is body

    def test_frozen(self):
        """Assigning to a field after construction fails."""
        definition = FunctionDefinition(name="greet", kind="http", body=handler)
        with pytest.raises(ValidationError):
            definition.name = "other"
        with pytest.raises(ValidationError):
            definition.kind = FunctionKind.EVENT
        assert definition.name == "greet"
        assert definition.kind is FunctionKind.HTTP

    def test_invalid_kind(self):
        """Construction with an unknown kind fails validation."""
        with pytest.raises(ValidationError):
            FunctionDefinition(name="greet", kind="rpc", body=handler)

    def test_summary_excludes_body(self):
        """summary() exposes name and kind only."""
        definition = FunctionDefinition(name="greet", kind="cloud_event", body=handler)
        assert definition.summary() == {"name": "greet", "kind": "cloud_event"}
