"""Tests for naming data models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from lcp_lib.naming import GeneratedName, NameRequest, SanitizedComponents, StrategyUsed, ValidationOutcome


class TestNameRequest:
    """Test NameRequest."""

    def test_region_optional(self):
        """Test region defaults to None."""
        assert NameRequest(account="prod", team="data", moniker="config").region is None

    def test_frozen(self):
        """Test requests are immutable."""
        request = NameRequest(account="prod", team="data", moniker="config")

        with pytest.raises(ValidationError):
            request.account = "dev"

    def test_cache_key_distinguishes_fields(self):
        """Test field boundaries are preserved in the cache key."""
        first = NameRequest(account="ab", team="c", moniker="d")
        second = NameRequest(account="a", team="bc", moniker="d")

        assert first.cache_key() != second.cache_key()

    def test_cache_key_includes_scope_and_region(self):
        """Test the settings scope and effective region change the cache key."""
        request = NameRequest(account="prod", team="data", moniker="config")

        assert request.cache_key("a") != request.cache_key("b")
        assert request.cache_key("a", "us-west-2") != request.cache_key("a", "eu-west-1")
        assert request.cache_key("a") != request.cache_key("a", "us-west-2")


class TestGeneratedName:
    """Test GeneratedName."""

    def test_to_response(self):
        """Test the external response shape."""
        result = GeneratedName(
            bucket_name="lcp-prod-data-config",
            strategy_used=StrategyUsed.COLLISION_FREE,
            created=True,
            sanitized=SanitizedComponents(account="prod", team="data", moniker="config"),
            timestamp=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            attempts=2,
        )

        response = result.to_response()

        assert response["bucketName"] == "lcp-prod-data-config"
        assert response["strategy"] == "collision-free"
        assert response["created"] is True
        assert response["sanitized"] == {"account": "prod", "team": "data", "moniker": "config"}
        assert response["timestamp"].startswith("2024-01-02T03:04:05")
        assert "attempts" not in response


class TestValidationOutcome:
    """Test ValidationOutcome."""

    def test_valid_with_warnings(self):
        """Test warnings alone do not invalidate."""
        assert ValidationOutcome(warnings=["dots"]).is_valid

    def test_invalid_with_errors(self):
        """Test any error invalidates."""
        assert not ValidationOutcome(errors=["bad"]).is_valid
