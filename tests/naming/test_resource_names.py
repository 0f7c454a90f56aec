"""Tests for dependency resource names."""

import re

import pytest

from lcp_lib.naming import DependencyType, generate_dependency_resource_name, generate_resource_name


class TestGenerateResourceName:
    """Test generate_resource_name()."""

    def test_with_service_type(self):
        """Test the service type is appended."""
        assert generate_resource_name("123456", "Platform", "MyApp", "storage") == "lcp-123456-platform-myapp-storage"

    def test_without_service_type(self):
        """Test the name without a service type."""
        assert generate_resource_name("123456", "platform", "myapp") == "lcp-123456-platform-myapp"

    def test_sanitizes_components(self):
        """Test components are sanitized."""
        assert generate_resource_name("acct", "Data Team", "my_app!") == "lcp-acct-data-team-my-app"

    def test_custom_prefix(self):
        """Test a custom prefix."""
        assert generate_resource_name("acct", "team", "app", prefix="acme") == "acme-acct-team-app"


class TestDependencyResourceName:
    """Test dependency resource names."""

    def test_queue(self):
        """Test a queue dependency name."""
        name = generate_dependency_resource_name("123456", "platform", "myapp", DependencyType.QUEUE, "tasks")

        assert name == "lcp-123456-platform-myapp-queue-tasks"

    def test_dependency_name_sanitized(self):
        """Test the dependency name is sanitized."""
        name = generate_dependency_resource_name("acct", "team", "app", DependencyType.SECRETS, "API Keys")

        assert name == "lcp-acct-team-app-secret-api-keys"

    @pytest.mark.parametrize("dependency_type", list(DependencyType))
    def test_every_type_has_service_type(self, dependency_type):
        """Test every dependency type maps to a short service identifier."""
        assert re.fullmatch(r"[a-z]+", dependency_type.service_type)

    def test_lookup_by_value(self):
        """Test dependency types can be created from their string values."""
        assert DependencyType("object_store").service_type == "store"
