"""Tests for configuration loaders."""

import pytest

from lcp_lib.config.loaders import ConfigurationError, load_generator_config, load_provider_config
from lcp_lib.config.schemas import NamingStrategy, ProviderFamily
from lcp_lib.exceptions import LCPConfigurationError


class TestLoadGeneratorConfig:
    """Test load_generator_config()."""

    def test_generator_section(self, tmp_path):
        """Test options under a generator key."""
        config_file = tmp_path / "generator.yaml"
        config_file.write_text("generator:\n  strategy: hash\n  maxRetries: 5\n  prefix: acme\n")

        config = load_generator_config(config_file)

        assert config.strategy == NamingStrategy.HASH
        assert config.max_retries == 5
        assert config.prefix == "acme"

    def test_top_level_options(self, tmp_path):
        """Test options at the top level."""
        config_file = tmp_path / "generator.yaml"
        config_file.write_text("strategy: retry\ncacheSize: 0\nlimits:\n  moniker: 10\n")

        config = load_generator_config(config_file)

        assert config.strategy == NamingStrategy.RETRY
        assert config.cache_size == 0
        assert config.limits.moniker == 10

    def test_empty_file(self, tmp_path):
        """Test an empty file yields defaults."""
        config_file = tmp_path / "generator.yaml"
        config_file.write_text("")

        assert load_generator_config(config_file).strategy == NamingStrategy.HYBRID

    def test_missing_file(self, tmp_path):
        """Test a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_generator_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Test malformed YAML raises ConfigurationError."""
        config_file = tmp_path / "generator.yaml"
        config_file.write_text("strategy: [hash\n")

        with pytest.raises(ConfigurationError, match="Failed to parse"):
            load_generator_config(config_file)

    def test_invalid_values(self, tmp_path):
        """Test schema violations raise ConfigurationError."""
        config_file = tmp_path / "generator.yaml"
        config_file.write_text("strategy: random\n")

        with pytest.raises(LCPConfigurationError, match="Invalid generator configuration"):
            load_generator_config(config_file)


class TestLoadProviderConfig:
    """Test load_provider_config()."""

    def test_template_resolution(self, tmp_path):
        """Test template variables are resolved from the context."""
        (tmp_path / "localstack.yaml").write_text(
            "name: localstack\n"
            "provider_family: aws\n"
            "provider_implementation: localstack\n"
            "services:\n"
            "  s3:\n"
            '    endpoint_url: "http://localhost:{{localstack.port}}"\n'
            "region: us-west-2\n"
            "verify_ssl: false\n"
        )

        config = load_provider_config("localstack", tmp_path, {"localstack": {"port": 4566}})

        assert config.provider_family == ProviderFamily.AWS
        assert config.services["s3"].endpoint_url == "http://localhost:4566"
        assert config.verify_ssl is False

    def test_missing_template_variable(self, tmp_path):
        """Test an unresolved template variable raises ConfigurationError."""
        (tmp_path / "aws.yaml").write_text(
            "name: aws\nprovider_family: aws\nprovider_implementation: aws\nregion: '{{region}}'\n"
        )

        with pytest.raises(ConfigurationError, match="Template resolution failed"):
            load_provider_config("aws", tmp_path)

    def test_missing_provider(self, tmp_path):
        """Test a missing provider lists the available ones."""
        (tmp_path / "memory.yaml").write_text("name: memory\nprovider_family: memory\nprovider_implementation: memory\n")

        with pytest.raises(ConfigurationError, match="memory"):
            load_provider_config("gcp", tmp_path)

    def test_invalid_provider(self, tmp_path):
        """Test schema violations raise ConfigurationError."""
        (tmp_path / "bad.yaml").write_text("name: bad\nprovider_family: memory\nprovider_implementation: aws\n")

        with pytest.raises(ConfigurationError, match="Invalid provider configuration"):
            load_provider_config("bad", tmp_path)
