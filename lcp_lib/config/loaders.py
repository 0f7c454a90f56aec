"""
Configuration loading functions for bucket naming and cloud providers.

This module provides functions to load and parse configuration files:
- Generator configuration (config/generator.yaml)
- Provider configuration (config/providers/*.yaml)

Features:
- Template variable resolution (e.g., {{environment}})
- Validation via Pydantic models
"""

import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from lcp_lib.config.schemas import GeneratorConfig, ProviderConfig
from lcp_lib.exceptions import LCPConfigurationError


class ConfigurationError(LCPConfigurationError):
    """Raised when configuration loading or validation fails."""

    pass


def _resolve_template_variables(value: str, context: dict[str, Any]) -> str:
    """
    Resolve template variables in a string.

    Template syntax: {{variable.path}}

    Examples:
    --------
        {{environment}} → dev
        {{localstack.port}} → 4566

    Args:
    ----
        value: String potentially containing template variables
        context: Dictionary of available variables

    Returns:
    -------
        String with variables resolved

    Raises:
    ------
        ConfigurationError: If a variable is referenced but not in context

    """
    pattern = r"\{\{([^}]+)\}\}"
    matches = re.findall(pattern, value)

    if not matches:
        return value

    result = value
    for var_path in matches:
        current: Any = context
        try:
            for part in var_path.strip().split("."):
                current = current[part]
        except (KeyError, TypeError) as e:
            raise ConfigurationError(
                f"Template variable '{var_path}' not found in context. Available: {list(context.keys())}"
            ) from e

        result = result.replace(f"{{{{{var_path}}}}}", str(current))

    return result


def _resolve_dict_templates(data: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
    """Recursively resolve template variables in a dictionary."""
    result: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str):
            result[key] = _resolve_template_variables(value, context)
        elif isinstance(value, dict):
            result[key] = _resolve_dict_templates(value, context)
        elif isinstance(value, list):
            result[key] = [_resolve_dict_templates(item, context) if isinstance(item, dict) else item for item in value]
        else:
            result[key] = value
    return result


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return data


def load_generator_config(config_file: Path) -> GeneratorConfig:
    """
    Load bucket name generator configuration from a YAML file.

    The options may sit at the top level or under a ``generator:`` key.

    Args:
    ----
        config_file: Path to the YAML file

    Returns:
    -------
        Validated GeneratorConfig

    Raises:
    ------
        ConfigurationError: If file not found or validation fails

    Example:
    -------
        generator:
          strategy: hybrid
          maxRetries: 3
          cacheSize: 100

    """
    data = _read_yaml(config_file)
    section = data.get("generator", data) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Expected a mapping under 'generator' in {config_file}")

    try:
        return GeneratorConfig(**section)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid generator configuration in {config_file}: {e}") from e


def load_provider_config(
    provider_name: str,
    config_dir: Path,
    context: dict[str, Any] | None = None,
) -> ProviderConfig:
    """
    Load provider configuration from YAML file with template resolution.

    Args:
    ----
        provider_name: Provider name (e.g., 'localstack', 'aws-dev'), the file stem
        config_dir: Directory holding ``<provider_name>.yaml`` files
        context: Template variables (e.g., {"environment": "dev"})

    Returns:
    -------
        Validated ProviderConfig with templates resolved

    Raises:
    ------
        ConfigurationError: If file not found or validation fails

    """
    config_file = config_dir / f"{provider_name}.yaml"

    if not config_file.exists():
        raise ConfigurationError(
            f"Provider configuration not found: {config_file}\n"
            f"Available providers: {sorted(p.stem for p in config_dir.glob('*.yaml'))}"
        )

    raw_data = _read_yaml(config_file)

    try:
        resolved_data = _resolve_dict_templates(raw_data, context or {})
    except ConfigurationError as e:
        raise ConfigurationError(f"Template resolution failed in {config_file}: {e}") from e

    try:
        return ProviderConfig(**resolved_data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid provider configuration in {config_file}: {e}") from e
