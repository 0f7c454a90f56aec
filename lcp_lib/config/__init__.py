"""lcp-lib configuration management."""

from lcp_lib.config.loaders import (
    ConfigurationError,
    load_generator_config,
    load_provider_config,
)
from lcp_lib.config.schemas import (
    ComponentLimits,
    GeneratorConfig,
    NamingStrategy,
    ProviderConfig,
    ProviderCredentials,
    ProviderFamily,
    ProviderImplementation,
    ServiceConfig,
)

__all__ = [
    # Generator configuration
    "ComponentLimits",
    "GeneratorConfig",
    "NamingStrategy",
    "load_generator_config",
    # Cloud provider configuration
    "ConfigurationError",
    "ProviderConfig",
    "ProviderCredentials",
    "ProviderFamily",
    "ProviderImplementation",
    "ServiceConfig",
    "load_provider_config",
]
