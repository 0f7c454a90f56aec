"""
LCP Library - Bucket name generation for the LCPlatform.

This library provides collision-aware, grammar-compliant bucket naming:
- Naming: sanitizer, validator, hashed builder, collision resolver and result cache
- Cloud Abstraction Layer (CAL): naming authority over AWS-family or in-memory storage
- Configuration via pydantic models and YAML files
"""

# ============================================================================
# CORE EXPORTS
# ============================================================================

from lcp_lib.config import GeneratorConfig, NamingStrategy
from lcp_lib.exceptions import (
    CollisionExhaustedError,
    GenerationCancelledError,
    InvalidComponentsError,
    InvalidGeneratedNameError,
    LCPConfigurationError,
    LCPError,
    NameGenerationError,
    OracleUnavailableError,
    UnsupportedProviderError,
)
from lcp_lib.naming import (
    BucketNameGenerator,
    CancellationToken,
    GeneratedName,
    NameRequest,
    ResultCache,
    generate_name,
)

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "LCPError",
    "LCPConfigurationError",
    "UnsupportedProviderError",
    "NameGenerationError",
    "InvalidComponentsError",
    "InvalidGeneratedNameError",
    "CollisionExhaustedError",
    "OracleUnavailableError",
    "GenerationCancelledError",
    # Naming
    "BucketNameGenerator",
    "CancellationToken",
    "GeneratedName",
    "GeneratorConfig",
    "NameRequest",
    "NamingStrategy",
    "ResultCache",
    "generate_name",
    # Version
    "__version__",
]
