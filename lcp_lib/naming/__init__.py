"""
Bucket naming subsystem.

Deterministic, collision-aware generation of bucket names that satisfy the S3
naming grammar:
- Sanitizer and validator for components and assembled names
- Hash-suffixed deterministic builder
- Collision resolver with exponential backoff and cancellation
- Thread-safe LRU result cache
- BucketNameGenerator tying the strategies (hash, retry, hybrid) together

Example:
-------
    >>> from lcp_lib.config import GeneratorConfig
    >>> from lcp_lib.naming import BucketNameGenerator, NameRequest, ResultCache
    >>>
    >>> cache = ResultCache(capacity=100)
    >>> generator = BucketNameGenerator(GeneratorConfig(strategy="hash"), cache=cache)
    >>> generator.generate(NameRequest(account="prod", team="data", moniker="config")).bucket_name

"""

from lcp_lib.naming.builder import assemble, build_base_name, build_hashed_name, hash_suffix
from lcp_lib.naming.cache import ResultCache
from lcp_lib.naming.cancellation import CancellationToken
from lcp_lib.naming.collision import BackoffPolicy, CollisionResolver, Resolution
from lcp_lib.naming.generator import BucketNameGenerator, generate_name
from lcp_lib.naming.models import (
    CacheEntry,
    GeneratedName,
    NameRequest,
    SanitizedComponents,
    StrategyUsed,
    ValidationOutcome,
)
from lcp_lib.naming.protocols import ExistenceOracle, ResourceCreator
from lcp_lib.naming.resource_names import (
    DependencyType,
    generate_dependency_resource_name,
    generate_resource_name,
)
from lcp_lib.naming.sanitizer import COMPONENT_RULES, sanitize, sanitize_component, sanitize_components
from lcp_lib.naming.validator import validate_components, validate_name

__all__ = [
    # Models
    "CacheEntry",
    "GeneratedName",
    "NameRequest",
    "SanitizedComponents",
    "StrategyUsed",
    "ValidationOutcome",
    # Protocols
    "ExistenceOracle",
    "ResourceCreator",
    # Sanitizer / validator
    "COMPONENT_RULES",
    "sanitize",
    "sanitize_component",
    "sanitize_components",
    "validate_components",
    "validate_name",
    # Builder
    "assemble",
    "build_base_name",
    "build_hashed_name",
    "hash_suffix",
    # Resolution
    "BackoffPolicy",
    "CancellationToken",
    "CollisionResolver",
    "Resolution",
    # Cache and generator
    "ResultCache",
    "BucketNameGenerator",
    "generate_name",
    # Resource names
    "DependencyType",
    "generate_resource_name",
    "generate_dependency_resource_name",
]
