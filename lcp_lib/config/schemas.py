"""
Configuration schemas for bucket naming and cloud provider abstraction.

This module defines Pydantic models for:
- Generator configuration (config/generator.yaml)
- Provider configuration (config/providers/*.yaml)
- Provider credentials (passed in by the caller)
"""

import re
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_PREFIX_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
# bucket grammar reserves these prefixes for the provider
_RESERVED_PREFIXES = ("s3", "sthree", "xn--")


class NamingStrategy(str, Enum):
    """Selectable bucket naming strategy."""

    HASH = "hash"  # deterministic hash suffix, no I/O
    RETRY = "retry"  # live existence checks with collision retries
    HYBRID = "hybrid"  # hash first, retry only on collision


class ComponentLimits(BaseModel):
    """Maximum raw length of each name component."""

    model_config = ConfigDict(frozen=True)

    account: Annotated[int, Field(default=20, ge=1, description="Maximum account length")]
    team: Annotated[int, Field(default=20, ge=1, description="Maximum team length")]
    moniker: Annotated[int, Field(default=15, ge=1, description="Maximum moniker length")]


class GeneratorConfig(BaseModel):
    """
    Bucket name generator configuration.

    Accepts both the camelCase option names and snake_case field names.

    Example:
    -------
        strategy: hybrid
        enableValidation: true
        maxRetries: 3
        cacheSize: 100
        prefix: lcp

    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    strategy: Annotated[NamingStrategy, Field(default=NamingStrategy.HYBRID, description="Naming strategy")]
    enable_validation: Annotated[
        bool,
        Field(default=True, alias="enableValidation", description="Pre-check raw components before generation"),
    ]
    max_retries: Annotated[
        int, Field(default=3, ge=0, alias="maxRetries", description="Collision retries after the first attempt")
    ]
    cache_size: Annotated[int, Field(default=100, ge=0, alias="cacheSize", description="Result cache capacity")]
    base_delay: Annotated[
        float, Field(default=0.1, ge=0, alias="baseDelay", description="Backoff base delay in seconds")
    ]
    max_delay: Annotated[float, Field(default=5.0, ge=0, alias="maxDelay", description="Backoff cap in seconds")]
    prefix: Annotated[str, Field(default="lcp", min_length=1, max_length=20, description="Fixed name prefix")]
    default_region: Annotated[
        str | None,
        Field(default=None, alias="defaultRegion", description="Region hashed when a request has none"),
    ]
    limits: Annotated[ComponentLimits, Field(default_factory=ComponentLimits)]

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Validate that the prefix is itself a grammar-safe name fragment."""
        if not _PREFIX_PATTERN.match(v):
            raise ValueError(f"Prefix '{v}' must use lowercase letters, digits and single inner hyphens")
        if v.startswith(_RESERVED_PREFIXES):
            raise ValueError(f"Prefix '{v}' starts with a reserved prefix: {', '.join(_RESERVED_PREFIXES)}")
        if v.replace("-", "").isdigit():
            raise ValueError(f"Prefix '{v}' must contain at least one letter")
        return v

    @model_validator(mode="after")
    def validate_delays(self) -> "GeneratorConfig":
        """Validate that the backoff cap is not below the base delay."""
        if self.max_delay < self.base_delay:
            raise ValueError(f"maxDelay ({self.max_delay}) must be >= baseDelay ({self.base_delay})")
        return self


class ProviderFamily(str, Enum):
    """Cloud provider family - which SDK/client library to use."""

    AWS = "aws"  # boto3 (S3)
    GCP = "gcp"  # google-cloud-* libraries
    AZURE = "azure"  # azure-sdk-for-python
    MEMORY = "memory"  # in-process mock adapter


class ProviderImplementation(str, Enum):
    """Cloud provider implementation - how to configure the SDK."""

    # AWS family
    LOCALSTACK = "localstack"  # LocalStack (local AWS emulation)
    AWS = "aws"  # Real AWS
    DIGITALOCEAN = "digitalocean"  # DigitalOcean Spaces (S3-compatible)
    MINIO = "minio"  # MinIO (on-premises S3-compatible)

    # GCP family
    GCP = "gcp"

    # Azure family
    AZURE = "azure"

    # Memory family
    MEMORY = "memory"


class ServiceConfig(BaseModel):
    """Configuration for a specific cloud service (S3, etc.)."""

    endpoint_url: str | None = Field(
        default=None,
        description="Service endpoint URL. None means use provider defaults (e.g., AWS endpoints). "
        "Can contain template variables like {{environment}}",
    )

    model_config = ConfigDict(extra="allow")  # Allow additional service-specific config


class ProviderConfig(BaseModel):
    """
    Provider configuration (config/providers/*.yaml).

    Examples
    --------
        LocalStack:
            name: localstack
            provider_family: aws
            provider_implementation: localstack
            services:
              s3:
                endpoint_url: "http://localhost:4566"
            region: us-west-2
            verify_ssl: false

        In-memory:
            name: memory
            provider_family: memory
            provider_implementation: memory

    """

    name: Annotated[str, Field(description="Unique provider name (e.g., 'localstack', 'aws-dev')")]
    provider_family: Annotated[ProviderFamily, Field(description="Provider family (AWS, GCP, Azure, memory)")]
    provider_implementation: Annotated[
        ProviderImplementation, Field(description="Specific implementation (localstack, aws, etc.)")
    ]

    services: Annotated[
        dict[str, ServiceConfig],
        Field(default_factory=dict, description="Service-specific configuration (s3)"),
    ]

    region: Annotated[str, Field(default="us-east-1", description="Cloud region (e.g., 'us-west-2')")]
    verify_ssl: Annotated[bool, Field(default=True, description="Verify SSL certificates")]

    description: str | None = None

    @model_validator(mode="after")
    def validate_family_implementation_match(self) -> "ProviderConfig":
        """Validate that implementation matches family."""
        family_implementations = {
            ProviderFamily.AWS: {
                ProviderImplementation.LOCALSTACK,
                ProviderImplementation.AWS,
                ProviderImplementation.DIGITALOCEAN,
                ProviderImplementation.MINIO,
            },
            ProviderFamily.GCP: {ProviderImplementation.GCP},
            ProviderFamily.AZURE: {ProviderImplementation.AZURE},
            ProviderFamily.MEMORY: {ProviderImplementation.MEMORY},
        }

        allowed = family_implementations.get(self.provider_family, set())
        if self.provider_implementation not in allowed:
            raise ValueError(
                f"Provider implementation '{self.provider_implementation.value}' "
                f"not valid for family '{self.provider_family.value}'. "
                f"Allowed: {', '.join(impl.value for impl in allowed)}"
            )

        return self


class ProviderCredentials(BaseModel):
    """
    Credentials for an AWS-family provider.

    When both keys are omitted boto3 falls back to its default credential chain.
    """

    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    aws_session_token: str | None = None  # Optional for temporary credentials

    model_config = ConfigDict(extra="allow")

    @model_validator(mode="after")
    def validate_key_pair(self) -> "ProviderCredentials":
        """Validate that access key and secret are given together."""
        if bool(self.aws_access_key_id) != bool(self.aws_secret_access_key):
            raise ValueError("aws_access_key_id and aws_secret_access_key must be provided together")
        return self
