"""
Cloud Provider Factory.

This module provides the factory function for creating cloud provider instances
based on configuration. It handles:

- Provider family detection (AWS, memory, GCP, Azure)
- Adapter selection and instantiation
- Credential injection

Usage:
------
    >>> from lcp_lib.cal.factory import create_cloud_provider
    >>> from lcp_lib.config import load_provider_config
    >>>
    >>> provider_config = load_provider_config("localstack", Path("config/providers"))
    >>> provider = create_cloud_provider(provider_config)
    >>> storage = provider.create_object_storage()
    >>> storage.list_buckets()

"""

from loguru import logger

from lcp_lib.cal.adapters.aws_family import AWSFamilyProvider
from lcp_lib.cal.adapters.memory import MemoryProvider
from lcp_lib.cal.protocols import CloudProviderProtocol
from lcp_lib.config.schemas import ProviderConfig, ProviderCredentials, ProviderFamily
from lcp_lib.exceptions import UnsupportedProviderError

LOGGER = logger.bind(component="lcp_lib.cal.factory")


def _credentials_dict(credentials: ProviderCredentials | dict[str, str] | None) -> dict[str, str]:
    if credentials is None:
        return {}
    if isinstance(credentials, ProviderCredentials):
        return credentials.model_dump(exclude_none=True)
    return dict(ProviderCredentials.model_validate(credentials).model_dump(exclude_none=True))


def create_cloud_provider(
    provider_config: ProviderConfig,
    credentials: ProviderCredentials | dict[str, str] | None = None,
) -> CloudProviderProtocol:
    """
    Create a cloud provider instance from configuration.

    Args:
    ----
        provider_config: ProviderConfig instance
        credentials: Optional credentials (model or dictionary); omit for the SDK default chain

    Returns:
    -------
        CloudProviderProtocol: Configured provider instance

    Raises:
    ------
        UnsupportedProviderError: If provider family is not supported
        pydantic.ValidationError: If the credentials dictionary is malformed

    Example:
    -------
        >>> creds = {"aws_access_key_id": "test", "aws_secret_access_key": "test"}
        >>> with create_cloud_provider(provider_config, creds) as provider:
        ...     storage = provider.create_object_storage()
        ...     buckets = storage.list_buckets()

    """
    family = provider_config.provider_family
    LOGGER.debug(f"Creating provider '{provider_config.name}' ({family.value})")

    if family == ProviderFamily.AWS:
        # AWS family includes: LocalStack, AWS, DigitalOcean Spaces, MinIO
        return AWSFamilyProvider(
            config=provider_config,
            credentials=_credentials_dict(credentials),
        )
    elif family == ProviderFamily.MEMORY:
        return MemoryProvider(config=provider_config)
    elif family == ProviderFamily.GCP:
        raise UnsupportedProviderError("GCP provider family not yet implemented")
    elif family == ProviderFamily.AZURE:
        raise UnsupportedProviderError("Azure provider family not yet implemented")
    else:
        raise UnsupportedProviderError(
            f"Unknown provider family: {family}. "
            f"Supported families: AWS (includes LocalStack, DigitalOcean, MinIO), memory"
        )
