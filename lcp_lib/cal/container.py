"""
Cloud Naming Container.

This module provides a facade over the naming IoC container that:
- Creates the cloud provider from a ProviderConfig
- Provides lazy initialization of the storage client and name generator
- Handles context management and resource cleanup

Usage:
------
    >>> from lcp_lib.cal.container import CloudContainer
    >>> from lcp_lib.config import GeneratorConfig, load_provider_config
    >>>
    >>> provider_config = load_provider_config("localstack", Path("config/providers"))
    >>> with CloudContainer(provider_config, generator_config=GeneratorConfig()) as container:
    ...     result = container.generate({"account": "prod", "team": "data", "moniker": "config"})
    ...     result.bucket_name

"""

from collections.abc import Mapping
from typing import Any

from dependency_injector import containers

from lcp_lib.cal.factory import create_cloud_provider
from lcp_lib.cal.ioc import create_naming_container
from lcp_lib.cal.protocols import CloudProviderProtocol, ObjectStorageProtocol
from lcp_lib.config.schemas import GeneratorConfig, ProviderConfig, ProviderCredentials
from lcp_lib.naming.cancellation import CancellationToken
from lcp_lib.naming.generator import BucketNameGenerator
from lcp_lib.naming.models import GeneratedName, NameRequest


class CloudContainer:
    """
    Dependency injection container for bucket naming against a cloud provider.

    Features:
    - Lazy initialization (provider created on first use)
    - One provider, storage client and generator per container
    - Automatic cleanup via context managers

    Example:
    -------
        >>> container = CloudContainer(provider_config, credentials)
        >>> storage = container.object_storage()
        >>> generator = container.name_generator()
        >>> container.close()

    """

    def __init__(
        self,
        provider_config: ProviderConfig,
        credentials: ProviderCredentials | dict[str, str] | None = None,
        generator_config: GeneratorConfig | None = None,
    ):
        """
        Initialize the cloud container.

        Args:
        ----
            provider_config: Provider configuration
            credentials: Optional provider credentials
            generator_config: Generator configuration (defaults to hybrid strategy)

        """
        self._provider_config = provider_config
        self._credentials = credentials
        self._generator_config = generator_config or GeneratorConfig()
        self._provider: CloudProviderProtocol | None = None
        self._ioc: containers.DynamicContainer | None = None
        self._closed = False

    def _get_ioc(self) -> containers.DynamicContainer:
        if self._closed:
            raise RuntimeError("Container has been closed")

        if self._ioc is None:
            self._provider = create_cloud_provider(self._provider_config, self._credentials)
            self._ioc = create_naming_container(self._generator_config, self._provider)
        return self._ioc

    def object_storage(self) -> ObjectStorageProtocol:
        """Get the object storage client."""
        return self._get_ioc().object_storage()

    def name_generator(self) -> BucketNameGenerator:
        """Get the bucket name generator (shared result cache)."""
        return self._get_ioc().name_generator()

    def generate(
        self,
        request: NameRequest | Mapping[str, Any],
        token: CancellationToken | None = None,
    ) -> GeneratedName:
        """
        Generate a bucket name using the container's generator.

        Example:
        -------
            >>> container.generate(NameRequest(account="prod", team="data", moniker="config"))

        """
        return self.name_generator().generate(request, token=token)

    def close(self) -> None:
        """
        Close the provider and cleanup resources.

        After calling close(), the container cannot be used anymore.
        """
        if self._closed:
            return

        if self._provider is not None:
            self._provider.close()

        self._provider = None
        self._ioc = None
        self._closed = True

    def __enter__(self) -> "CloudContainer":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit with cleanup."""
        self.close()

    async def __aenter__(self) -> "CloudContainer":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with cleanup."""
        self.close()
