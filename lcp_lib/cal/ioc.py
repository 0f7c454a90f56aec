"""
Naming IoC Container.

This module provides dependency injection for the bucket naming stack. The container
wires, in order:

- Generator configuration (dependency)
- Cloud provider (dependency, injectable for testing)
- Object storage client and the naming authority over it
- A singleton ResultCache shared by every generator the container hands out
- The BucketNameGenerator itself

Example:
-------
    ```python
    from lcp_lib.cal.adapters.memory import MemoryProvider
    from lcp_lib.cal.ioc import create_naming_container
    from lcp_lib.config import GeneratorConfig

    container = create_naming_container(GeneratorConfig(), MemoryProvider())
    generator = container.name_generator()
    result = generator.generate({"account": "prod", "team": "data", "moniker": "config"})

    # Override in tests
    container.naming_authority.override(fake_authority)
    ```

"""

from dependency_injector import containers, providers

from lcp_lib.cal.naming_authority import StorageNamingAuthority
from lcp_lib.cal.protocols import CloudProviderProtocol
from lcp_lib.config.schemas import GeneratorConfig
from lcp_lib.naming.cache import ResultCache
from lcp_lib.naming.generator import BucketNameGenerator


class NamingIoCContainer(containers.DeclarativeContainer):
    """
    Inversion of Control (IoC) container for bucket name generation.

    Features:
    - Injectable cloud provider and naming authority (mockable in tests)
    - Singleton result cache sized from ``GeneratorConfig.cache_size``
    - Singleton naming authority and generator (created once per container)
    """

    # Configuration input (dependency)
    config = providers.Dependency(instance_of=GeneratorConfig)

    # Cloud provider - any CloudProviderProtocol implementation
    cloud_provider = providers.Dependency(instance_of=CloudProviderProtocol)

    object_storage = providers.Singleton(
        lambda provider: provider.create_object_storage(),
        cloud_provider,
    )

    naming_authority = providers.Singleton(StorageNamingAuthority, storage=object_storage)

    result_cache = providers.Singleton(ResultCache, capacity=config.provided.cache_size)

    name_generator = providers.Singleton(
        BucketNameGenerator,
        config=config,
        oracle=naming_authority,
        creator=naming_authority,
        cache=result_cache,
    )


def create_naming_container(
    config: GeneratorConfig,
    cloud_provider: CloudProviderProtocol,
) -> containers.DynamicContainer:
    """
    Create a naming IoC container.

    Args:
    ----
        config: Generator configuration
        cloud_provider: Provider whose object storage acts as the naming authority

    Returns:
    -------
        Configured naming IoC container (a DynamicContainer instance of NamingIoCContainer)

    """
    container = NamingIoCContainer()
    container.config.override(config)
    container.cloud_provider.override(cloud_provider)
    return container
