"""
LCP Cloud Abstraction Layer (CAL).

This module connects bucket name generation to real or mock object storage:
- Object storage protocol and the naming authority built on it
- Provider adapters (AWS family, in-memory)
- Provider factory and dependency injection

Example:
-------
    >>> from lcp_lib.cal import CloudContainer
    >>> from lcp_lib.config import ProviderConfig
    >>>
    >>> provider_config = ProviderConfig(
    ...     name="memory", provider_family="memory", provider_implementation="memory"
    ... )
    >>> with CloudContainer(provider_config) as container:
    ...     result = container.generate({"account": "prod", "team": "data", "moniker": "config"})

"""

from lcp_lib.cal.adapters import AWSFamilyProvider, AWSObjectStorage, InMemoryObjectStorage, MemoryProvider
from lcp_lib.cal.container import CloudContainer
from lcp_lib.cal.factory import create_cloud_provider
from lcp_lib.cal.ioc import NamingIoCContainer, create_naming_container
from lcp_lib.cal.naming_authority import StorageNamingAuthority
from lcp_lib.cal.protocols import (
    CloudProviderProtocol,
    ExistenceOracle,
    ObjectStorageProtocol,
    ResourceCreator,
)

__all__ = [
    "CloudProviderProtocol",
    "ExistenceOracle",
    "ObjectStorageProtocol",
    "ResourceCreator",
    "AWSFamilyProvider",
    "AWSObjectStorage",
    "InMemoryObjectStorage",
    "MemoryProvider",
    "StorageNamingAuthority",
    "create_cloud_provider",
    "CloudContainer",
    "NamingIoCContainer",
    "create_naming_container",
]
