"""
Naming authority backed by object storage.

Adapts any ObjectStorageProtocol implementation to the ExistenceOracle and
ResourceCreator protocols consumed by the name generator.
"""

from loguru import logger

from lcp_lib.cal.protocols import ObjectStorageProtocol

LOGGER = logger.bind(component="lcp_lib.cal.naming_authority")


class StorageNamingAuthority:
    """
    Existence oracle and bucket creator over an object storage client.

    Example:
    -------
        >>> storage = provider.create_object_storage()
        >>> authority = StorageNamingAuthority(storage)
        >>> generator = BucketNameGenerator(config, oracle=authority, creator=authority)

    """

    def __init__(self, storage: ObjectStorageProtocol):
        self._storage = storage

    @property
    def storage(self) -> ObjectStorageProtocol:
        """Underlying object storage client."""
        return self._storage

    def exists(self, name: str) -> bool:
        """Return True if ``name`` is already taken."""
        return self._storage.bucket_exists(name)

    def create(self, name: str) -> bool:
        """Create bucket ``name``; False means another caller got it first."""
        created = self._storage.create_bucket(name)
        if created:
            LOGGER.info(f"Created bucket '{name}'")
        return created
