"""
Cloud Abstraction Layer Protocol Definitions.

This module defines protocols (structural typing) for the naming authority and the
object storage services behind it. Protocols allow any provider implementation that
matches the interface to be used, enabling true provider independence.

Key protocols:
- ExistenceOracle, ResourceCreator: naming authority (re-exported from lcp_lib.naming.protocols)
- ObjectStorageProtocol: bucket-level object storage operations
- CloudProviderProtocol: Factory interface for creating service clients
"""

from typing import Any, Protocol, runtime_checkable

from lcp_lib.naming.protocols import ExistenceOracle, ResourceCreator

__all__ = [
    "ExistenceOracle",
    "ResourceCreator",
    "ObjectStorageProtocol",
    "CloudProviderProtocol",
]


@runtime_checkable
class ObjectStorageProtocol(Protocol):
    """
    Protocol for bucket-level object storage operations.

    Works across all S3-compatible providers (AWS S3, LocalStack, DigitalOcean Spaces,
    MinIO) as well as the in-memory adapter used in tests.
    """

    def list_buckets(self) -> list[str]:
        """
        List all buckets visible to the caller.

        Returns
        -------
            List of bucket names

        """
        ...

    def bucket_exists(self, bucket_name: str) -> bool:
        """
        Check whether a bucket exists anywhere in the provider's namespace.

        Args:
        ----
            bucket_name: Name of the bucket

        Returns:
        -------
            True if the bucket exists (owned by the caller or not)

        Raises:
        ------
            OracleUnavailableError: If the check fails transiently

        """
        ...

    def create_bucket(self, bucket_name: str) -> bool:
        """
        Create a new bucket.

        Args:
        ----
            bucket_name: Name of the bucket to create

        Returns:
        -------
            True if created, False if the name is already taken

        Raises:
        ------
            OracleUnavailableError: If creation fails transiently

        """
        ...

    def delete_bucket(self, bucket_name: str) -> None:
        """
        Delete a bucket (must be empty).

        Args:
        ----
            bucket_name: Name of the bucket to delete

        """
        ...


@runtime_checkable
class CloudProviderProtocol(Protocol):
    """
    Protocol for cloud provider factory.

    Each provider implementation (AWS family, in-memory) provides a factory that
    creates appropriately configured service clients.
    """

    def create_object_storage(self) -> ObjectStorageProtocol:
        """
        Create an object storage client.

        Returns
        -------
            Object storage client implementing ObjectStorageProtocol

        """
        ...

    def close(self) -> None:
        """
        Close all client connections and cleanup resources.

        This should be called when the provider is no longer needed.
        """
        ...

    def __enter__(self) -> "CloudProviderProtocol":
        """Context manager entry."""
        ...

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit with cleanup."""
        ...

    async def __aenter__(self) -> "CloudProviderProtocol":
        """Async context manager entry."""
        ...

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with cleanup."""
        ...
