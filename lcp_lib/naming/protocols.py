"""
Naming authority protocols consumed by the name generator.

The generator only needs two narrow operations from the outside world: asking
whether a name is taken and claiming a free one. Cloud adapters in
``lcp_lib.cal`` implement both.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ExistenceOracle(Protocol):
    """
    Protocol for checking whether a bucket name is taken.

    Implementations raise OracleUnavailableError (or ConnectionError/TimeoutError)
    for transient failures; the generator retries those on its backoff schedule.
    """

    def exists(self, name: str) -> bool:
        """
        Check whether a bucket name is already in use.

        Args:
        ----
            name: Candidate bucket name

        Returns:
        -------
            True if the name is taken (by anyone), False if it is free

        """
        ...


@runtime_checkable
class ResourceCreator(Protocol):
    """Protocol for claiming a bucket name by creating the bucket."""

    def create(self, name: str) -> bool:
        """
        Create the bucket.

        Args:
        ----
            name: Bucket name that the oracle reported as free

        Returns:
        -------
            True if the bucket was created, False if the name was taken in the meantime

        """
        ...
