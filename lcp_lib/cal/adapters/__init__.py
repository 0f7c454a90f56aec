"""
Cloud service adapters for different providers.

This module contains provider-specific implementations of the cloud service protocols:

- aws_family: AWS, LocalStack, DigitalOcean Spaces, MinIO (boto3-based)
- memory: in-process mock storage for tests
"""

from lcp_lib.cal.adapters.aws_family import AWSFamilyProvider, AWSObjectStorage
from lcp_lib.cal.adapters.memory import InMemoryObjectStorage, MemoryProvider

__all__ = [
    "AWSFamilyProvider",
    "AWSObjectStorage",
    "InMemoryObjectStorage",
    "MemoryProvider",
]
