"""
AWS Family Cloud Adapter.

This module provides implementations of cloud service protocols for the AWS family:
- AWS (production AWS services)
- LocalStack (local development)
- DigitalOcean Spaces (S3-compatible object storage)
- MinIO (self-hosted S3-compatible storage)

All implementations use boto3 clients configured with appropriate endpoints and
credentials. botocore failures are translated into OracleUnavailableError when they
are transient, so the name generator can retry them.
"""

from typing import Any

import boto3
from botocore.client import Config
from botocore.exceptions import ClientError, ConnectTimeoutError, ReadTimeoutError
from botocore.exceptions import ConnectionError as BotoConnectionError

from lcp_lib.cal.protocols import ObjectStorageProtocol
from lcp_lib.config.schemas import ProviderConfig
from lcp_lib.exceptions import OracleUnavailableError

NOT_FOUND_CODES = {"404", "NoSuchBucket", "NotFound"}
TAKEN_CODES = {"BucketAlreadyExists", "BucketAlreadyOwnedByYou"}
THROTTLING_CODES = {
    "Throttling",
    "ThrottlingException",
    "SlowDown",
    "RequestLimitExceeded",
    "TooManyRequests",
    "ServiceUnavailable",
    "InternalError",
    "RequestTimeout",
    "OperationAborted",
}


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", ""))


def _status_code(error: ClientError) -> int:
    return int(error.response.get("ResponseMetadata", {}).get("HTTPStatusCode", 0) or 0)


def _is_transient(error: ClientError) -> bool:
    return _error_code(error) in THROTTLING_CODES or _status_code(error) >= 500


class AWSObjectStorage:
    """
    AWS S3-compatible object storage implementation.

    Works with AWS S3, LocalStack, DigitalOcean Spaces, MinIO, and any other
    S3-compatible storage provider.
    """

    def __init__(self, client: Any):
        """
        Initialize AWS object storage adapter.

        Args:
        ----
            client: boto3 S3 client

        """
        self._client = client

    def list_buckets(self) -> list[str]:
        """List all buckets."""
        response = self._client.list_buckets()
        return [bucket["Name"] for bucket in response.get("Buckets", [])]

    def bucket_exists(self, bucket_name: str) -> bool:
        """
        Check whether a bucket exists in the global namespace.

        A 403 means the bucket exists but belongs to another account, so it counts
        as taken.
        """
        try:
            self._client.head_bucket(Bucket=bucket_name)
            return True
        except ClientError as e:
            code = _error_code(e)
            status = _status_code(e)
            if code in NOT_FOUND_CODES or status == 404:
                return False
            if code in {"403", "AccessDenied", "Forbidden"} or status == 403:
                return True
            if _is_transient(e):
                raise OracleUnavailableError(f"head_bucket failed for '{bucket_name}': {code or status}") from e
            raise
        except (BotoConnectionError, ConnectTimeoutError, ReadTimeoutError) as e:
            raise OracleUnavailableError(f"Could not reach S3 endpoint: {e}") from e

    def create_bucket(self, bucket_name: str) -> bool:
        """Create a new bucket; returns False if the name is already taken."""
        try:
            # For us-east-1, don't specify LocationConstraint
            region = self._client.meta.region_name
            if region == "us-east-1":
                self._client.create_bucket(Bucket=bucket_name)
            else:
                self._client.create_bucket(
                    Bucket=bucket_name,
                    CreateBucketConfiguration={"LocationConstraint": region},
                )
            return True
        except ClientError as e:
            if _error_code(e) in TAKEN_CODES:
                return False
            if _is_transient(e):
                raise OracleUnavailableError(f"create_bucket failed for '{bucket_name}': {_error_code(e)}") from e
            raise
        except (BotoConnectionError, ConnectTimeoutError, ReadTimeoutError) as e:
            raise OracleUnavailableError(f"Could not reach S3 endpoint: {e}") from e

    def delete_bucket(self, bucket_name: str) -> None:
        """Delete a bucket (must be empty)."""
        self._client.delete_bucket(Bucket=bucket_name)


class AWSFamilyProvider:
    """
    Cloud provider for AWS family (AWS, LocalStack, DigitalOcean, MinIO).

    This provider creates boto3 clients configured for different AWS-compatible
    services based on the provider configuration.
    """

    def __init__(
        self,
        config: ProviderConfig,
        credentials: dict[str, str] | None = None,
    ):
        """
        Initialize AWS family provider.

        Args:
        ----
            config: Provider configuration with endpoints and settings
            credentials: AWS credentials (aws_access_key_id, aws_secret_access_key,
                         optional aws_session_token); omit to use boto3's default chain

        """
        self._config = config
        self._credentials = credentials or {}
        self._clients: dict[str, Any] = {}

    def _create_boto3_client(self, service: str) -> Any:
        """
        Create a boto3 client for the specified service.

        Args:
        ----
            service: Service name (s3)

        Returns:
        -------
            Configured boto3 client

        """
        service_config = self._config.services.get(service)

        client_config = Config(
            signature_version="s3v4" if service == "s3" else None,
            s3={"addressing_style": "path"} if service == "s3" else None,
        )

        kwargs: dict[str, Any] = {
            "service_name": service,
            "region_name": self._config.region,
            "config": client_config,
        }
        for key in ("aws_access_key_id", "aws_secret_access_key", "aws_session_token"):
            if self._credentials.get(key):
                kwargs[key] = self._credentials[key]

        # Add endpoint URL if specified (for LocalStack, DigitalOcean, MinIO)
        if service_config is not None and service_config.endpoint_url:
            kwargs["endpoint_url"] = service_config.endpoint_url

        if not self._config.verify_ssl:
            kwargs["verify"] = False

        return boto3.client(**kwargs)

    def create_object_storage(self) -> ObjectStorageProtocol:
        """Create an object storage client."""
        if "s3" not in self._clients:
            self._clients["s3"] = self._create_boto3_client("s3")

        return AWSObjectStorage(client=self._clients["s3"])

    def close(self) -> None:
        """Close all client connections and cleanup resources."""
        for client in self._clients.values():
            if hasattr(client, "close"):
                client.close()
        self._clients.clear()

    def __enter__(self) -> "AWSFamilyProvider":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit with cleanup."""
        self.close()

    async def __aenter__(self) -> "AWSFamilyProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with cleanup."""
        self.close()
