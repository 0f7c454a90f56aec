"""Pytest configuration and fixtures for lcp-lib tests."""

import shutil
import subprocess
import time
from collections.abc import Generator
from unittest.mock import MagicMock

import pytest

from lcp_lib.config import GeneratorConfig
from lcp_lib.naming import SanitizedComponents


@pytest.fixture
def sanitized() -> SanitizedComponents:
    """Sanitized components for prod/data/config."""
    return SanitizedComponents(account="prod", team="data", moniker="config")


@pytest.fixture
def oracle() -> MagicMock:
    """Existence oracle that reports every name as free."""
    mock = MagicMock()
    mock.exists.return_value = False
    return mock


@pytest.fixture
def creator() -> MagicMock:
    """Creator that always wins the race."""
    mock = MagicMock()
    mock.create.return_value = True
    return mock


@pytest.fixture
def fast_retry_config() -> GeneratorConfig:
    """Retry strategy without backoff delays."""
    return GeneratorConfig(strategy="retry", max_retries=2, base_delay=0, max_delay=0)


def is_docker_available() -> bool:
    """Check if Docker is available on the system."""
    return shutil.which("docker") is not None


def is_localstack_running() -> bool:
    """Check if localstack is already running on port 4566."""
    try:
        result = subprocess.run(
            ["curl", "-sf", "http://localhost:4566/_localstack/health"],
            capture_output=True,
            timeout=2,
        )
        return result.returncode == 0
    except (subprocess.TimeoutExpired, FileNotFoundError):
        return False


@pytest.fixture(scope="session")
def localstack() -> Generator[None, None, None]:
    """Start localstack container for integration tests.

    Automatically starts localstack if Docker is available and it's not already running.
    Cleans up the container after tests complete.
    """
    if is_localstack_running():
        yield
        return

    if not is_docker_available():
        pytest.skip("Docker not available - skipping integration tests requiring localstack")

    container_name = "lcp-lib-test-localstack"
    try:
        subprocess.run(
            ["docker", "run", "-d", "--rm", "--name", container_name, "-p", "4566:4566", "localstack/localstack:latest"],
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        pytest.skip(f"Failed to start localstack container: {e.stderr}")

    max_wait = 30
    for _ in range(max_wait):
        if is_localstack_running():
            break
        time.sleep(1)
    else:
        subprocess.run(["docker", "stop", container_name], capture_output=True)
        pytest.skip(f"LocalStack failed to start within {max_wait}s")

    try:
        yield
    finally:
        try:
            subprocess.run(["docker", "stop", container_name], capture_output=True, timeout=10)
        except subprocess.TimeoutExpired:
            # Force kill if stop times out
            subprocess.run(["docker", "kill", container_name], capture_output=True)
