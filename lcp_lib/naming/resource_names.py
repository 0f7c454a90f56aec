"""
Readable resource names for application dependencies.

Pattern: ``lcp-{account}-{team}-{moniker}[-{service-type}]``. Unlike bucket names
these carry no uniqueness suffix; they are used for queues, secrets, tables and
other per-application resources where the platform owns the namespace.
"""

from enum import Enum

from lcp_lib.naming.sanitizer import sanitize
from lcp_lib.naming.validator import DEFAULT_PREFIX


class DependencyType(str, Enum):
    """Kinds of application dependencies provisioned by the platform."""

    OBJECT_STORE = "object_store"
    QUEUE = "queue"
    SECRETS = "secrets"
    CONFIGURATION = "configuration"
    DATA_STORE = "data_store"
    DOCUMENT_STORE = "document_store"
    EVENT_BUS = "event_bus"
    NOTIFICATION = "notification"
    CACHE = "cache"
    WEB_HOSTING = "web_hosting"
    FUNCTION_HOSTING = "function_hosting"
    BATCH = "batch"
    AUTHENTICATION = "authentication"
    CONTAINER_REPO = "container_repo"

    @property
    def service_type(self) -> str:
        """Short service identifier used in resource names."""
        return _SERVICE_TYPES[self]


_SERVICE_TYPES = {
    DependencyType.OBJECT_STORE: "store",
    DependencyType.QUEUE: "queue",
    DependencyType.SECRETS: "secret",
    DependencyType.CONFIGURATION: "config",
    DependencyType.DATA_STORE: "db",
    DependencyType.DOCUMENT_STORE: "docdb",
    DependencyType.EVENT_BUS: "events",
    DependencyType.NOTIFICATION: "notify",
    DependencyType.CACHE: "cache",
    DependencyType.WEB_HOSTING: "web",
    DependencyType.FUNCTION_HOSTING: "func",
    DependencyType.BATCH: "batch",
    DependencyType.AUTHENTICATION: "auth",
    DependencyType.CONTAINER_REPO: "repo",
}


def generate_resource_name(
    account: str,
    team: str,
    moniker: str,
    service_type: str | None = None,
    prefix: str = DEFAULT_PREFIX,
) -> str:
    """
    Generate a resource name.

    Args:
    ----
        account: Cloud account ID
        team: Team identifier
        moniker: Application short name
        service_type: Optional trailing service identifier
        prefix: Fixed name prefix

    Returns:
    -------
        Lowercase name using only letters, digits and single hyphens

    Example:
    -------
        >>> generate_resource_name("123456", "Platform", "MyApp", "storage")
        'lcp-123456-platform-myapp-storage'

    """
    parts = [prefix, account, team, moniker]
    if service_type is not None:
        parts.append(service_type)
    return "-".join(sanitize(part) for part in parts)


def generate_dependency_resource_name(
    account: str,
    team: str,
    moniker: str,
    dependency_type: DependencyType,
    dependency_name: str,
    prefix: str = DEFAULT_PREFIX,
) -> str:
    """
    Generate the resource name for a named application dependency.

    Example:
    -------
        >>> generate_dependency_resource_name("123456", "platform", "myapp", DependencyType.QUEUE, "tasks")
        'lcp-123456-platform-myapp-queue-tasks'

    """
    service_type = f"{dependency_type.service_type}-{sanitize(dependency_name)}"
    return generate_resource_name(account, team, moniker, service_type, prefix)
