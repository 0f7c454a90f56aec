"""
Data models for bucket name generation.

- NameRequest: the tenant/ownership/purpose triple that maps to one bucket name
- SanitizedComponents: the grammar-safe rendition of a request
- ValidationOutcome: errors and warnings produced by the validator
- GeneratedName: the public result returned by the generator
- CacheEntry: a cached result held by ResultCache
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StrategyUsed(str, Enum):
    """Strategy tag recorded on a generated name."""

    HASH = "hash"  # deterministic hash suffix, no retries
    RETRY = "retry"
    COLLISION_FREE = "collision-free"  # resolved through the collision resolver


class NameRequest(BaseModel):
    """A request for one bucket name."""

    model_config = ConfigDict(frozen=True)

    account: str
    team: str
    moniker: str
    region: str | None = None

    def cache_key(self, scope: str = "", region: str | None = None) -> str:
        """
        Build a cache key from the raw request fields.

        Args:
        ----
            scope: Identifies the generator settings the result depends on
            region: Effective region, overriding the request's own

        """
        return "\x1f".join([scope, self.account, self.team, self.moniker, region or self.region or ""])


class SanitizedComponents(BaseModel):
    """Request components transformed to the grammar-safe alphabet."""

    model_config = ConfigDict(frozen=True)

    account: str
    team: str
    moniker: str

    def as_list(self) -> list[str]:
        """Return the components in assembly order."""
        return [self.account, self.team, self.moniker]


class ValidationOutcome(BaseModel):
    """Result of validating raw components or an assembled name."""

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """A candidate is accepted only when there are no errors."""
        return not self.errors


class GeneratedName(BaseModel):
    """
    A generated bucket name.

    Attributes
    ----------
        bucket_name: The final bucket name
        strategy_used: Which path produced the name
        created: True if the generator created the bucket through the naming authority
        sanitized: The sanitized components the name was built from
        timestamp: When the name was generated (UTC)
        attempts: Candidate attempts consumed (0 for the pure hash strategy)

    """

    model_config = ConfigDict(frozen=True)

    bucket_name: str = Field(serialization_alias="bucketName")
    strategy_used: StrategyUsed = Field(serialization_alias="strategy")
    created: bool = False
    sanitized: SanitizedComponents
    timestamp: datetime
    attempts: int = Field(default=0, exclude=True)

    def to_response(self) -> dict[str, Any]:
        """Render the external response shape with an RFC 3339 timestamp."""
        return self.model_dump(mode="json", by_alias=True)


class CacheEntry(BaseModel):
    """A cached generation result."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: GeneratedName
    inserted_at: datetime
