"""
Bucket name generator (strategy orchestration).

Ties sanitizer, validator, builder, collision resolver and result cache together
behind one entry point, ``BucketNameGenerator.generate``. Steps always run in this
order:

1. Result cache lookup (keyed on the raw request, effective region and generator settings)
2. Raw component validation (when ``enable_validation`` is set); no I/O on failure
3. Sanitization
4. Strategy dispatch:
   - ``hash``: deterministic hashed name, no I/O
   - ``retry``: collision resolver against the naming authority
   - ``hybrid``: one existence check on the hashed name, create it if free,
     otherwise fall back to the collision resolver
5. Grammar validation of the final name (always; a failure here is a defect)
6. Result cache insert
"""

import hashlib
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from loguru import logger

from lcp_lib.config.schemas import GeneratorConfig, NamingStrategy
from lcp_lib.exceptions import (
    InvalidComponentsError,
    InvalidGeneratedNameError,
    LCPConfigurationError,
    NameGenerationError,
)
from lcp_lib.naming.builder import build_hashed_name
from lcp_lib.naming.cache import ResultCache
from lcp_lib.naming.cancellation import CancellationToken
from lcp_lib.naming.collision import TIME_SUFFIX_DIGITS, TRANSIENT_ERRORS, BackoffPolicy, CollisionResolver
from lcp_lib.naming.models import GeneratedName, NameRequest, SanitizedComponents, StrategyUsed
from lcp_lib.naming.protocols import ExistenceOracle, ResourceCreator
from lcp_lib.naming.sanitizer import sanitize_components
from lcp_lib.naming.validator import HASH_SUFFIX_BUDGET, validate_components, validate_name

LOGGER = logger.bind(component="lcp_lib.naming.generator")


class BucketNameGenerator:
    """
    Generate grammar-compliant, collision-aware bucket names.

    Example:
    -------
        >>> from lcp_lib.config import GeneratorConfig
        >>> from lcp_lib.naming import BucketNameGenerator, NameRequest
        >>>
        >>> generator = BucketNameGenerator(GeneratorConfig(strategy="hash"))
        >>> result = generator.generate(NameRequest(account="prod", team="data", moniker="config"))
        >>> result.bucket_name.startswith("lcp-prod-data-config-")
        True
        >>>
        >>> # Live strategies need a naming authority
        >>> authority = StorageNamingAuthority(provider.create_object_storage())
        >>> generator = BucketNameGenerator(GeneratorConfig(), oracle=authority, creator=authority)

    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        oracle: ExistenceOracle | None = None,
        creator: ResourceCreator | None = None,
        cache: ResultCache | None = None,
        resolver: CollisionResolver | None = None,
    ):
        """
        Initialize the generator.

        Args:
        ----
            config: Generator configuration (defaults to hybrid strategy)
            oracle: Existence oracle, required by the retry and hybrid strategies
            creator: Bucket creator, required by the retry and hybrid strategies
            cache: Result cache; a private cache of ``config.cache_size`` is created if omitted
            resolver: Collision resolver override (built from config when omitted)

        """
        self._config = config or GeneratorConfig()
        self._oracle = oracle
        self._creator = creator
        self._cache = cache if cache is not None else ResultCache(self._config.cache_size)

        if resolver is None and oracle is not None and creator is not None:
            resolver = CollisionResolver(
                oracle,
                creator,
                max_retries=self._config.max_retries,
                backoff=BackoffPolicy(self._config.base_delay, self._config.max_delay),
                prefix=self._config.prefix,
            )
        self._resolver = resolver
        # every setting can change the result
        self._cache_scope = hashlib.sha256(self._config.model_dump_json().encode("utf-8")).hexdigest()[:16]

    @property
    def config(self) -> GeneratorConfig:
        """Generator configuration."""
        return self._config

    @property
    def cache(self) -> ResultCache:
        """Result cache used by this generator."""
        return self._cache

    def cache_key(self, request: NameRequest) -> str:
        """Cache key for ``request`` under this generator's configuration and effective region."""
        return request.cache_key(self._cache_scope, request.region or self._config.default_region)

    def _suffix_budget(self) -> int:
        if self._config.strategy == NamingStrategy.RETRY:
            return TIME_SUFFIX_DIGITS + 1
        return HASH_SUFFIX_BUDGET

    def _require_authority(self) -> tuple[CollisionResolver, ExistenceOracle, ResourceCreator]:
        if self._resolver is None or self._oracle is None or self._creator is None:
            raise LCPConfigurationError(
                f"Strategy '{self._config.strategy.value}' requires an existence oracle and a creator"
            )
        return self._resolver, self._oracle, self._creator

    def _check_final(self, name: str, attempts: int) -> None:
        outcome = validate_name(name)
        if not outcome.is_valid:
            LOGGER.error(f"Generated name '{name}' violates the naming grammar: {outcome.errors}")
            raise InvalidGeneratedNameError(name, outcome.errors, attempts)
        for warning in outcome.warnings:
            LOGGER.debug(f"Generated name '{name}': {warning}")

    def _hybrid(
        self,
        sanitized: SanitizedComponents,
        region: str | None,
        token: CancellationToken,
    ) -> tuple[str, StrategyUsed, int]:
        resolver, oracle, creator = self._require_authority()
        hashed = build_hashed_name(sanitized, region, self._config.prefix)
        self._check_final(hashed, 0)

        try:
            token.raise_if_cancelled()
            taken = oracle.exists(hashed)
            token.raise_if_cancelled(1)
            if not taken:
                if creator.create(hashed):
                    return hashed, StrategyUsed.HASH, 1
                LOGGER.info(f"Hashed name '{hashed}' was claimed concurrently, resolving with retries")
            else:
                LOGGER.info(f"Hashed name '{hashed}' is taken, resolving with retries")
        except TRANSIENT_ERRORS as e:
            LOGGER.warning(f"Existence check for '{hashed}' failed ({e}), resolving with retries")

        try:
            resolution = resolver.resolve_with_retry(sanitized, token)
        except NameGenerationError as e:
            # count the hashed-name check
            e.attempts += 1
            raise
        return resolution.name, StrategyUsed.COLLISION_FREE, resolution.attempts + 1

    def generate(
        self,
        request: NameRequest | Mapping[str, Any],
        *,
        token: CancellationToken | None = None,
        use_cache: bool = True,
    ) -> GeneratedName:
        """
        Generate a bucket name for ``request``.

        Args:
        ----
            request: NameRequest or a mapping with account, team, moniker and optional region
            token: Optional cancellation token for oracle calls and backoff sleeps
            use_cache: Set to False to bypass the result cache (lookup and insert)

        Returns:
        -------
            GeneratedName

        Raises:
        ------
            InvalidComponentsError: If raw components fail validation (no I/O performed)
            CollisionExhaustedError: If every retry candidate was taken
            OracleUnavailableError: If the naming authority kept failing
            GenerationCancelledError: If the token was cancelled
            InvalidGeneratedNameError: If the final name violates the grammar (defect)
            LCPConfigurationError: If a live strategy has no naming authority

        """
        if not isinstance(request, NameRequest):
            request = NameRequest.model_validate(request)

        config = self._config
        key = self.cache_key(request)

        if use_cache:
            cached = self._cache.get(key)
            if cached is not None:
                LOGGER.debug(f"Cache hit for {request.account}/{request.team}/{request.moniker}")
                return cached

        if config.enable_validation:
            outcome = validate_components(
                request.account,
                request.team,
                request.moniker,
                config.limits,
                prefix=config.prefix,
                suffix_length=self._suffix_budget(),
            )
            if not outcome.is_valid:
                raise InvalidComponentsError(outcome.errors)

        sanitized = sanitize_components(request.account, request.team, request.moniker)
        region = request.region or config.default_region
        token = token or CancellationToken()

        if config.strategy == NamingStrategy.HASH:
            name = build_hashed_name(sanitized, region, config.prefix)
            strategy_used, attempts, created = StrategyUsed.HASH, 0, False
        elif config.strategy == NamingStrategy.RETRY:
            resolver, _, _ = self._require_authority()
            resolution = resolver.resolve_with_retry(sanitized, token)
            name, attempts, created = resolution.name, resolution.attempts, resolution.created
            strategy_used = StrategyUsed.COLLISION_FREE
        else:
            name, strategy_used, attempts = self._hybrid(sanitized, region, token)
            created = True

        self._check_final(name, attempts)

        result = GeneratedName(
            bucket_name=name,
            strategy_used=strategy_used,
            created=created,
            sanitized=sanitized,
            timestamp=datetime.now(timezone.utc),
            attempts=attempts,
        )
        LOGGER.debug(f"Generated '{name}' using {strategy_used.value} after {attempts} attempt(s)")

        if use_cache:
            self._cache.set(key, result)
        return result


def generate_name(
    request: NameRequest | Mapping[str, Any],
    config: GeneratorConfig | None = None,
    oracle: ExistenceOracle | None = None,
    creator: ResourceCreator | None = None,
    token: CancellationToken | None = None,
) -> GeneratedName:
    """
    Generate a single bucket name without a shared cache.

    Convenience wrapper for one-off calls; long-lived callers should keep a
    BucketNameGenerator (and its ResultCache) around instead.
    """
    generator = BucketNameGenerator(config, oracle=oracle, creator=creator, cache=ResultCache(0))
    return generator.generate(request, token=token)
