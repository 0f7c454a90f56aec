"""
Collision-aware name resolution.

The resolver walks attempts ``0..max_retries``. Attempt 0 tries the plain base name
``prefix-account-team-moniker``; later attempts append a short clock-derived suffix.
Every candidate is checked against the existence oracle; the first free one is
created through the creator. Collisions and transient oracle failures back off
exponentially (``base_delay * 2**attempt``) between attempts.
"""

import time
from collections.abc import Callable
from typing import NamedTuple

from loguru import logger

from lcp_lib.exceptions import CollisionExhaustedError, InvalidGeneratedNameError, OracleUnavailableError
from lcp_lib.naming.builder import build_base_name
from lcp_lib.naming.cancellation import CancellationToken
from lcp_lib.naming.models import SanitizedComponents
from lcp_lib.naming.protocols import ExistenceOracle, ResourceCreator
from lcp_lib.naming.validator import DEFAULT_PREFIX, validate_name

LOGGER = logger.bind(component="lcp_lib.naming.collision")

TRANSIENT_ERRORS = (OracleUnavailableError, ConnectionError, TimeoutError)

TIME_SUFFIX_DIGITS = 4
MAX_CANDIDATE_REGENERATIONS = 5


class BackoffPolicy(NamedTuple):
    """Exponential backoff between collision attempts (seconds)."""

    base_delay: float = 0.1
    max_delay: float = 5.0

    def delay(self, attempt: int) -> float:
        """Delay to wait after a failed ``attempt``."""
        return min(self.max_delay, self.base_delay * (2**attempt))


class Resolution(NamedTuple):
    """Successful resolution: the created name and how many attempts it took."""

    name: str
    attempts: int
    created: bool = True


class CollisionResolver:
    """
    Find and claim a free bucket name using a live naming authority.

    Not deterministic across calls: suffixes come from a monotonic clock. Use the hash
    strategy when repeatable names are required.

    Example:
    -------
        >>> resolver = CollisionResolver(authority, authority, max_retries=3)
        >>> resolution = resolver.resolve_with_retry(sanitized)
        >>> resolution.name
        'lcp-prod-data-config'

    """

    def __init__(
        self,
        oracle: ExistenceOracle,
        creator: ResourceCreator,
        max_retries: int = 3,
        backoff: BackoffPolicy | None = None,
        prefix: str = DEFAULT_PREFIX,
        sleep: Callable[[float], None] | None = None,
        clock: Callable[[], int] | None = None,
    ):
        """
        Initialize the resolver.

        Args:
        ----
            oracle: Answers whether a candidate is taken
            creator: Creates the bucket for a free candidate
            max_retries: Attempts after the first one (total attempts = max_retries + 1)
            backoff: Backoff policy between attempts
            prefix: Fixed name prefix
            sleep: Sleep function override (tests); defaults to a cancellable sleep on the token
            clock: Clock used for candidate suffixes, defaults to ``time.monotonic_ns``

        """
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self._oracle = oracle
        self._creator = creator
        self._max_retries = max_retries
        self._backoff = backoff or BackoffPolicy()
        self._prefix = prefix
        self._sleep = sleep
        self._clock = clock or time.monotonic_ns

    @property
    def max_retries(self) -> int:
        """Retry budget after the first attempt."""
        return self._max_retries

    def _time_suffix(self) -> str:
        return str(self._clock() % 10**TIME_SUFFIX_DIGITS).zfill(TIME_SUFFIX_DIGITS)

    def candidate(self, sanitized: SanitizedComponents, attempt: int) -> str:
        """
        Build a grammar-valid candidate for ``attempt``.

        Candidates failing validation are regenerated with a fresh suffix for the same
        attempt, so skipping them never consumes a retry.

        Raises:
        ------
            InvalidGeneratedNameError: If no valid candidate could be built

        """
        name = build_base_name(sanitized, self._prefix) if attempt == 0 else None
        errors: list[str] = []
        rejected = ""
        for _ in range(MAX_CANDIDATE_REGENERATIONS + 1):
            if name is None:
                name = build_base_name(sanitized, self._prefix, self._time_suffix())
            outcome = validate_name(name)
            if outcome.is_valid:
                return name
            LOGGER.debug(f"Skipping invalid candidate '{name}': {outcome.errors}")
            errors = outcome.errors
            rejected, name = name, None

        LOGGER.error(f"Could not build a valid candidate for {sanitized.as_list()}")
        raise InvalidGeneratedNameError(rejected, errors, attempts=attempt)

    def _wait(self, attempt: int, token: CancellationToken) -> None:
        delay = self._backoff.delay(attempt)
        LOGGER.debug(f"Backing off {delay:.3f}s after attempt {attempt}")
        if self._sleep is not None:
            self._sleep(delay)
            token.raise_if_cancelled(attempt + 1)
        else:
            token.sleep(delay, attempt + 1)

    def _claim(self, candidate: str, attempt: int, token: CancellationToken) -> bool:
        token.raise_if_cancelled(attempt)
        taken = self._oracle.exists(candidate)
        token.raise_if_cancelled(attempt + 1)
        if taken:
            LOGGER.debug(f"Candidate '{candidate}' is taken (attempt {attempt})")
            return False

        created = self._creator.create(candidate)
        if not created:
            LOGGER.debug(f"Candidate '{candidate}' was claimed concurrently (attempt {attempt})")
        return created

    def resolve_with_retry(
        self,
        sanitized: SanitizedComponents,
        token: CancellationToken | None = None,
    ) -> Resolution:
        """
        Resolve and create a free bucket name.

        Args:
        ----
            sanitized: Sanitized request components
            token: Optional cancellation token (checked around every oracle call and sleep)

        Returns:
        -------
            Resolution with the created name and the number of attempts made

        Raises:
        ------
            CollisionExhaustedError: If all ``max_retries + 1`` candidates were taken
            OracleUnavailableError: If the oracle kept failing until the budget ran out
            GenerationCancelledError: If the token was cancelled mid-resolution
            InvalidGeneratedNameError: If no grammar-valid candidate could be built

        """
        token = token or CancellationToken()
        candidate: str | None = None
        last_error: Exception | None = None

        for attempt in range(self._max_retries + 1):
            candidate = self.candidate(sanitized, attempt)
            try:
                if self._claim(candidate, attempt, token):
                    LOGGER.debug(f"Created '{candidate}' after {attempt + 1} attempt(s)")
                    return Resolution(name=candidate, attempts=attempt + 1)
                last_error = None
            except TRANSIENT_ERRORS as e:
                LOGGER.warning(f"Naming authority unavailable on attempt {attempt}: {e}")
                last_error = e

            if attempt < self._max_retries:
                self._wait(attempt, token)

        attempts = self._max_retries + 1
        if last_error is not None:
            raise OracleUnavailableError(
                f"Naming authority unavailable after {attempts} attempt(s): {last_error}", attempts
            ) from last_error
        raise CollisionExhaustedError(attempts, candidate)
