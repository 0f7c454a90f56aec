"""
LCP exception classes.

This module defines custom exceptions for lcp-lib to avoid masking built-in Python errors
and to provide clear, specific error handling for different failure scenarios.

All library exceptions inherit from LCPError. Name generation failures share the
NameGenerationError base so callers can tell them apart from configuration problems.
"""


class LCPError(Exception):
    """
    Base exception for all lcp-lib errors.

    All lcp-lib exceptions inherit from this, allowing users to catch all library-specific
    errors with a single except clause while not catching unrelated Python errors.
    """

    pass


class LCPConfigurationError(LCPError):
    """
    Raised when there is an error in lcp-lib configuration.

    This includes malformed YAML files, invalid provider definitions, and a generator
    strategy that needs a naming authority when none was supplied.
    """

    pass


class UnsupportedProviderError(LCPError):
    """Raised when attempting to use an unsupported cloud provider."""

    pass


class NameGenerationError(LCPError):
    """Base exception for bucket name generation failures."""

    def __init__(self, message: str, attempts: int = 0):
        super().__init__(message)
        self.attempts = attempts


class InvalidComponentsError(NameGenerationError):
    """
    Raised when raw request components fail the pre-check.

    Reported before any I/O is performed. Not retryable: the caller must fix the input.

    Example:
    -------
        >>> generator.generate(NameRequest(account="a" * 25, team="data", moniker="cfg"))
        InvalidComponentsError: Invalid name components: account length 25 exceeds maximum of 20

    """

    def __init__(self, errors: list[str]):
        super().__init__(f"Invalid name components: {'; '.join(errors)}")
        self.errors = list(errors)


class InvalidGeneratedNameError(NameGenerationError):
    """
    Raised when a fully assembled name violates the bucket grammar.

    This is an internal invariant violation (a defect in the sanitizer or builder),
    never a user error. It is logged at error level before being raised.
    """

    def __init__(self, name: str, errors: list[str], attempts: int = 0):
        super().__init__(f"Generated name '{name}' violates the naming grammar: {'; '.join(errors)}", attempts)
        self.name = name
        self.errors = list(errors)


class CollisionExhaustedError(NameGenerationError):
    """
    Raised when every candidate in the retry budget was already taken.

    Retryable by the caller (e.g. with a different moniker) but not by the generator.
    """

    def __init__(self, attempts: int, last_candidate: str | None = None):
        super().__init__(
            f"No free bucket name found after {attempts} attempt(s)"
            + (f" (last candidate: '{last_candidate}')" if last_candidate else ""),
            attempts,
        )
        self.last_candidate = last_candidate


class OracleUnavailableError(NameGenerationError):
    """
    Raised when the naming authority (existence check or creation) fails transiently.

    Adapters raise it for throttling, 5xx and connection failures. The collision resolver
    retries it on the backoff schedule and re-raises it with the attempt count once the
    budget is spent.
    """

    pass


class GenerationCancelledError(NameGenerationError):
    """Raised when the caller cancels generation or its deadline passes mid-resolution."""

    pass
