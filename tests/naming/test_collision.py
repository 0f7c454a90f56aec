"""Tests for the collision resolver."""

from unittest.mock import MagicMock

import pytest

from lcp_lib.exceptions import (
    CollisionExhaustedError,
    GenerationCancelledError,
    InvalidGeneratedNameError,
    OracleUnavailableError,
)
from lcp_lib.naming import CancellationToken, SanitizedComponents
from lcp_lib.naming.collision import BackoffPolicy, CollisionResolver


def make_resolver(oracle, creator, max_retries=3, sleeps=None, clock_value=123456789):
    """Build a resolver with a fixed clock and a recording sleep."""
    recorded = sleeps if sleeps is not None else []
    return CollisionResolver(
        oracle,
        creator,
        max_retries=max_retries,
        backoff=BackoffPolicy(base_delay=0.1, max_delay=5.0),
        sleep=recorded.append,
        clock=lambda: clock_value,
    )


class TestBackoffPolicy:
    """Test exponential backoff delays."""

    def test_doubles_each_attempt(self):
        """Test delay doubles per attempt."""
        policy = BackoffPolicy(base_delay=0.1, max_delay=5.0)

        assert policy.delay(0) == pytest.approx(0.1)
        assert policy.delay(1) == pytest.approx(0.2)
        assert policy.delay(2) == pytest.approx(0.4)

    def test_capped_at_max_delay(self):
        """Test delay never exceeds max_delay."""
        assert BackoffPolicy(base_delay=0.1, max_delay=5.0).delay(10) == 5.0


class TestCandidate:
    """Test candidate generation."""

    def test_first_attempt_is_base_name(self, oracle, creator, sanitized):
        """Test attempt 0 has no suffix."""
        resolver = make_resolver(oracle, creator)

        assert resolver.candidate(sanitized, 0) == "lcp-prod-data-config"

    def test_later_attempts_use_clock_suffix(self, oracle, creator, sanitized):
        """Test later attempts append the last four clock digits."""
        resolver = make_resolver(oracle, creator, clock_value=123456789)

        assert resolver.candidate(sanitized, 1) == "lcp-prod-data-config-6789"

    def test_suffix_zero_padded(self, oracle, creator, sanitized):
        """Test the clock suffix is always four digits."""
        resolver = make_resolver(oracle, creator, clock_value=10007)

        assert resolver.candidate(sanitized, 2) == "lcp-prod-data-config-0007"

    def test_invalid_candidate_is_regenerated(self, oracle, creator):
        """Test a grammar-invalid candidate is replaced without consuming the attempt."""
        components = SanitizedComponents(account="prod", team="data", moniker="s3alias")
        resolver = make_resolver(oracle, creator, clock_value=42)

        assert resolver.candidate(components, 0) == "lcp-prod-data-s3alias-0042"

    def test_unbuildable_candidate_raises(self, oracle, creator):
        """Test that persistently invalid candidates raise InvalidGeneratedNameError."""
        components = SanitizedComponents(account="a..b", team="data", moniker="config")
        resolver = make_resolver(oracle, creator)

        with pytest.raises(InvalidGeneratedNameError):
            resolver.candidate(components, 0)


class TestResolveWithRetry:
    """Test resolve_with_retry()."""

    def test_free_base_name(self, oracle, creator, sanitized):
        """Test the base name is created when free."""
        resolver = make_resolver(oracle, creator)

        resolution = resolver.resolve_with_retry(sanitized)

        assert resolution.name == "lcp-prod-data-config"
        assert resolution.attempts == 1
        assert resolution.created is True
        creator.create.assert_called_once_with("lcp-prod-data-config")

    def test_exhausted_after_max_retries_plus_one(self, creator, sanitized):
        """Test every candidate taken raises after exactly max_retries + 1 attempts."""
        oracle = MagicMock()
        oracle.exists.return_value = True
        sleeps: list[float] = []
        resolver = make_resolver(oracle, creator, max_retries=2, sleeps=sleeps)

        with pytest.raises(CollisionExhaustedError) as exc_info:
            resolver.resolve_with_retry(sanitized)

        assert exc_info.value.attempts == 3
        assert oracle.exists.call_count == 3
        creator.create.assert_not_called()
        assert sleeps == [pytest.approx(0.1), pytest.approx(0.2)]

    def test_second_attempt_succeeds(self, creator, sanitized):
        """Test a collision on the base name falls through to a suffixed name."""
        oracle = MagicMock()
        oracle.exists.side_effect = [True, False]
        resolver = make_resolver(oracle, creator, clock_value=5555)

        resolution = resolver.resolve_with_retry(sanitized)

        assert resolution.name == "lcp-prod-data-config-5555"
        assert resolution.attempts == 2

    def test_lost_create_race_counts_as_collision(self, oracle, sanitized):
        """Test a create returning False moves on to the next attempt."""
        creator = MagicMock()
        creator.create.side_effect = [False, True]
        resolver = make_resolver(oracle, creator)

        resolution = resolver.resolve_with_retry(sanitized)

        assert resolution.attempts == 2
        assert creator.create.call_count == 2

    def test_transient_errors_are_retried(self, creator, sanitized):
        """Test transient oracle failures back off and retry."""
        oracle = MagicMock()
        oracle.exists.side_effect = [OracleUnavailableError("throttled"), ConnectionError("reset"), False]
        sleeps: list[float] = []
        resolver = make_resolver(oracle, creator, sleeps=sleeps)

        resolution = resolver.resolve_with_retry(sanitized)

        assert resolution.attempts == 3
        assert len(sleeps) == 2

    def test_persistent_transient_errors(self, creator, sanitized):
        """Test OracleUnavailableError once the budget is spent on transient failures."""
        oracle = MagicMock()
        oracle.exists.side_effect = OracleUnavailableError("throttled")
        resolver = make_resolver(oracle, creator, max_retries=1)

        with pytest.raises(OracleUnavailableError) as exc_info:
            resolver.resolve_with_retry(sanitized)

        assert exc_info.value.attempts == 2
        assert oracle.exists.call_count == 2

    def test_non_transient_errors_propagate(self, creator, sanitized):
        """Test unexpected oracle errors are not retried."""
        oracle = MagicMock()
        oracle.exists.side_effect = RuntimeError("boom")
        resolver = make_resolver(oracle, creator)

        with pytest.raises(RuntimeError):
            resolver.resolve_with_retry(sanitized)

        assert oracle.exists.call_count == 1

    def test_cancelled_before_start(self, oracle, creator, sanitized):
        """Test a cancelled token prevents any oracle call."""
        token = CancellationToken()
        token.cancel()
        resolver = make_resolver(oracle, creator)

        with pytest.raises(GenerationCancelledError):
            resolver.resolve_with_retry(sanitized, token)

        oracle.exists.assert_not_called()

    def test_cancelled_during_backoff(self, creator, sanitized):
        """Test cancellation during a backoff sleep stops resolution."""
        oracle = MagicMock()
        oracle.exists.return_value = True
        token = CancellationToken()
        resolver = CollisionResolver(
            oracle,
            creator,
            max_retries=3,
            sleep=lambda _delay: token.cancel(),
            clock=lambda: 1,
        )

        with pytest.raises(GenerationCancelledError) as exc_info:
            resolver.resolve_with_retry(sanitized, token)

        assert exc_info.value.attempts == 1
        assert oracle.exists.call_count == 1

    def test_negative_max_retries(self, oracle, creator):
        """Test max_retries must not be negative."""
        with pytest.raises(ValueError):
            CollisionResolver(oracle, creator, max_retries=-1)
