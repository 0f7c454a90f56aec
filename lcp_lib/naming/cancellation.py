"""Caller-supplied cancellation for name resolution."""

import threading
import time

from lcp_lib.exceptions import GenerationCancelledError


class CancellationToken:
    """
    Cancellation signal with an optional monotonic deadline.

    A token is cancelled once ``cancel()`` has been called or its deadline has passed.
    ``sleep()`` waits on the token so a backoff sleep wakes up as soon as the token
    is cancelled.

    Example:
    -------
        >>> token = CancellationToken.with_timeout(5.0)
        >>> generator.generate(request, token=token)

    """

    def __init__(self, deadline: float | None = None):
        """
        Initialize the token.

        Args:
        ----
            deadline: Absolute ``time.monotonic()`` value after which the token is cancelled

        """
        self._deadline = deadline
        self._event = threading.Event()

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancellationToken":
        """Create a token that cancels itself ``seconds`` from now."""
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        """Cancel the token, waking any pending sleep."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        """True once cancelled or past the deadline."""
        if self._event.is_set():
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    def remaining(self) -> float | None:
        """Seconds until the deadline, or None when there is no deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def raise_if_cancelled(self, attempts: int = 0) -> None:
        """Raise GenerationCancelledError if the token is cancelled."""
        if self.cancelled:
            raise GenerationCancelledError(f"Name generation cancelled after {attempts} attempt(s)", attempts)

    def sleep(self, seconds: float, attempts: int = 0) -> None:
        """Sleep for ``seconds`` unless cancelled first."""
        remaining = self.remaining()
        timeout = seconds if remaining is None else min(seconds, remaining)
        self._event.wait(timeout)
        self.raise_if_cancelled(attempts)
