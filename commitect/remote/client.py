"""Async client for the remote intent classification service.

RemoteClassifier posts the diff to one endpoint and returns a tagged
RemoteOutcome instead of raising. Retry policy:

- 429, 5xx and network failures are retried with exponential backoff
  (``backoff_base * 2**n`` seconds after failed attempt ``n``), up to
  ``max_attempts`` attempts in total
- any other 4xx, malformed responses and any other httpx error end the call
  immediately
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

import httpx

from commitect.config import (
    DEFAULT_API_ENDPOINT,
    DEFAULT_BACKOFF_BASE_SECONDS,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_TIMEOUT_SECONDS,
)
from commitect.remote.parsing import ResponseFormatError, parse_response_body
from commitect.remote.results import (
    FailureKind,
    RemoteFailure,
    RemoteOutcome,
    RemoteSuccess,
)

logger = logging.getLogger(__name__)

RETRYABLE_KINDS = frozenset(
    {FailureKind.RATE_LIMITED, FailureKind.SERVER_ERROR, FailureKind.NETWORK_ERROR}
)


def classify_status(status_code: int) -> Optional[FailureKind]:
    """Map an HTTP status code to a failure kind.

    Args:
        status_code: The response status.

    Returns:
        The FailureKind, or None for a non-error status.
    """
    if status_code == 429:
        return FailureKind.RATE_LIMITED
    if status_code >= 500:
        return FailureKind.SERVER_ERROR
    if status_code >= 400:
        return FailureKind.CLIENT_ERROR
    return None


class RemoteClassifier:
    """Client for the remote classification endpoint."""

    def __init__(
        self,
        endpoint: str = DEFAULT_API_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        backoff_base: float = DEFAULT_BACKOFF_BASE_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize the client.

        Args:
            endpoint: URL of the classification endpoint.
            timeout: Per-request timeout in seconds.
            max_attempts: Total attempts, including the first.
            backoff_base: Delay before the second attempt, in seconds.
            client: HTTP client to use. One is created (and owned) if omitted.
            sleep: Awaitable used for backoff delays.
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)
        self.backoff_base = backoff_base
        self._client = client
        self._owns_client = client is None
        self._sleep = sleep

    async def __aenter__(self) -> "RemoteClassifier":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def backoff_delay(self, attempt_index: int) -> float:
        """Delay in seconds after failed attempt ``attempt_index`` (0-based)."""
        return self.backoff_base * (2 ** attempt_index)

    async def _attempt(self, diff_text: str, attempt: int) -> RemoteOutcome:
        """Make one request and classify its result."""
        try:
            response = await self._get_client().post(
                self.endpoint,
                json={"diff": diff_text},
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except (httpx.TimeoutException, httpx.NetworkError) as e:
            return RemoteFailure(
                kind=FailureKind.NETWORK_ERROR,
                detail=f"{type(e).__name__}: {e}",
                attempts=attempt,
                retryable=True,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # Any other httpx failure, including a bad endpoint URL, is terminal
            return RemoteFailure(
                kind=FailureKind.NETWORK_ERROR,
                detail=f"{type(e).__name__}: {e}",
                attempts=attempt,
            )

        kind = classify_status(response.status_code)
        if kind is not None:
            return RemoteFailure(
                kind=kind,
                detail=f"HTTP {response.status_code}",
                attempts=attempt,
                retryable=kind in RETRYABLE_KINDS,
            )

        try:
            suggestion = parse_response_body(response.text)
        except ResponseFormatError as e:
            return RemoteFailure(
                kind=FailureKind.MALFORMED_RESPONSE,
                detail=str(e),
                attempts=attempt,
            )
        return RemoteSuccess(suggestion=suggestion, attempts=attempt)

    async def classify(self, diff_text: str) -> RemoteOutcome:
        """Classify a diff with the remote service.

        Args:
            diff_text: The raw diff text, sent unchanged.

        Returns:
            RemoteSuccess, or RemoteFailure describing the last failure.
        """
        outcome: RemoteOutcome = RemoteFailure(
            kind=FailureKind.NETWORK_ERROR, detail="no attempt made", attempts=0
        )

        for attempt_index in range(self.max_attempts):
            outcome = await self._attempt(diff_text, attempt_index + 1)
            if outcome.ok or not outcome.retryable:
                return outcome

            is_last = attempt_index + 1 >= self.max_attempts
            if is_last:
                break

            delay = self.backoff_delay(attempt_index)
            logger.debug(
                "Remote attempt %d/%d failed (%s); retrying in %.2fs",
                attempt_index + 1,
                self.max_attempts,
                outcome.kind.value,
                delay,
            )
            await self._sleep(delay)

        return outcome
