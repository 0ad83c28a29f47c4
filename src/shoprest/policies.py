"""Execution policies deciding how a prepared request is sent.

The client never retries on its own: :class:`DefaultExecutionPolicy` sends a
request exactly once. Callers who want transient failures retried opt into
:class:`RetryExecutionPolicy`, either by passing it to the client or by
setting ``SHOPREST_RETRY_REQUESTS=true``.
"""

from http import HTTPStatus
from typing import Protocol

import httpx
import tenacity
from tenacity import AsyncRetrying, stop_after_attempt, wait_exponential

from .exceptions import ApiError, NetworkError, RateLimitError, TimeoutError
from .log_config import logger
from .types import RequestData, SendCallable


class ExecutionPolicy(Protocol):
    """Protocol for strategies that run a prepared request."""

    async def run(
        self, request_data: RequestData, send: SendCallable
    ) -> httpx.Response:
        """Sends ``request_data`` using ``send`` and returns the response.

        Args:
            request_data: The prepared request descriptor.
            send: Coroutine function performing one HTTP exchange.

        Returns:
            httpx.Response: The successful response.
        """
        ...


class DefaultExecutionPolicy:
    """Sends every request exactly once; errors surface unchanged."""

    async def run(
        self, request_data: RequestData, send: SendCallable
    ) -> httpx.Response:
        return await send(request_data)


class RetryExecutionPolicy:
    """Retries transient failures with exponential backoff.

    Rate limiting (429), timeouts, network errors and 5xx responses are
    retried. Any other error, including 404 and 422, is raised immediately.
    After ``max_retries`` retries the last error is re-raised.
    """

    def __init__(self, max_retries: int = 3, backoff_factor: float = 0.5):
        if max_retries < 0:
            raise ValueError("max_retries must be zero or greater")
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor

    @staticmethod
    def _is_retryable(exc: BaseException) -> bool:
        if isinstance(exc, RateLimitError | TimeoutError | NetworkError):
            return True
        if isinstance(exc, ApiError) and exc.status_code is not None:
            return exc.status_code >= HTTPStatus.INTERNAL_SERVER_ERROR
        return False

    def _should_retry(self, retry_state: tenacity.RetryCallState) -> bool:
        outcome = retry_state.outcome
        if outcome is None or not outcome.failed:
            return False
        exc = outcome.exception()
        if exc is not None and self._is_retryable(exc):
            logger.warning(
                f"Retrying after {type(exc).__name__} "
                f"(attempt {retry_state.attempt_number}/{self.max_retries + 1})"
            )
            return True
        return False

    async def _before_sleep(self, retry_state: tenacity.RetryCallState) -> None:
        sleep_time = (
            getattr(retry_state.next_action, "sleep", 0)
            if retry_state.next_action
            else 0
        )
        logger.info(f"Sleeping {sleep_time:.2f}s before the next attempt")

    async def run(
        self, request_data: RequestData, send: SendCallable
    ) -> httpx.Response:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_retries + 1),  # +1 for initial attempt
            wait=wait_exponential(multiplier=self.backoff_factor),
            retry=self._should_retry,
            reraise=True,
            before_sleep=self._before_sleep,
        )
        return await retrying(send, request_data)
