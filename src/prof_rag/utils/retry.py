"""Retry policies for external service calls using tenacity."""

import logging
from collections.abc import Callable
from typing import Any

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_incrementing,
)

from prof_rag.exceptions import (
    ProviderNotAvailableError,
    ProviderRateLimitError,
    ProviderTimeoutError,
)
from prof_rag.utils.logging import get_logger, log_with_context

logger = get_logger(__name__)

# Failures worth another attempt. Auth errors and generic provider errors are not.
TRANSIENT_ERRORS: tuple[type[BaseException], ...] = (
    ProviderNotAvailableError,
    ProviderRateLimitError,
    ProviderTimeoutError,
    ConnectionError,
    TimeoutError,
)


def linear_backoff(base_delay: float) -> Any:
    """Wait ``base_delay * attempt`` seconds after each failed attempt."""
    return wait_incrementing(start=base_delay, increment=base_delay)


def _log_before_sleep(operation: str) -> Callable[[RetryCallState], None]:
    def before_sleep(retry_state: RetryCallState) -> None:
        outcome = retry_state.outcome
        error = outcome.exception() if outcome is not None else None
        wait = retry_state.next_action.sleep if retry_state.next_action else 0.0
        log_with_context(
            logger,
            logging.WARNING,
            f"{operation} failed, retrying",
            attempt=retry_state.attempt_number,
            wait_seconds=wait,
            error=repr(error),
        )

    return before_sleep


def service_retry(
    max_retries: int = 2,
    base_delay: float = 0.5,
    retry_on: tuple[type[BaseException], ...] = TRANSIENT_ERRORS,
    operation: str = "service call",
) -> AsyncRetrying:
    """Build an async retry loop for one external call.

    Args:
        max_retries: Additional attempts after the first one.
        base_delay: Backoff unit; attempt n waits ``base_delay * n``.
        retry_on: Exception types considered transient.
        operation: Name used in retry log lines.

    Returns:
        An ``AsyncRetrying`` that re-raises the last error when exhausted.

    Usage:
        async for attempt in service_retry(max_retries=2):
            with attempt:
                vector = await provider.aembed_query(text)
    """
    return AsyncRetrying(
        stop=stop_after_attempt(max_retries + 1),
        wait=linear_backoff(base_delay),
        retry=retry_if_exception_type(retry_on),
        before_sleep=_log_before_sleep(operation),
        reraise=True,
    )

