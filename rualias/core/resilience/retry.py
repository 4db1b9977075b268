"""Bounded Retry and Per-Attempt Timeout Policies

Remote providers get one extra attempt after a fixed pause when the failure
is transient (network error, timeout, unexpected HTTP status). Permanent
failures (rate limiting, unknown word, malformed body) end the call at once.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Awaitable, Callable, Generic, TypeVar

from rualias.core.errors import (
    AppError,
    ErrorCode,
    Err,
    Ok,
    Result,
    from_exception,
    timeout_error,
)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior."""
    max_attempts: int = 2
    delay_seconds: float = 2.0  # fixed pause between attempts, no backoff
    retryable_codes: frozenset[ErrorCode] = field(
        default_factory=lambda: frozenset({
            ErrorCode.E1000_NETWORK_GENERIC,
            ErrorCode.E1002_TIMEOUT,
            ErrorCode.E1020_HTTP_CLIENT_ERROR,
            ErrorCode.E1021_HTTP_SERVER_ERROR,
        })
    )
    non_retryable_codes: frozenset[ErrorCode] = field(
        default_factory=lambda: frozenset({
            ErrorCode.E1013_RATE_LIMITED,
            ErrorCode.E1014_WORD_NOT_RECOGNIZED,
            ErrorCode.E2021_MALFORMED_RESPONSE,
        })
    )


@dataclass
class RetryAttempt:
    """Information about a single attempt."""
    attempt_number: int
    started_at: datetime
    error: AppError | None = None


@dataclass
class RetryResult(Generic[T]):
    """Result of a retried operation with its attempt history."""
    result: Result[T, AppError]
    attempts: list[RetryAttempt]
    total_duration_seconds: float

    @property
    def succeeded(self) -> bool:
        return self.result.is_ok()

    @property
    def attempt_count(self) -> int:
        return len(self.attempts)


class RetryPolicy(Generic[T]):
    """Explicit bounded retry loop; the attempt count is plain loop state.

    Usage:
        policy = RetryPolicy(RetryConfig(max_attempts=2, delay_seconds=2.0))
        outcome = await policy.execute(lambda: provider.request(word))
        match outcome.result:
            case Ok(data):
                ...
            case Err(error):
                log.warning("gave_up", attempts=outcome.attempt_count)
    """

    def __init__(self, config: RetryConfig | None = None, sleep: Sleep = asyncio.sleep):
        self.config = config or RetryConfig()
        self._sleep = sleep

    def should_retry(self, error: AppError, attempt: int) -> bool:
        if attempt >= self.config.max_attempts:
            return False
        if error.code in self.config.non_retryable_codes:
            return False
        return error.code in self.config.retryable_codes

    async def execute(
        self,
        fn: Callable[[], Awaitable[Result[T, AppError]]],
        on_retry: Callable[[int, AppError, float], Awaitable[None]] | None = None,
    ) -> RetryResult[T]:
        """Run fn until it succeeds, fails permanently or attempts run out.

        Args:
            fn: Async function returning Result
            on_retry: Optional callback before each retry (attempt, error, delay)
        """
        attempts: list[RetryAttempt] = []
        start_time = datetime.now(timezone.utc)
        result: Result[T, AppError] = Err(AppError(
            code=ErrorCode.E9001_UNEXPECTED_ERROR,
            message="Retry policy made no attempts",
        ))

        for attempt in range(1, self.config.max_attempts + 1):
            attempt_start = datetime.now(timezone.utc)
            try:
                result = await fn()
            except Exception as e:
                result = from_exception(e, origin="retry_policy")

            match result:
                case Ok(_):
                    attempts.append(RetryAttempt(attempt, attempt_start))
                    break
                case Err(error):
                    attempts.append(RetryAttempt(attempt, attempt_start, error))
                    if not self.should_retry(error, attempt):
                        break
                    delay = self.config.delay_seconds
                    if on_retry:
                        await on_retry(attempt, error, delay)
                    await self._sleep(delay)

        end_time = datetime.now(timezone.utc)
        return RetryResult(
            result=result,
            attempts=attempts,
            total_duration_seconds=(end_time - start_time).total_seconds(),
        )


class TimeoutPolicy(Generic[T]):
    """Timeout wrapper; a fired timeout aborts only the wrapped call."""

    def __init__(self, timeout_seconds: float, operation_name: str = "operation"):
        self.timeout_seconds = timeout_seconds
        self.operation_name = operation_name

    async def execute(
        self,
        fn: Callable[[], Awaitable[Result[T, AppError]]],
    ) -> Result[T, AppError]:
        try:
            return await asyncio.wait_for(fn(), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            return timeout_error(
                self.operation_name,
                self.timeout_seconds,
                origin="timeout_policy",
            )


class CombinedPolicy(Generic[T]):
    """Timeout per attempt inside a bounded retry loop."""

    def __init__(
        self,
        timeout_seconds: float,
        retry_config: RetryConfig | None = None,
        operation_name: str = "operation",
        sleep: Sleep = asyncio.sleep,
    ):
        self.timeout = TimeoutPolicy[T](timeout_seconds, operation_name)
        self.retry = RetryPolicy[T](retry_config, sleep=sleep)

    async def execute(
        self,
        fn: Callable[[], Awaitable[Result[T, AppError]]],
        on_retry: Callable[[int, AppError, float], Awaitable[None]] | None = None,
    ) -> RetryResult[T]:
        async def timed_fn() -> Result[T, AppError]:
            return await self.timeout.execute(fn)

        return await self.retry.execute(timed_fn, on_retry)
