"""Tests for the bounded retry and timeout policies."""
import asyncio

import pytest

from rualias.core.errors import ErrorCode, Ok, network_error, rate_limited
from rualias.core.resilience import CombinedPolicy, RetryConfig, RetryPolicy, TimeoutPolicy


def scripted(*results):
    """Async callable returning the given results in order, counting calls."""
    queue = list(results)
    calls = []

    async def fn():
        calls.append(len(calls) + 1)
        item = queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    fn.calls = calls
    return fn


class TestRetryPolicy:
    @pytest.mark.asyncio
    async def test_success_on_first_attempt(self, fake_sleep):
        policy = RetryPolicy(RetryConfig(), sleep=fake_sleep)
        outcome = await policy.execute(scripted(Ok("стола")))

        assert outcome.succeeded
        assert outcome.result.unwrap() == "стола"
        assert outcome.attempt_count == 1
        assert fake_sleep.delays == []

    @pytest.mark.asyncio
    async def test_transient_failure_retried_after_fixed_pause(self, fake_sleep):
        policy = RetryPolicy(RetryConfig(), sleep=fake_sleep)
        outcome = await policy.execute(scripted(network_error("down"), Ok("стола")))

        assert outcome.succeeded
        assert outcome.attempt_count == 2
        assert fake_sleep.delays == [2.0]
        assert outcome.attempts[0].error.code == ErrorCode.E1000_NETWORK_GENERIC

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self, fake_sleep):
        fn = scripted(network_error("down"), network_error("still down"), Ok("unused"))
        outcome = await RetryPolicy(RetryConfig(), sleep=fake_sleep).execute(fn)

        assert not outcome.succeeded
        assert fn.calls == [1, 2]
        assert fake_sleep.delays == [2.0]

    @pytest.mark.asyncio
    async def test_rate_limit_is_not_retried(self, fake_sleep):
        fn = scripted(rate_limited("morpher"), Ok("unused"))
        outcome = await RetryPolicy(RetryConfig(), sleep=fake_sleep).execute(fn)

        assert outcome.result.unwrap_err().code == ErrorCode.E1013_RATE_LIMITED
        assert fn.calls == [1]
        assert fake_sleep.delays == []

    @pytest.mark.asyncio
    async def test_raised_exception_becomes_unexpected_error(self, fake_sleep):
        fn = scripted(RuntimeError("boom"), Ok("unused"))
        outcome = await RetryPolicy(RetryConfig(), sleep=fake_sleep).execute(fn)

        assert outcome.result.unwrap_err().code == ErrorCode.E9001_UNEXPECTED_ERROR
        assert fn.calls == [1]

    @pytest.mark.asyncio
    async def test_on_retry_callback(self, fake_sleep):
        seen = []

        async def on_retry(attempt, error, delay):
            seen.append((attempt, error.code, delay))

        policy = RetryPolicy(RetryConfig(delay_seconds=0.5), sleep=fake_sleep)
        await policy.execute(scripted(network_error("down"), Ok(1)), on_retry=on_retry)

        assert seen == [(1, ErrorCode.E1000_NETWORK_GENERIC, 0.5)]

    def test_should_retry_respects_attempt_limit(self):
        policy = RetryPolicy(RetryConfig(max_attempts=2))
        error = network_error("down").unwrap_err()
        assert policy.should_retry(error, 1)
        assert not policy.should_retry(error, 2)


class TestTimeoutPolicy:
    @pytest.mark.asyncio
    async def test_timeout_becomes_error(self):
        async def slow():
            await asyncio.sleep(1)
            return Ok("late")

        result = await TimeoutPolicy(0.01, "slow_call").execute(slow)
        assert result.unwrap_err().code == ErrorCode.E1002_TIMEOUT

    @pytest.mark.asyncio
    async def test_fast_call_passes_through(self):
        async def fast():
            return Ok("ok")

        assert (await TimeoutPolicy(1.0).execute(fast)).unwrap() == "ok"


@pytest.mark.asyncio
async def test_combined_policy_retries_a_timeout(fake_sleep):
    calls = []

    async def sometimes_slow():
        calls.append(1)
        if len(calls) == 1:
            await asyncio.sleep(1)
        return Ok("стола")

    policy = CombinedPolicy(0.01, RetryConfig(), sleep=fake_sleep)
    outcome = await policy.execute(sometimes_slow)

    assert outcome.succeeded
    assert outcome.attempts[0].error.code == ErrorCode.E1002_TIMEOUT
    assert fake_sleep.delays == [2.0]
