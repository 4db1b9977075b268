"""Remote Declension Providers

Each provider performs one HTTP GET against a declension web service,
interprets the status code, and normalizes the JSON body into a
DeclensionResult through an explicit field table. Transient failures get
one more attempt after a fixed pause; rate limiting, unknown words and
malformed bodies end the call immediately. Callers only ever see a
DeclensionResult or None.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from rualias.core.config import Settings
from rualias.core.errors import (
    AppError,
    Err,
    Ok,
    Result,
    http_status_error,
    malformed_response,
    network_error,
    rate_limited,
    word_not_recognized,
)
from rualias.core.logging import provider_logger
from rualias.core.resilience import CombinedPolicy, RetryConfig, RetryResult
from rualias.core.resilience.retry import Sleep
from rualias.languages.types import CASES
from rualias.models import CaseSet, DeclensionResult

log = provider_logger()

RATE_LIMITED_STATUS = 429


@dataclass(frozen=True, slots=True)
class FieldTable:
    """Maps a provider's response keys onto the six canonical cases.

    Candidate keys are tried in order; a key that is missing or null counts
    as absent, anything else present is taken as the form.
    """
    singular: Mapping[str, tuple[str, ...]]
    plural: Mapping[str, tuple[str, ...]]
    plural_containers: tuple[str, ...]

    def normalize(self, word: str, data: Mapping[str, Any]) -> DeclensionResult:
        forms: dict[str, str | None] = {"nominative": word}
        for case in CASES[1:]:
            forms[case] = _first_present([data], self.singular.get(case, ()))

        containers = [
            data[key] for key in self.plural_containers
            if isinstance(data.get(key), Mapping)
        ]
        plural = None
        if containers:
            plural = CaseSet.from_mapping({
                case: _first_present(containers, self.plural.get(case, ()))
                for case in CASES
            })

        return DeclensionResult(singular=CaseSet.from_mapping(forms), plural=plural)


def _first_present(sources: list[Mapping[str, Any]], keys: tuple[str, ...]) -> str | None:
    for key in keys:
        for source in sources:
            value = source.get(key)
            if isinstance(value, str):
                return value
    return None


class DeclensionProvider:
    """Base class for HTTP declension lookups."""

    name: str = "provider"
    fields: FieldTable
    # Provider-specific status meaning "word not recognized"; never retried
    not_recognized_status: int | None = None

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str,
        *,
        timeout_seconds: float = 5.0,
        retry_config: RetryConfig | None = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self._client = client
        self.url = url
        self._policy = CombinedPolicy[DeclensionResult](
            timeout_seconds,
            retry_config,
            operation_name=f"{self.name}_lookup",
            sleep=sleep,
        )

    @classmethod
    def from_settings(
        cls,
        client: httpx.AsyncClient,
        settings: Settings,
        url: str,
        sleep: Sleep = asyncio.sleep,
    ) -> DeclensionProvider:
        return cls(
            client,
            url,
            timeout_seconds=settings.PROVIDER_TIMEOUT_SECONDS,
            retry_config=RetryConfig(
                max_attempts=settings.PROVIDER_MAX_ATTEMPTS,
                delay_seconds=settings.PROVIDER_RETRY_DELAY_SECONDS,
            ),
            sleep=sleep,
        )

    async def resolve(self, word: str) -> DeclensionResult | None:
        """Look the word up; None when the provider could not deliver."""
        outcome = await self.fetch(word)
        match outcome.result:
            case Ok(result):
                log.info(
                    "provider_succeeded",
                    provider=self.name,
                    word=word,
                    attempts=outcome.attempt_count,
                    has_plural=result.plural is not None,
                )
                return result
            case Err(error):
                log.warning(
                    "provider_failed",
                    provider=self.name,
                    word=word,
                    error_code=error.code.name,
                    message=error.message,
                    attempts=outcome.attempt_count,
                )
                return None

    async def fetch(self, word: str) -> RetryResult[DeclensionResult]:
        """Look the word up with timeout and bounded retry, keeping attempt history."""
        return await self._policy.execute(lambda: self._request(word), on_retry=self._on_retry)

    async def _on_retry(self, attempt: int, error: AppError, delay: float) -> None:
        log.info(
            "provider_retry",
            provider=self.name,
            attempt=attempt,
            error_code=error.code.name,
            delay_seconds=delay,
        )

    async def _request(self, word: str) -> Result[DeclensionResult, AppError]:
        try:
            response = await self._client.get(self.url, params={"s": word, "format": "json"})
            return self._interpret(word, response)
        except Exception as e:
            # Thrown exceptions count as transient
            return network_error(
                f"'{self.name}' request failed: {type(e).__name__}",
                url=self.url,
                origin=self.name,
                cause=e,
            )

    def _interpret(self, word: str, response: httpx.Response) -> Result[DeclensionResult, AppError]:
        status = response.status_code
        if status == RATE_LIMITED_STATUS:
            return rate_limited(self.name, url=self.url, origin=self.name)
        if self.not_recognized_status is not None and status == self.not_recognized_status:
            return word_not_recognized(self.name, word, url=self.url, origin=self.name)
        if not response.is_success:
            return http_status_error(self.name, status, url=self.url, origin=self.name)

        try:
            data = response.json()
        except ValueError as e:
            return malformed_response(self.name, "body is not JSON", origin=self.name, cause=e)
        if not isinstance(data, dict):
            return malformed_response(
                self.name, f"expected a JSON object, got {type(data).__name__}", origin=self.name
            )

        return Ok(self.fields.normalize(word, data))
