"""Alias Resolution Pipeline

Runs the stages that turn one Russian word into its declension aliases:

    probe -> primary provider (+ singular patch) -> secondary provider
          -> offline engine (when nothing came back, or when offline)
          -> merge -> extract

Every stage degrades to "no data" instead of raising, and any unexpected
failure ends in an empty outcome, so callers always get a well-formed
AliasOutcome.
"""
from __future__ import annotations

import asyncio
import time
from dataclasses import replace

import httpx

from rualias.core.config import Settings, get_settings
from rualias.core.logging import (
    bind_context,
    generate_correlation_id,
    pipeline_logger,
    unbind_context,
)
from rualias.core.resilience.retry import Sleep
from rualias.languages.russian import RussianDeclensionEngine, is_plural_form, singular_form
from rualias.models import AliasOutcome, DeclensionResult
from rualias.providers import (
    ConnectivityProbe,
    DeclensionProvider,
    MorpherProvider,
    SklonenieProvider,
)

from .aliases import extract_aliases
from .events import EventSink, LoggingEventSink, Stage, StageEvent
from .reconcile import merge

log = pipeline_logger()


class AliasPipeline:
    """Orchestrates probe, providers, offline fallback, merge and extraction."""

    def __init__(
        self,
        probe: ConnectivityProbe,
        primary: DeclensionProvider,
        secondary: DeclensionProvider,
        engine: RussianDeclensionEngine | None = None,
        sink: EventSink | None = None,
        concurrent: bool = False,
    ):
        self.probe = probe
        self.primary = primary
        self.secondary = secondary
        self.engine = engine or RussianDeclensionEngine()
        self.sink = sink or LoggingEventSink()
        self.concurrent = concurrent

    @classmethod
    def from_settings(
        cls,
        client: httpx.AsyncClient,
        settings: Settings,
        sink: EventSink | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> AliasPipeline:
        return cls(
            probe=ConnectivityProbe.from_settings(client, settings),
            primary=MorpherProvider.from_settings(client, settings, settings.PRIMARY_PROVIDER_URL, sleep),
            secondary=SklonenieProvider.from_settings(client, settings, settings.SECONDARY_PROVIDER_URL, sleep),
            sink=sink,
            concurrent=settings.CONCURRENT_PROVIDERS,
        )

    async def run(self, word: str, force_offline: bool = False) -> AliasOutcome:
        """Resolve aliases for a word; never raises for ordinary failures."""
        subject = word.strip()
        if not subject:
            log.warning("empty_subject")
            return AliasOutcome.empty()

        bind_context(run_id=generate_correlation_id(), word=subject)
        try:
            outcome = await self._run(subject, force_offline)
            log.info(
                "aliases_generated",
                count=len(outcome.aliases),
                is_offline=outcome.is_offline,
                needs_internet=outcome.needs_internet,
            )
            return outcome
        except Exception as e:
            log.exception("pipeline_failed", error_type=type(e).__name__)
            return AliasOutcome.empty()
        finally:
            unbind_context("run_id", "word")

    async def _run(self, word: str, force_offline: bool) -> AliasOutcome:
        online = False if force_offline else await self._probe()

        is_offline = False
        if online:
            primary, secondary = await self._query_providers(word)
            candidates = [primary, secondary]
            if primary is None and secondary is None:
                log.info("providers_unavailable", fallback="offline")
                candidates = [self._offline(word)]
                is_offline = True
        else:
            candidates = [self._offline(word)]
            is_offline = True

        started = time.perf_counter()
        merged = merge(candidates)
        self._emit(Stage.MERGE, started, "ok" if merged else "no_data",
                   sources=sum(c is not None for c in candidates))

        if merged is None:
            # Only the offline engine can leave us here: it refuses phrases
            return AliasOutcome(needs_internet=is_offline)

        started = time.perf_counter()
        aliases = extract_aliases(merged, word)
        self._emit(Stage.EXTRACT, started, "ok", count=len(aliases))
        return AliasOutcome(aliases=tuple(aliases), is_offline=is_offline)

    async def _probe(self) -> bool:
        started = time.perf_counter()
        online = await self.probe.check()
        self._emit(Stage.PROBE, started, "online" if online else "offline")
        return online

    async def _query_providers(
        self, word: str
    ) -> tuple[DeclensionResult | None, DeclensionResult | None]:
        if self.concurrent:
            primary, secondary = await asyncio.gather(self._query_primary(word), self._query_secondary(word))
            return primary, secondary
        primary = await self._query_primary(word)
        secondary = await self._query_secondary(word)
        return primary, secondary

    async def _query_primary(self, word: str) -> DeclensionResult | None:
        started = time.perf_counter()
        result = await self.primary.resolve(word)
        self._emit(Stage.PRIMARY, started, "ok" if result else "no_data", provider=self.primary.name)

        # A plural title without singular data: ask again for the singular
        if result is not None and is_plural_form(word) and result.singular.genitive is None:
            singular_word = singular_form(word)
            started = time.perf_counter()
            patch = await self.primary.resolve(singular_word)
            self._emit(Stage.SINGULAR_PATCH, started, "ok" if patch else "no_data", singular=singular_word)
            if patch is not None:
                result = replace(result, singular=patch.singular)

        return result

    async def _query_secondary(self, word: str) -> DeclensionResult | None:
        started = time.perf_counter()
        result = await self.secondary.resolve(word)
        self._emit(Stage.SECONDARY, started, "ok" if result else "no_data", provider=self.secondary.name)
        return result

    def _offline(self, word: str) -> DeclensionResult | None:
        started = time.perf_counter()
        result = self.engine.decline(word)
        self._emit(Stage.OFFLINE, started, "ok" if result else "unsupported")
        return result

    def _emit(self, stage: Stage, started: float, outcome: str, **detail) -> None:
        elapsed_ms = (time.perf_counter() - started) * 1000
        self.sink.emit(StageEvent(stage=stage, outcome=outcome, elapsed_ms=elapsed_ms, detail=detail))


async def generate_aliases(
    word: str,
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    sink: EventSink | None = None,
    force_offline: bool = False,
) -> AliasOutcome:
    """Single entry point: resolve aliases for one word with a fresh HTTP client."""
    settings = settings or get_settings()
    async with httpx.AsyncClient(transport=transport, follow_redirects=True) as client:
        pipeline = AliasPipeline.from_settings(client, settings, sink=sink)
        return await pipeline.run(word, force_offline=force_offline)
