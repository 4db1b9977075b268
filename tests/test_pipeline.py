"""End-to-end tests for the alias pipeline against mocked providers."""
import httpx
import pytest

from rualias.engines import AliasPipeline, generate_aliases
from rualias.models import AliasOutcome

from .conftest import STOL_ALIASES, STOL_PAYLOAD, HostRouter, respond

PHRASE = "красная площадь"


def offline_probe(request):
    raise httpx.ConnectError("offline", request=request)


async def run(router, settings, fake_sleep, sink, word="стол", **kwargs):
    async with httpx.AsyncClient(transport=router.transport) as client:
        pipeline = AliasPipeline.from_settings(client, settings, sink=sink, sleep=fake_sleep)
        return await pipeline.run(word, **kwargs)


class TestOnline:
    @pytest.mark.asyncio
    async def test_both_providers_agree(self, settings, fake_sleep, sink):
        router = HostRouter(
            probe_test=respond(200),
            primary_test=respond(200, STOL_PAYLOAD),
            secondary_test=respond(200, STOL_PAYLOAD),
        )
        outcome = await run(router, settings, fake_sleep, sink)

        assert outcome == AliasOutcome(aliases=tuple(STOL_ALIASES))
        assert sink.stages == ["probe", "primary", "secondary", "merge", "extract"]

    @pytest.mark.asyncio
    async def test_disagreeing_sources_contribute_all_variants(self, settings, fake_sleep, sink):
        router = HostRouter(
            probe_test=respond(200),
            primary_test=respond(200, STOL_PAYLOAD),
            secondary_test=respond(200, {"genitive": "стола́", "dative": "столу"}),
        )
        outcome = await run(router, settings, fake_sleep, sink)

        assert outcome.aliases[:3] == ("стола", "стола́", "столу")
        assert not outcome.is_offline

    @pytest.mark.asyncio
    async def test_one_provider_failing_is_tolerated(self, settings, fake_sleep, sink):
        router = HostRouter(
            probe_test=respond(200),
            primary_test=respond(429),
            secondary_test=respond(200, STOL_PAYLOAD),
        )
        outcome = await run(router, settings, fake_sleep, sink)

        assert list(outcome.aliases) == STOL_ALIASES
        assert router.words_sent_to("primary.test") == ["стол"]

    @pytest.mark.asyncio
    async def test_both_providers_fail_falls_back_offline(self, settings, fake_sleep, sink):
        router = HostRouter(
            probe_test=respond(200),
            primary_test=respond(500),
            secondary_test=respond(500),
        )
        outcome = await run(router, settings, fake_sleep, sink)

        assert list(outcome.aliases) == STOL_ALIASES
        assert outcome.is_offline
        assert not outcome.needs_internet
        assert len(router.words_sent_to("primary.test")) == 2
        assert len(router.words_sent_to("secondary.test")) == 2
        assert "offline" in sink.stages

    @pytest.mark.asyncio
    async def test_phrase_with_failing_providers_needs_internet(self, settings, fake_sleep, sink):
        router = HostRouter(
            probe_test=respond(200),
            primary_test=respond(429),
            secondary_test=respond(429),
        )
        outcome = await run(router, settings, fake_sleep, sink, word=PHRASE)

        assert outcome == AliasOutcome(needs_internet=True)

    @pytest.mark.asyncio
    async def test_phrase_resolved_online(self, settings, fake_sleep, sink):
        payload = {"Р": "красной площади", "Д": "красной площади"}
        router = HostRouter(
            probe_test=respond(200),
            primary_test=respond(200, payload),
            secondary_test=respond(429),
        )
        outcome = await run(router, settings, fake_sleep, sink, word=PHRASE)

        assert outcome.aliases == ("красной площади",)
        assert not outcome.needs_internet


class TestSingularPatch:
    @pytest.mark.asyncio
    async def test_plural_title_gets_singular_from_second_query(self, settings, fake_sleep, sink):
        def primary(request):
            if request.url.params["s"] == "столы":
                return httpx.Response(200, json={"множественное": STOL_PAYLOAD["множественное"]})
            return httpx.Response(200, json=STOL_PAYLOAD)

        router = HostRouter(
            probe_test=respond(200),
            primary_test=primary,
            secondary_test=respond(429),
        )
        outcome = await run(router, settings, fake_sleep, sink, word="столы")

        assert router.words_sent_to("primary.test") == ["столы", "стол"]
        assert "singular_patch" in sink.stages
        assert outcome.aliases[:2] == ("стол", "стола")
        assert "столы" not in outcome.aliases
        assert "столов" in outcome.aliases

    @pytest.mark.asyncio
    async def test_no_patch_when_singular_present(self, settings, fake_sleep, sink):
        router = HostRouter(
            probe_test=respond(200),
            primary_test=respond(200, STOL_PAYLOAD),
            secondary_test=respond(429),
        )
        await run(router, settings, fake_sleep, sink, word="столы")

        assert router.words_sent_to("primary.test") == ["столы"]

    @pytest.mark.asyncio
    async def test_failed_patch_keeps_original_result(self, settings, fake_sleep, sink):
        def primary(request):
            if request.url.params["s"] == "столы":
                return httpx.Response(200, json={"множественное": STOL_PAYLOAD["множественное"]})
            return httpx.Response(429)

        router = HostRouter(
            probe_test=respond(200),
            primary_test=primary,
            secondary_test=respond(429),
        )
        outcome = await run(router, settings, fake_sleep, sink, word="столы")

        assert "стола" not in outcome.aliases
        assert "столов" in outcome.aliases


class TestOffline:
    @pytest.mark.asyncio
    async def test_probe_failure_skips_providers(self, settings, fake_sleep, sink):
        router = HostRouter(
            probe_test=offline_probe,
            primary_test=respond(200, STOL_PAYLOAD),
            secondary_test=respond(200, STOL_PAYLOAD),
        )
        outcome = await run(router, settings, fake_sleep, sink)

        assert list(outcome.aliases) == STOL_ALIASES
        assert outcome.is_offline
        assert router.words_sent_to("primary.test") == []
        assert sink.stages == ["probe", "offline", "merge", "extract"]

    @pytest.mark.asyncio
    async def test_offline_phrase_needs_internet(self, settings, fake_sleep, sink):
        router = HostRouter(probe_test=offline_probe)
        outcome = await run(router, settings, fake_sleep, sink, word=PHRASE)

        assert outcome.needs_internet
        assert outcome.aliases == ()
        assert not outcome.is_offline

    @pytest.mark.asyncio
    async def test_force_offline_sends_nothing(self, settings, fake_sleep, sink):
        router = HostRouter()
        outcome = await run(router, settings, fake_sleep, sink, force_offline=True)

        assert outcome.is_offline
        assert router.requests == []


class TestEdges:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("word", ["", "   "])
    async def test_blank_input(self, settings, fake_sleep, sink, word):
        router = HostRouter()
        outcome = await run(router, settings, fake_sleep, sink, word=word)

        assert outcome == AliasOutcome.empty()
        assert router.requests == []

    @pytest.mark.asyncio
    async def test_input_is_trimmed(self, settings, fake_sleep, sink):
        router = HostRouter(probe_test=offline_probe)
        outcome = await run(router, settings, fake_sleep, sink, word="  стол ")

        assert list(outcome.aliases) == STOL_ALIASES

    @pytest.mark.asyncio
    async def test_unexpected_failure_gives_empty_outcome(self, settings, fake_sleep):
        class BrokenSink:
            def emit(self, event):
                raise RuntimeError("sink exploded")

        router = HostRouter(probe_test=offline_probe)
        outcome = await run(router, settings, fake_sleep, BrokenSink())

        assert outcome == AliasOutcome.empty()

    @pytest.mark.asyncio
    async def test_concurrent_providers(self, settings, fake_sleep, sink):
        settings = settings.model_copy(update={"CONCURRENT_PROVIDERS": True})
        router = HostRouter(
            probe_test=respond(200),
            primary_test=respond(200, STOL_PAYLOAD),
            secondary_test=respond(500),
        )
        outcome = await run(router, settings, fake_sleep, sink)

        assert list(outcome.aliases) == STOL_ALIASES
        assert {"primary", "secondary"} <= set(sink.stages)

    @pytest.mark.asyncio
    async def test_stage_events_carry_timing(self, settings, fake_sleep, sink):
        router = HostRouter(probe_test=offline_probe)
        await run(router, settings, fake_sleep, sink)

        assert all(e.elapsed_ms >= 0 for e in sink.events)
        assert sink.events[-1].to_dict()["count"] == len(STOL_ALIASES)


@pytest.mark.asyncio
async def test_generate_aliases_entry_point(settings, sink):
    router = HostRouter(
        probe_test=respond(200),
        primary_test=respond(200, STOL_PAYLOAD),
        secondary_test=respond(200, STOL_PAYLOAD),
    )
    outcome = await generate_aliases("стол", settings, transport=router.transport, sink=sink)

    assert list(outcome.aliases) == STOL_ALIASES
    assert not outcome.is_offline
