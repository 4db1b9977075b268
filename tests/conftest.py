"""Shared fixtures: hermetic settings, a fake sleep and host-routed mock transports."""
from typing import Callable

import httpx
import pytest

from rualias.core.config import Settings
from rualias.core.logging import configure_logging
from rualias.engines.events import StageEvent

PROBE_URL = "https://probe.test"
PRIMARY_URL = "https://primary.test/declension"
SECONDARY_URL = "https://secondary.test/declension"

STOL_PAYLOAD = {
    "Р": "стола",
    "Д": "столу",
    "В": "стол",
    "Т": "столом",
    "П": "столе",
    "множественное": {
        "И": "столы",
        "Р": "столов",
        "Д": "столам",
        "В": "столы",
        "Т": "столами",
        "П": "столах",
    },
}

STOL_ALIASES = ["стола", "столу", "столом", "столе", "столы", "столов", "столам", "столами", "столах"]

Handler = Callable[[httpx.Request], httpx.Response]


class FakeSleep:
    """Records requested delays instead of waiting."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class RecordingSink:
    def __init__(self) -> None:
        self.events: list[StageEvent] = []

    def emit(self, event: StageEvent) -> None:
        self.events.append(event)

    @property
    def stages(self) -> list[str]:
        return [e.stage.value for e in self.events]


class HostRouter:
    """Dispatches mock requests by host and records every request seen."""

    def __init__(self, **handlers: Handler) -> None:
        self.handlers = {host.replace("_", "."): h for host, h in handlers.items()}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.handlers.get(request.url.host)
        if handler is None:
            raise httpx.ConnectError("no route to host", request=request)
        return handler(request)

    def words_sent_to(self, host: str) -> list[str]:
        return [r.url.params["s"] for r in self.requests if r.url.host == host]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def respond(status: int = 200, payload=None) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        if payload is None:
            return httpx.Response(status)
        return httpx.Response(status, json=payload)
    return handler


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    configure_logging(level="WARNING")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        PROBE_URL=PROBE_URL,
        PRIMARY_PROVIDER_URL=PRIMARY_URL,
        SECONDARY_PROVIDER_URL=SECONDARY_URL,
        PROVIDER_RETRY_DELAY_SECONDS=0.0,
    )


@pytest.fixture
def fake_sleep() -> FakeSleep:
    return FakeSleep()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
