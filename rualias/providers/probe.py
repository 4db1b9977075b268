"""Connectivity probe: one HEAD request, any answer counts as online."""
import httpx

from rualias.core.config import Settings
from rualias.core.errors import AppError, Err, Ok, Result, network_error
from rualias.core.logging import provider_logger
from rualias.core.resilience import TimeoutPolicy

log = provider_logger()


class ConnectivityProbe:
    """Reachability check against a reference host. No retry."""

    def __init__(self, client: httpx.AsyncClient, url: str, timeout_seconds: float = 3.0):
        self._client = client
        self.url = url
        self._timeout = TimeoutPolicy[int](timeout_seconds, "connectivity_probe")

    @classmethod
    def from_settings(cls, client: httpx.AsyncClient, settings: Settings) -> "ConnectivityProbe":
        return cls(client, settings.PROBE_URL, settings.PROBE_TIMEOUT_SECONDS)

    async def check(self) -> bool:
        """True if the request completed in time, whatever the HTTP status."""
        match await self._timeout.execute(self._head):
            case Ok(status):
                log.debug("connectivity_probe_succeeded", url=self.url, status=status)
                return True
            case Err(error):
                log.info("connectivity_probe_failed", url=self.url, error_code=error.code.name)
                return False

    async def _head(self) -> Result[int, AppError]:
        try:
            response = await self._client.head(self.url)
        except httpx.HTTPError as e:
            return network_error(
                f"Probe request failed: {type(e).__name__}",
                url=self.url,
                origin="connectivity_probe",
                cause=e,
            )
        return Ok(response.status_code)
