from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from rualias.api import aliases
from rualias.core.config import Settings, settings as default_settings
from rualias.core.errors.handlers import register_error_handlers
from rualias.core.logging import configure_logging, get_logger
from rualias.core.middleware import RequestLoggingMiddleware

log = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the API; `transport` lets tests swap the network for a mock."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info("startup", message="rualias API starting up")
        app.state.http_client = httpx.AsyncClient(transport=transport, follow_redirects=True)
        yield
        log.info("shutdown", message="rualias API shutting down")
        await app.state.http_client.aclose()

    app = FastAPI(
        title="rualias API",
        description="Russian declension aliases from remote providers with an offline fallback",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_error_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(aliases.router, prefix="/api", tags=["aliases"])

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


configure_logging(level=default_settings.LOG_LEVEL, json_logs=default_settings.LOG_JSON)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    log.info(
        "server_config",
        host=default_settings.BACKEND_HOST,
        port=default_settings.BACKEND_PORT,
        debug=default_settings.APP_DEBUG,
    )
    uvicorn.run(
        "rualias.main:app",
        host=default_settings.BACKEND_HOST,
        port=default_settings.BACKEND_PORT,
        reload=default_settings.APP_DEBUG,
        log_config=None,
    )
