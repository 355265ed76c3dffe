import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from app.api.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def greeting(hostname: str) -> str:
    return f"Hello from {hostname}!"


def is_slow(hostname: str, slow_hostnames: frozenset[str]) -> bool:
    return hostname in slow_hostnames


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the greeting service.

    The hostname is captured once here; every request handled by the
    returned app answers with it.
    """
    settings = settings or get_settings()
    hostname = settings.hostname
    delay = settings.slow_delay if is_slow(hostname, settings.slow_hostnames) else 0.0

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info(
            "Serving as %r (environment=%s, delay=%.3fs, schema=%s)",
            hostname,
            settings.environment,
            delay,
            settings.enable_schema_endpoint,
        )
        yield

    app = FastAPI(
        title="hello-host",
        version="1.0.0",
        lifespan=lifespan,
        openapi_url="/openapi/v1.json" if settings.enable_schema_endpoint else None,
        docs_url=None,
        redoc_url=None,
    )

    if settings.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)

    @app.get("/", response_class=PlainTextResponse)
    async def read_root() -> str:
        if delay:
            logger.debug("Delaying response from %s by %.3fs", hostname, delay)
            await asyncio.sleep(delay)
        return greeting(hostname)

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
