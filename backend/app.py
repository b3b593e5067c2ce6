"""FastAPI application entry point for the most-viewed relay."""

import logging
import sys
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings as default_settings
from errors import ConfigError, register_error_handlers
from models import CapiResponse
from services.cache import TTLCache
from services.capi import CapiClient
from services.most_viewed import MostViewedService

# Structured logging: JSON for production, human-readable for local
if default_settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the app. ``transport`` replaces the network layer (tests)."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        problems = settings.validate()
        if problems:
            raise ConfigError(problems)

        http_client = httpx.AsyncClient(transport=transport, timeout=settings.capi_timeout_seconds)
        cache: TTLCache[CapiResponse] = TTLCache(
            ttl_seconds=settings.cache_ttl_seconds,
            cleanup_interval_seconds=settings.cache_cleanup_seconds,
        )
        app.state.settings = settings
        app.state.most_viewed = MostViewedService(
            client=CapiClient(http_client, settings.capi_base_url, settings.capi_api_key),
            cache=cache,
            cached_editions=settings.cached_editions,
        )
        logger.info(
            "Relaying %s (cached: %s, ttl=%ss, format=%s)",
            settings.capi_base_url,
            ",".join(sorted(settings.cached_editions)),
            settings.cache_ttl_seconds,
            settings.response_format,
        )
        try:
            yield
        finally:
            await http_client.aclose()

    app = FastAPI(title="Most Viewed Relay", version="1.0.0", lifespan=lifespan)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.health import router as health_router
    from routes.most_viewed import router as most_viewed_router

    app.include_router(health_router)
    app.include_router(most_viewed_router)

    return app


app = create_app()


def main() -> None:
    uvicorn.run(app, host="0.0.0.0", port=default_settings.port)


if __name__ == "__main__":
    main()
