"""FastAPI application server."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from fulfillment_bridge.api.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from fulfillment_bridge.api.routes import router
from fulfillment_bridge.config import Settings, get_settings
from fulfillment_bridge.observability.logging import configure_logging
from fulfillment_bridge.service import SyncService

logger = logging.getLogger(__name__)

_REQUIRED_SETTINGS = (
    "shopify_store_domain",
    "shopify_access_token",
    "shopify_location_id",
    "shopify_webhook_secret",
    "finerworks_api_base",
    "finerworks_api_key",
    "finerworks_web_api_key",
)


def create_app(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Explicit settings; defaults to the environment-derived ones.
        transport: Optional httpx transport for both API clients (used by tests).
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(level=settings.log_level, json_format=settings.log_json)
        logger.info("Starting Fulfillment Bridge...")

        missing = [name for name in _REQUIRED_SETTINGS if not getattr(settings, name)]
        if missing:
            logger.warning(f"Missing configuration: {', '.join(missing)}")

        app.state.sync_service = SyncService.from_settings(settings, transport=transport)
        logger.info("Fulfillment Bridge ready")

        yield

        logger.info("Shutting down Fulfillment Bridge...")
        await app.state.sync_service.close()
        logger.info("Shutdown complete")

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description="Syncs products, orders and tracking between Shopify and FinerWorks.",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Security headers (X-Content-Type-Options, X-Frame-Options)
    app.add_middleware(SecurityHeadersMiddleware)

    # Add request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(router)

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "healthy", "version": settings.api_version}

    if settings.enable_metrics:

        @app.get("/metrics", include_in_schema=False)
        async def metrics() -> Response:
            """Prometheus metrics endpoint."""
            return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return app


# Create app instance
app = create_app()
