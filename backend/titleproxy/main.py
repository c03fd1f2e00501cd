"""Title Proxy API — FastAPI application factory.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Settings, YouTube client and tracer provider are built here and injected
      through app.state; nothing is configured at import time
    - Global error handlers map TitleProxyError → status code + plain-text body
    - Every request is traced by the app's own tracer provider

Design Decisions:
    - Factory over module-level app: the credential is required, so importing
      the module must not read it (run with `uvicorn --factory titleproxy.main:create_app`)
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Collaborators passed in by the caller are not closed by the app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from opentelemetry.sdk.trace import TracerProvider

from titleproxy import __version__
from titleproxy.api.error_handlers import register_error_handlers
from titleproxy.api.routes import health, videos
from titleproxy.config import Settings, get_settings
from titleproxy.infrastructure.observability import setup_logging
from titleproxy.infrastructure.tracing import (
    SegmentNamer,
    build_tracer_provider,
    instrument_app,
)
from titleproxy.infrastructure.youtube_client import YouTubeClient
from titleproxy.services.video_lookup import VideoLister

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    youtube_client: VideoLister | None = None,
    tracer_provider: TracerProvider | None = None,
) -> FastAPI:
    """Build the ASGI application with its collaborators wired in."""
    settings = settings or get_settings()
    owns_provider = tracer_provider is None
    provider = tracer_provider or build_tracer_provider(settings)
    owns_client = youtube_client is None
    client = youtube_client or YouTubeClient(
        api_key=settings.youtube_api_key,
        base_url=settings.youtube_api_base_url,
        timeout_seconds=settings.youtube_timeout_seconds,
        tracer_provider=provider,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(f"Title proxy {__version__} started")
        yield
        logger.info("Title proxy shutting down")
        if owns_client:
            await client.aclose()
        if owns_provider:
            provider.shutdown()

    app = FastAPI(title="Video Title Proxy", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.youtube_client = client

    app.include_router(health.router)
    app.include_router(videos.router)

    register_error_handlers(app)

    instrument_app(
        app, provider,
        SegmentNamer(settings.tracing_service_name, settings.tracing_segment_pattern),
    )
    return app
