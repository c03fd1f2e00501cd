"""API test fixtures — FastAPI app with a mock YouTube client and in-memory tracing.

Invariants:
    - Every test gets a fresh app, mock client and span exporter
    - No network: the YouTube client is replaced by MockYouTubeClient

Design Decisions:
    - Collaborators injected through create_app(), not monkeypatched
    - SimpleSpanProcessor: spans are exported synchronously when they end,
      so assertions can run right after the response
"""

import pytest
from httpx import ASGITransport, AsyncClient
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
    InMemorySpanExporter,
)

from titleproxy.config import Settings
from titleproxy.main import create_app
from tests.mock_youtube import MockYouTubeClient


@pytest.fixture
def settings():
    return Settings(youtube_api_key="test-fake-api-key", _env_file=None)


@pytest.fixture
def span_exporter():
    return InMemorySpanExporter()


@pytest.fixture
def tracer_provider(span_exporter):
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    yield provider
    provider.shutdown()


@pytest.fixture
def youtube():
    return MockYouTubeClient()


@pytest.fixture
def app(settings, youtube, tracer_provider):
    return create_app(settings, youtube_client=youtube, tracer_provider=tracer_provider)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
