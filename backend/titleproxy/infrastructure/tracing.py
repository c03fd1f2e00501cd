"""Request Tracing — OpenTelemetry provider, segment naming, and instrumentation wiring.

Invariants:
    - Every inbound request runs inside a server span from the app's own provider
    - Server spans carry segment.name: the request host when it matches the
      configured pattern, otherwise the fixed service name
    - The outbound httpx client is instrumented on the same provider, so the
      remote call is a child of the request span

Design Decisions:
    - Provider is owned by the app (no trace.set_tracer_provider): tests get an
      isolated in-memory provider, production gets the exporter from settings
    - Host patterns use shell-style wildcards, case-insensitive
"""

import fnmatch
import logging

import httpx
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.trace import Span, format_trace_id

from titleproxy.config import Settings

logger = logging.getLogger(__name__)

SEGMENT_NAME_ATTRIBUTE = "segment.name"


class SegmentNamer:
    """Names request segments after the host when it matches a pattern."""

    def __init__(self, fallback_name: str, host_pattern: str | None = None):
        self.fallback_name = fallback_name
        self.host_pattern = host_pattern.lower() if host_pattern else None

    def name_for(self, host: str | None) -> str:
        if host and self.host_pattern:
            hostname = host.split(":", 1)[0].lower()
            if fnmatch.fnmatchcase(hostname, self.host_pattern):
                return hostname
        return self.fallback_name

    def server_request_hook(self, span: Span, scope: dict) -> None:
        """FastAPI instrumentation hook: stamp the segment name on the server span."""
        if span is None or not span.is_recording():
            return
        span.set_attribute(SEGMENT_NAME_ATTRIBUTE, self.name_for(_scope_host(scope)))


def _scope_host(scope: dict) -> str | None:
    for key, value in scope.get("headers") or ():
        if key.lower() == b"host":
            return value.decode("latin-1")
    server = scope.get("server")
    return server[0] if server else None


def _build_exporter(settings: Settings) -> SpanExporter | None:
    if settings.tracing_exporter == "otlp":
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
            OTLPSpanExporter,
        )
        if settings.tracing_otlp_endpoint:
            return OTLPSpanExporter(endpoint=settings.tracing_otlp_endpoint)
        return OTLPSpanExporter()
    if settings.tracing_exporter == "console":
        return ConsoleSpanExporter()
    return None


def build_tracer_provider(settings: Settings) -> TracerProvider:
    """Create the app's tracer provider with the exporter chosen in settings."""
    provider = TracerProvider(
        resource=Resource.create({SERVICE_NAME: settings.tracing_service_name}),
    )
    exporter = _build_exporter(settings)
    if exporter is not None:
        provider.add_span_processor(BatchSpanProcessor(exporter))
    logger.info(f"Tracing exporter: {settings.tracing_exporter}")
    return provider


def instrument_app(
    app: FastAPI, provider: TracerProvider, namer: SegmentNamer,
) -> None:
    FastAPIInstrumentor.instrument_app(
        app,
        tracer_provider=provider,
        server_request_hook=namer.server_request_hook,
    )


def instrument_http_client(
    client: httpx.AsyncClient, provider: TracerProvider,
) -> None:
    HTTPXClientInstrumentor().instrument_client(client, tracer_provider=provider)


def current_trace_id() -> str | None:
    """Hex trace id of the active span, for log correlation."""
    ctx = trace.get_current_span().get_span_context()
    return format_trace_id(ctx.trace_id) if ctx.is_valid else None
