"""YouTube Data API Client — async videos.list lookup with a fixed timeout and error mapping.

Invariants:
    - Only the "snippet" part is requested
    - The whole exchange (connect, send, full body, decode) shares one deadline
      of timeout_seconds; no retry, no backoff
    - All failures mapped to YouTubeAPIError (core/errors.py)
    - The API key travels in the X-Goog-Api-Key header, never in the URL,
      so it cannot leak into access logs or span attributes

Design Decisions:
    - One httpx.AsyncClient per application: connection pooling, closed on shutdown
    - transport parameter lets tests plug in httpx.MockTransport
    - httpx.Timeout bounds each phase; asyncio.timeout bounds the whole call
"""

import asyncio
import logging

import httpx
from opentelemetry.sdk.trace import TracerProvider

from titleproxy.core.errors import ErrorContext, YouTubeAPIError
from titleproxy.infrastructure.tracing import instrument_http_client
from titleproxy.schemas.video import VideoListResponse

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Goog-Api-Key"
VIDEO_PARTS = ("snippet",)


class YouTubeClient:
    """Thin async wrapper over the YouTube Data API v3 videos endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://youtube.googleapis.com/youtube/v3",
        timeout_seconds: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
        tracer_provider: TracerProvider | None = None,
    ):
        self.timeout_seconds = timeout_seconds
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout_seconds),
            headers={API_KEY_HEADER: api_key},
            transport=transport,
        )
        if tracer_provider is not None:
            instrument_http_client(self.client, tracer_provider)

    async def list_videos(self, video_id: str) -> VideoListResponse:
        """GET /videos?part=snippet&id=<video_id>."""
        context = ErrorContext(video_id=video_id)
        try:
            async with asyncio.timeout(self.timeout_seconds):
                response = await self.client.get(
                    "/videos",
                    params={"part": ",".join(VIDEO_PARTS), "id": video_id},
                )
                response.raise_for_status()
                result = VideoListResponse.model_validate(response.json())
            logger.debug(
                f"videos.list returned {len(result.items)} item(s)",
                extra={"video_id": video_id},
            )
            return result

        except (httpx.TimeoutException, TimeoutError):
            raise YouTubeAPIError(
                "request timed out", "timeout", context=context,
            )

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            raise YouTubeAPIError(
                f"HTTP {status_code}: {_error_reason(e.response)}",
                "http_status",
                status_code=status_code,
                context=context,
            )

        except httpx.TransportError as e:
            raise YouTubeAPIError(
                f"{type(e).__name__}: {e}", "connection_error", context=context,
            )

        except ValueError as e:
            # JSONDecodeError and pydantic ValidationError are both ValueErrors
            raise YouTubeAPIError(
                f"undecodable response: {e}", "invalid_response", context=context,
            )

    async def aclose(self) -> None:
        await self.client.aclose()


def _error_reason(response: httpx.Response) -> str:
    """Extract error.message from a Google API error body, if any."""
    try:
        message = response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return response.reason_phrase or "unknown error"
    return str(message)
