"""Video Routes — title lookup by video identifier.

Invariants:
    - Handler delegates to services/video_lookup; no remote logic here
    - Errors propagate as TitleProxyError and are rendered by api/error_handlers
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from titleproxy.api.dependencies import get_youtube_client
from titleproxy.infrastructure.tracing import current_trace_id
from titleproxy.infrastructure.youtube_client import YouTubeClient
from titleproxy.services.video_lookup import lookup_video_title

logger = logging.getLogger(__name__)
router = APIRouter(tags=["videos"])


@router.get("/youtube-video/{video_id}", response_class=PlainTextResponse)
async def get_video_title(
    video_id: str, client: YouTubeClient = Depends(get_youtube_client),
):
    """Return the title of a video as plain text."""
    title = await lookup_video_title(client, video_id)
    logger.info(
        title, extra={"video_id": video_id, "trace_id": current_trace_id()},
    )
    return PlainTextResponse(title)
