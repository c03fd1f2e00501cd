"""Video Lookup — resolve a video identifier to its title.

Invariants:
    - Empty result → VideoNotFoundError (404)
    - First item wins when the platform returns more than one
    - A matching item without a snippet is a malformed response (500)
"""

from typing import Protocol

from titleproxy.core.errors import ErrorContext, VideoNotFoundError, YouTubeAPIError
from titleproxy.schemas.video import VideoListResponse


class VideoLister(Protocol):
    async def list_videos(self, video_id: str) -> VideoListResponse: ...


async def lookup_video_title(client: VideoLister, video_id: str) -> str:
    response = await client.list_videos(video_id)
    if not response.items:
        raise VideoNotFoundError(video_id)

    video = response.items[0]
    if video.snippet is None:
        raise YouTubeAPIError(
            "video resource has no snippet", "invalid_response",
            context=ErrorContext(video_id=video_id),
        )
    return video.snippet.title
