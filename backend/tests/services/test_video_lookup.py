"""Video Lookup — title resolution from a videos.list response."""

import pytest

from titleproxy.core.errors import VideoNotFoundError, YouTubeAPIError
from titleproxy.schemas.video import Video, VideoListResponse
from titleproxy.services.video_lookup import lookup_video_title
from tests.mock_youtube import MockYouTubeClient, video_list


async def test_returns_title_of_single_match():
    yt = MockYouTubeClient({"abc": video_list("abc", "A Title")})
    assert await lookup_video_title(yt, "abc") == "A Title"
    assert yt.calls == ["abc"]


async def test_returns_first_title_when_several_match():
    yt = MockYouTubeClient({"abc": video_list("abc", "One", "Two")})
    assert await lookup_video_title(yt, "abc") == "One"


async def test_empty_title_is_returned_as_is():
    yt = MockYouTubeClient({"abc": video_list("abc", "")})
    assert await lookup_video_title(yt, "abc") == ""


async def test_no_items_raises_not_found():
    with pytest.raises(VideoNotFoundError) as exc_info:
        await lookup_video_title(MockYouTubeClient(), "missing")

    err = exc_info.value
    assert err.video_id == "missing"
    assert err.http_status == 404
    assert err.public_message == "message not found"


async def test_missing_snippet_raises_api_error():
    yt = MockYouTubeClient({"abc": VideoListResponse(items=[Video(id="abc")])})

    with pytest.raises(YouTubeAPIError) as exc_info:
        await lookup_video_title(yt, "abc")

    assert exc_info.value.api_error_type == "invalid_response"


async def test_remote_errors_propagate_unchanged():
    original = YouTubeAPIError("request timed out", "timeout")
    yt = MockYouTubeClient(error=original)

    with pytest.raises(YouTubeAPIError) as exc_info:
        await lookup_video_title(yt, "abc")

    assert exc_info.value is original
