"""YouTube Video Schemas — Pydantic models for the videos.list response boundary.

Invariants:
    - Only the fields this service reads are declared; unknown fields are ignored
    - items defaults to [] so an absent key reads as "no match"

Design Decisions:
    - camelCase aliases mirror the wire format; Python side stays snake_case
"""

from pydantic import BaseModel, ConfigDict, Field


class VideoSnippet(BaseModel):
    """The "snippet" part of a video resource."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str
    channel_title: str | None = Field(None, alias="channelTitle")
    description: str | None = None
    published_at: str | None = Field(None, alias="publishedAt")


class Video(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    snippet: VideoSnippet | None = None


class VideoListResponse(BaseModel):
    """Response body of GET /videos."""
    model_config = ConfigDict(extra="ignore")

    kind: str | None = None
    etag: str | None = None
    items: list[Video] = Field(default_factory=list)
