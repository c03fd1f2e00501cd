"""Request Dependencies — hand the per-app collaborators to route handlers.

Invariants:
    - Collaborators live on app.state, built by create_app(); no module-level clients
"""

from fastapi import Request

from titleproxy.infrastructure.youtube_client import YouTubeClient


def get_youtube_client(request: Request) -> YouTubeClient:
    return request.app.state.youtube_client
