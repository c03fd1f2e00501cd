"""Error Hierarchy — typed, categorized exceptions for all lookup failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - public_message is the only text that reaches the client (plain-text body)
    - Not-found is 404; every remote failure is 500

Design Decisions:
    - Single hierarchy with TitleProxyError base: FastAPI global handler catches all
    - ErrorContext as dataclass: correlation fields without coupling to logging framework
"""

from dataclasses import dataclass
from enum import Enum

INTERNAL_SERVER_ERROR_MESSAGE = "internal server error"
NOT_FOUND_MESSAGE = "message not found"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Request context attached to an error for log correlation."""
    video_id: str | None = None


class TitleProxyError(Exception):
    """Base exception for all title proxy errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        public_message: str = INTERNAL_SERVER_ERROR_MESSAGE,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.public_message = public_message

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "video_id": self.context.video_id,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class VideoNotFoundError(TitleProxyError):
    """The platform returned no video for the identifier."""
    def __init__(self, video_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.video_id = video_id
        super().__init__(
            f"Video '{video_id}' not found",
            "VIDEO_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404, NOT_FOUND_MESSAGE,
        )
        self.video_id = video_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class YouTubeAPIError(TitleProxyError):
    """YouTube Data API call failed (transport, timeout, status or payload)."""
    def __init__(
        self,
        message: str,
        api_error_type: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        category = (
            ErrorCategory.TIMEOUT if api_error_type == "timeout"
            else ErrorCategory.EXTERNAL_API
        )
        super().__init__(
            f"YouTube API error ({api_error_type}): {message}",
            "YOUTUBE_API_ERROR", category,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.api_error_type = api_error_type
        self.status_code = status_code

    def log_extra(self) -> dict:
        extra = super().log_extra()
        extra["api_error_type"] = self.api_error_type
        extra["status_code"] = self.status_code
        return extra
