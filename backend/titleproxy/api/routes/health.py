"""Health & Error Probes — fixed responses for load balancers and alerting checks.

Invariants:
    - GET / always returns 200 "ok" if the process is up
    - GET /500 always returns 500 "internal server error" (exercises error alarms)
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from titleproxy.core.errors import INTERNAL_SERVER_ERROR_MESSAGE

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def health_check():
    """Basic liveness probe."""
    return PlainTextResponse("ok", status_code=status.HTTP_200_OK)


@router.get("/500", response_class=PlainTextResponse)
async def forced_error():
    """Always fails — lets operators verify 5xx monitoring end to end."""
    logger.warning("Forced internal server error requested")
    return PlainTextResponse(
        INTERNAL_SERVER_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
