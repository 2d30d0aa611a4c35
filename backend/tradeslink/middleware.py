import asyncio
import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestTimeoutMiddleware(BaseHTTPMiddleware):
    """Answer 504 when a request takes longer than ``timeout_seconds``."""

    def __init__(self, app, timeout_seconds: float):
        super().__init__(app)
        self.timeout_seconds = timeout_seconds

    async def dispatch(self, request: Request, call_next):
        try:
            return await asyncio.wait_for(call_next(request), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning("Request timed out after %ss: %s %s", self.timeout_seconds, request.method, request.url.path)
            return JSONResponse(
                status_code=504,
                content={"error": "RequestTimeout", "detail": "Request took too long."},
            )
