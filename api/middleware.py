"""
Request logging middleware for Meal Planner API.
"""

import logging
import re

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


def scrub_sensitive_data(content: str) -> str:
    """Scrub sensitive data from logs."""
    # Scrub API keys passed as query parameters
    content = re.sub(r"(?i)(apikey=)[^&\s]+", r"\1[API-KEY]", content)

    # Scrub other sensitive patterns
    content = re.sub(
        r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}", "[EMAIL]", content
    )

    return content


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log requests and responses with sensitive data scrubbing."""

    async def dispatch(self, request: Request, call_next):
        request_info = f"{request.method} {request.url.path}"
        if request.query_params:
            request_info += f"?{request.query_params}"

        response: Response = await call_next(request)

        logger.info(
            f"{scrub_sensitive_data(request_info)} -> {response.status_code}"
        )
        return response
