"""
API Gateway Middleware

Access logging bound to a per-request correlation ID, reporting the API
version each request was served with.
"""

import time
from collections.abc import Callable
from uuid import uuid4

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from api_versioning import get_api_version

logger = structlog.get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
VERSION_HEADER = "X-API-Version"


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Access log middleware.

    Binds ``correlation_id`` into structlog's context for everything logged
    while the request runs, and echoes the served API version back to clients.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid4())
        request.state.correlation_id = correlation_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
        )
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                error=str(e),
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise

        api_version = get_api_version(request)
        logger.info(
            "Request served",
            status_code=response.status_code,
            api_version=api_version,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )

        response.headers[CORRELATION_HEADER] = correlation_id
        if api_version:
            response.headers[VERSION_HEADER] = api_version
        return response
