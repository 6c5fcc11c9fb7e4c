"""Application middleware."""

import logging
import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests and responses."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        """Process request and log details."""
        request_id = str(uuid.uuid4())[:8]
        start_time = time.perf_counter()
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            logger.error(
                "%s %s ERROR %.3fs - %s",
                request.method,
                request.url.path,
                duration,
                e,
                extra={"request_id": request_id},
            )
            raise

        duration = time.perf_counter() - start_time

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{duration:.3f}"

        # Skip health checks to reduce noise
        if request.url.path != "/health":
            logger.info(
                "%s %s %d %.3fs",
                request.method,
                request.url.path,
                response.status_code,
                duration,
                extra={"request_id": request_id},
            )

        return response
