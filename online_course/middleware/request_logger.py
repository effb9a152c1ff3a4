# ==============================================================================
# REQUEST LOGGER MIDDLEWARE
# ==============================================================================
# Request/response logging with request id and timing headers
# ==============================================================================

from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from online_course.core.constants import APIConstants

logger = logging.getLogger(__name__)


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request/response logging.

    Logs method, path, status and duration of every request and tags the
    response with ``X-Request-ID`` and ``X-Response-Time``. The request id
    is also stored on ``request.state.request_id``.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        """Process request with logging."""
        request_id = uuid.uuid4().hex[:8]
        request.state.request_id = request_id

        start_time = time.perf_counter()

        logger.debug(
            f"[{request_id}] {request.method} {request.url.path} - Started"
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"[{request_id}] {request.method} {request.url.path} "
                f"- Error ({duration_ms:.2f}ms): {e}"
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000

        log_level = logging.INFO if response.status_code < 400 else logging.WARNING
        logger.log(
            log_level,
            f"[{request_id}] {request.method} {request.url.path} "
            f"- {response.status_code} ({duration_ms:.2f}ms)"
        )

        response.headers[APIConstants.REQUEST_ID_HEADER] = request_id
        response.headers[APIConstants.RESPONSE_TIME_HEADER] = f"{duration_ms:.2f}ms"

        return response
