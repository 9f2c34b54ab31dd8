"""
NoteShelf Backend: Request Logging Middleware
=============================================

What:  One access-log line per HTTP request.
How:   Measures time around call_next and logs method, path, status and
       duration, tagged with the request ID.

Logged: method, path, status, duration, client IP, request ID.
Not logged: request bodies (note content is personal data).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from noteshelf.middleware.request_id import request_id_var

logger = logging.getLogger("noteshelf.access")

# Probe endpoints hit every few seconds by orchestrators
QUIET_PATHS = {"/health", "/test"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each request with a level derived from the response status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        rid = request_id_var.get("")
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
