"""
RESTful Services — Request Logging Middleware
==============================================

What:  One structured access-log line per HTTP request.
How:   Times the downstream call and logs method, path, status, duration,
       request id and client address on the `restful_services.access` logger.
When:  Runs inside RequestIDMiddleware so the request id is already set.

Log levels by status:
    5xx → ERROR
    4xx → WARNING (GET /api/example logs a WARNING on every call: it is a 401)
    else → INFO

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from restful_services.middleware.request_id import request_id_var

logger = logging.getLogger("restful_services.access")

# Probed every few seconds by orchestrators; not worth a log line
QUIET_PATHS = {"/health"}


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client is None under some test transports
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        path = request.url.path

        if path in QUIET_PATHS:
            return await call_next(request)

        try:
            response = await call_next(request)
        except Exception:
            # RequestIDMiddleware turns this into the 500 response
            self._log(method, path, 500, start_time, client_ip)
            raise

        self._log(method, path, response.status_code, start_time, client_ip)
        return response

    @staticmethod
    def _log(method: str, path: str, status: int, start_time: float, client_ip: str) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        rid = request_id_var.get("")

        logger.log(
            level_for_status(status),
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
