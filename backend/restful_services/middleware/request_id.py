"""
RESTful Services — Request ID Middleware
=========================================

What:  Assigns a correlation ID to each incoming request and returns it in
       the X-Request-ID response header.
How:   Reuses a client-supplied X-Request-ID or generates a short UUID,
       stores it in a ContextVar and request.state.
Who:   Applied to every request via Starlette middleware.

The ID appears in access log lines and in every error body, so a client can
quote it when reporting a problem.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred. Please try again or contact support."

logger = logging.getLogger(__name__)


def internal_error_response(rid: str) -> JSONResponse:
    """Generic 500 body; the exception itself is only logged."""
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": INTERNAL_ERROR_MESSAGE,
            "request_id": rid,
        },
        headers={REQUEST_ID_HEADER: rid} if rid else None,
    )


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. If the client sent X-Request-ID, use it
        2. Otherwise generate an 8-character UUID prefix
        3. Store in ContextVar (loggers, handlers) and request.state (routes)
        4. Echo it in the response headers
        5. Render unexpected exceptions as a 500 carrying the same ID
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        try:
            response = await call_next(request)
        except Exception as exc:
            # Rendered here, inside the request context, so the 500 keeps its id
            logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
            return internal_error_response(rid)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
