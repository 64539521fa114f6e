"""
RESTful Services — Path Normalization Middleware
=================================================

What:  Rewrites the request path to its canonical form before routing.
How:   Applies conventions.normalize_request_path() to scope["path"] using
       the application's route templates, so /API/Example and /api/example/
       are routed to /api/example.
When:  Outermost application middleware; runs before the router sees the path.

Only literal template segments change case; path parameter values are kept
as sent. scope["raw_path"] is left as the client sent it, percent-encoding
included. The rewrite is logged at DEBUG so that a client relying on it can
be spotted.
"""

import logging
from typing import Iterable, Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from restful_services.conventions import normalize_request_path

logger = logging.getLogger(__name__)


class PathNormalizationMiddleware(BaseHTTPMiddleware):
    """
    Case-insensitive, trailing-slash tolerant routing.

    Args:
        templates: Canonical route paths, e.g. "/api/status-codes/{code}".
                   Paths matching none of them only lose a trailing slash.
    """

    def __init__(self, app: ASGIApp, templates: Iterable[str] = ()):
        super().__init__(app)
        self.templates: Tuple[str, ...] = tuple(templates)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        original = request.scope["path"]
        normalized = normalize_request_path(original, self.templates)

        if normalized != original:
            logger.debug("Normalized request path %s -> %s", original, normalized)
            # call_next forwards this same scope dict to the router
            request.scope["path"] = normalized

        return await call_next(request)
