"""
RESTful Services — Example Resource Route Handlers
===================================================

What:  One logical resource, /api/example, with one handler per HTTP verb.
How:   build_resource_router() binds GET, POST, PUT, PATCH, DELETE and
       OPTIONS on a single static path to fixed responses.
Who:   Mounted by main.create_app(); exercised by any HTTP client.

REST (Representational State Transfer) in one paragraph:
    Resources expose directory-like URIs and transfer representations (JSON)
    of their state. Messages use HTTP methods explicitly. Interactions are
    stateless: the server stores no client context between requests, the
    client holds session state.

Verb semantics demonstrated here:

    Verb     Response          Safe   Idempotent
    ───────  ────────────────  ─────  ──────────
    GET      401 Unauthorized  yes    yes
    POST     201 Created       no     no
    PUT      200 OK            no     yes
    PATCH    200 OK            no     no
    DELETE   200 OK            no     yes
    OPTIONS  200 OK            yes    yes

    - GET must yield the same result for the same parameters.
    - POST creates; sending the same body twice may create two resources.
    - PUT replaces; the client must send every field, ids included, or the
      omitted fields are reset.
    - PATCH applies a partial update.
    - DELETE of an already-deleted resource leaves the same end state.
    - OPTIONS reports the communication options available on the resource.

None of the handlers touch server state. Each is a fixed mapping from verb
to response.
"""

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, HTTPException, Response
from fastapi.responses import JSONResponse

from restful_services.config import settings
from restful_services.conventions import validate_resource_path
from restful_services.exceptions import UnauthorizedError
from restful_services.schemas.common import ErrorResponse
from restful_services.status_codes import openapi_responses

logger = logging.getLogger(__name__)

EXAMPLE_RESOURCE_PATH = "/api/example"

# Advertised in the Allow header of OPTIONS responses
ALLOWED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")

# Standard verbs with no handler; answered with 405 and the full Allow list
UNBOUND_METHODS = ("HEAD", "TRACE", "CONNECT")


def build_resource_router(
    path: str,
    payload_type: Any = Any,
    tags: Optional[List[str]] = None,
) -> APIRouter:
    """
    Build a router exposing the six stub verbs on `path`.

    Args:
        path:         Resource path. Must follow the REST URI conventions
                      (lowercase, hyphens, no trailing slash, no extension).
        payload_type: Type the POST body is parsed into. The default `Any`
                      accepts arbitrary JSON; a Pydantic model enforces a
                      shape (invalid bodies become 400 responses).
        tags:         OpenAPI tags for the generated routes.

    Raises:
        ValueError: If `path` breaks a URI convention.
    """
    path = validate_resource_path(path)
    router = APIRouter(tags=tags or ["Example"])

    # GET documents the alternatives a real implementation would choose from:
    # 200 with a body, 204 with none, 307/308 redirects, 401 or 403.
    get_responses = openapi_responses(200, 204, 307, 308, 401, 403)
    get_responses[401]["model"] = ErrorResponse
    get_responses[403]["model"] = ErrorResponse

    @router.get(
        path,
        responses=get_responses,
        summary="Read the resource (always unauthorized)",
        description=(
            "Safe and idempotent. This example always answers 401 Unauthorized "
            "with a WWW-Authenticate challenge, whatever the query parameters."
        ),
    )
    async def read_resource() -> Response:
        raise UnauthorizedError(realm=settings.auth_realm)

    @router.post(
        path,
        status_code=201,
        responses=openapi_responses(201, 400),
        summary="Create a resource",
        description=(
            "Not idempotent. Accepts any JSON payload and answers 201 Created "
            "with an empty Location header; nothing is stored."
        ),
    )
    async def create_resource(payload: payload_type = Body(default=None)) -> Response:
        logger.info(
            "Create request on %s: payload type=%s",
            path,
            type(payload).__name__,
        )
        # Location normally carries the URI (id) of the new resource
        return JSONResponse(status_code=201, content="", headers={"Location": ""})

    @router.put(
        path,
        response_class=Response,
        responses=openapi_responses(200),
        summary="Replace the resource",
        description=(
            "Idempotent. Real implementations need the complete representation, "
            "ids included; this example ignores the body and answers 200."
        ),
    )
    async def replace_resource() -> Response:
        return Response(status_code=200)

    @router.patch(
        path,
        response_class=Response,
        responses=openapi_responses(200),
        summary="Partially update the resource",
        description="Not idempotent. Ignores the body and answers 200.",
    )
    async def update_resource() -> Response:
        return Response(status_code=200)

    @router.delete(
        path,
        response_class=Response,
        responses=openapi_responses(200),
        summary="Delete the resource",
        description="Idempotent. Always answers 200, including on repeated calls.",
    )
    async def delete_resource() -> Response:
        return Response(status_code=200)

    @router.options(
        path,
        response_class=Response,
        responses=openapi_responses(200),
        summary="Describe communication options",
        description="Safe and idempotent. Answers 200 with an Allow header.",
    )
    async def resource_options() -> Response:
        return Response(status_code=200, headers={"Allow": ", ".join(ALLOWED_METHODS)})

    @router.api_route(path, methods=list(UNBOUND_METHODS), include_in_schema=False)
    async def method_not_allowed() -> Response:
        # The router's own 405 would list only the first matching route's verbs
        raise HTTPException(status_code=405, headers={"Allow": ", ".join(ALLOWED_METHODS)})

    return router


router = build_resource_router(EXAMPLE_RESOURCE_PATH)
