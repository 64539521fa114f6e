"""
RESTful Services — Status Code Reference Routes
================================================

What:  Read-only access to the HTTP status code catalog.
How:   GET /api/status-codes lists codes, optionally filtered by class;
       GET /api/status-codes/{code} returns one entry.
Who:   API consumers learning what a status means; the OpenAPI docs.

Both routes are safe and idempotent: the catalog is static module data.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query

from restful_services.exceptions import NotFoundError, ValidationError
from restful_services.schemas.common import ErrorResponse
from restful_services.schemas.status import StatusCodeInfo, StatusCodeListResponse
from restful_services.status_codes import (
    STATUS_PHRASES,
    StatusCategory,
    all_codes,
    codes_in,
    describe,
)

logger = logging.getLogger(__name__)

STATUS_CODES_PATH = "/api/status-codes"
STATUS_CODE_PATH = STATUS_CODES_PATH + "/{code}"

router = APIRouter(tags=["Status Codes"])


@router.get(
    STATUS_CODES_PATH,
    response_model=StatusCodeListResponse,
    responses={
        200: {"description": "Catalogued status codes", "model": StatusCodeListResponse},
        400: {"description": "Unknown category", "model": ErrorResponse},
    },
    summary="List HTTP status codes",
)
async def list_status_codes(
    category: Optional[str] = Query(
        default=None,
        description=(
            "Filter by class: informational, success, redirection, "
            "client_error or server_error (case-insensitive)"
        ),
    ),
) -> StatusCodeListResponse:
    if category is None:
        codes = all_codes()
    else:
        try:
            status_category = StatusCategory(category.strip().lower())
        except ValueError:
            raise ValidationError(
                message=f"Unknown status category '{category}'",
                field="category",
                context={"allowed": [c.value for c in StatusCategory]},
            )
        codes = codes_in(status_category)

    return StatusCodeListResponse(codes=codes, total_count=len(codes))


@router.get(
    STATUS_CODE_PATH,
    response_model=StatusCodeInfo,
    responses={
        200: {"description": "Status code details", "model": StatusCodeInfo},
        404: {"description": "Code not in the catalog", "model": ErrorResponse},
    },
    summary="Describe one HTTP status code",
)
async def get_status_code(code: int) -> StatusCodeInfo:
    """
    Look up a single status code.

    Codes outside the catalog (e.g. 299, or 700) answer 404; a non-numeric
    code fails path validation and answers 400.
    """
    if code not in STATUS_PHRASES:
        raise NotFoundError(resource="status code", resource_id=str(code))
    return describe(code)
