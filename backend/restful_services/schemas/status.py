"""
RESTful Services — Status Catalog Schemas
==========================================

What:  Response models for the HTTP status code reference endpoints.
Who:   Built by restful_services.status_codes; returned by routes/status.py.
"""

from typing import List

from pydantic import BaseModel, Field


class StatusCodeInfo(BaseModel):
    """One catalogued HTTP status code."""
    code: int = Field(description="Numeric HTTP status code", ge=100, le=599)
    phrase: str = Field(description="Reason phrase, e.g. 'Not Found'")
    category: str = Field(
        description="Status class: informational, success, redirection, client_error, server_error"
    )


class StatusCodeListResponse(BaseModel):
    """
    What:  List wrapper for GET /api/status-codes.
    Why total_count: Clients filtering by category can show "12 codes" without
           counting the array themselves.
    """
    codes: List[StatusCodeInfo] = Field(description="Catalogued status codes, ascending")
    total_count: int = Field(description="Number of codes returned")
