"""
RESTful Services — Shared Response Schemas
===========================================

What:  Pydantic models shared by every route: the error envelope and the
       health check payload.
Who:   ErrorResponse is documented on routes via `responses=`; the exception
       handlers in main.py emit bodies of the same shape.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "unauthorized", "not_found")
        message: Human-readable description for display to users
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "unauthorized",
            "message": "Authentication is required to access this resource",
            "request_id": "5f2b9c1a"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response. Returned by GET /health."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    uptime_seconds: float = Field(description="Seconds since service started")
