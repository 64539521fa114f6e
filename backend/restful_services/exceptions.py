"""
RESTful Services — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the client-error scenarios the
       example resource demonstrates.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching HTTP status.
Who:   Raised by route handlers; caught by global handlers.

Exception Hierarchy:
    RestfulServicesError (base)  → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── UnauthorizedError        → 401 Unauthorized (credentials missing/invalid)
    ├── ForbiddenError           → 403 Forbidden (authenticated, not permitted)
    └── NotFoundError            → 404 Not Found

Each class declares `status_code` and `error_code` so that a single handler
in main.py can render the whole hierarchy.
"""

from typing import Any, Dict, Optional


class RestfulServicesError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged; returned only by handlers
                  that opt in via `expose_context`)
    """

    status_code = 500
    error_code = "server_error"
    expose_context = False

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    @property
    def headers(self) -> Dict[str, str]:
        """Extra response headers for this error (none by default)."""
        return {}


class ValidationError(RestfulServicesError):
    """
    Raised when client input fails validation.

    When:    Unknown status category filter, malformed request body.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Unknown status category 'teapots'",
            "details": {"field": "category"}
        }
    """

    status_code = 400
    error_code = "validation_error"
    expose_context = True

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UnauthorizedError(RestfulServicesError):
    """
    Raised when a request lacks valid credentials for the resource.

    When:    GET /api/example (always, as the demonstration of a 401).
    HTTP:    401 Unauthorized, with a WWW-Authenticate challenge header.

    Note:
        401 means "who are you?" and 403 means "I know who you are, and no".
        A 401 response must carry WWW-Authenticate (RFC 9110 §11.6.1).
    """

    status_code = 401
    error_code = "unauthorized"

    def __init__(
        self,
        message: str = "Authentication is required to access this resource",
        realm: str = "api",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["realm"] = realm
        super().__init__(message=message, context=ctx)
        self.realm = realm

    @property
    def headers(self) -> Dict[str, str]:
        return {"WWW-Authenticate": f'Bearer realm="{self.realm}"'}


class ForbiddenError(RestfulServicesError):
    """
    Raised when the caller is known but not allowed to perform the action.

    HTTP:    403 Forbidden
    """

    status_code = 403
    error_code = "forbidden"

    def __init__(
        self,
        message: str = "You do not have permission to perform this action",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(RestfulServicesError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/status-codes/{code} for a code missing from the catalog.
    HTTP:    404 Not Found
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
