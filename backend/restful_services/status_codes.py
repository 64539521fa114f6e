"""
RESTful Services — HTTP Status Code Catalog
============================================

What:  The HTTP status code reference table as data, grouped by class.
How:   A module-level mapping of code → reason phrase plus small lookup
       helpers. Route decorators use `openapi_responses()` so that the
       OpenAPI document describes each status with the phrase from this table.
Who:   Used by the example resource routes, the status-codes routes, and
       the exception handlers (to name Starlette HTTP errors).

Status classes:
    1XX - informational
    2XX - success
    3XX - redirection
    4XX - client error
    5XX - server error

The table includes a few widely-seen non-IANA codes (418, 444, 499, 599)
because clients meet them behind proxies such as nginx.
"""

from enum import Enum
from typing import Any, Dict, List

from restful_services.schemas.status import StatusCodeInfo


class StatusCategory(str, Enum):
    """Status class, determined by the first digit of the code."""

    INFORMATIONAL = "informational"
    SUCCESS = "success"
    REDIRECTION = "redirection"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"


_CATEGORY_BY_DIGIT = {
    1: StatusCategory.INFORMATIONAL,
    2: StatusCategory.SUCCESS,
    3: StatusCategory.REDIRECTION,
    4: StatusCategory.CLIENT_ERROR,
    5: StatusCategory.SERVER_ERROR,
}


STATUS_PHRASES: Dict[int, str] = {
    # ── 1xx Informational ─────────────────────────────────────────────────
    100: "Continue",
    101: "Switching Protocols",
    102: "Processing",
    # ── 2xx Success ───────────────────────────────────────────────────────
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    207: "Multi-Status",
    208: "Already Reported",
    226: "IM Used",
    # ── 3xx Redirection ───────────────────────────────────────────────────
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    307: "Temporary Redirect",
    308: "Permanent Redirect",
    # ── 4xx Client Error ──────────────────────────────────────────────────
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Payload Too Large",
    414: "Request-URI Too Long",
    415: "Unsupported Media Type",
    416: "Requested Range Not Satisfiable",
    417: "Expectation Failed",
    418: "I'm a teapot",
    421: "Misdirected Request",
    422: "Unprocessable Entity",
    423: "Locked",
    424: "Failed Dependency",
    426: "Upgrade Required",
    428: "Precondition Required",
    429: "Too Many Requests",
    431: "Request Header Fields Too Large",
    444: "Connection Closed Without Response",
    451: "Unavailable For Legal Reasons",
    499: "Client Closed Request",
    # ── 5xx Server Error ──────────────────────────────────────────────────
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
    506: "Variant Also Negotiates",
    507: "Insufficient Storage",
    508: "Loop Detected",
    510: "Not Extended",
    511: "Network Authentication Required",
    599: "Network Connect Timeout Error",
}


def category(code: int) -> StatusCategory:
    """
    Return the status class of `code`.

    Raises:
        ValueError: If `code` is outside the 100-599 range.
    """
    if not 100 <= code <= 599:
        raise ValueError(f"HTTP status code must be between 100 and 599, got {code}")
    return _CATEGORY_BY_DIGIT[code // 100]


def reason_phrase(code: int) -> str:
    """Reason phrase for `code`. Raises KeyError for codes not in the table."""
    return STATUS_PHRASES[code]


def describe(code: int) -> StatusCodeInfo:
    return StatusCodeInfo(code=code, phrase=reason_phrase(code), category=category(code).value)


def codes_in(status_category: StatusCategory) -> List[StatusCodeInfo]:
    """All catalogued codes of one class, sorted ascending."""
    return [
        describe(code)
        for code in sorted(STATUS_PHRASES)
        if category(code) == status_category
    ]


def all_codes() -> List[StatusCodeInfo]:
    return [describe(code) for code in sorted(STATUS_PHRASES)]


def openapi_responses(*codes: int) -> Dict[int, Dict[str, Any]]:
    """
    Build the `responses=` mapping for a FastAPI route decorator.

    Example:
        openapi_responses(200, 204)
        → {200: {"description": "OK"}, 204: {"description": "No Content"}}
    """
    return {code: {"description": reason_phrase(code)} for code in codes}
