# Middleware package init
"""
RESTful Services — Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Path Normalization] → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Path Normalization: canonicalize the path before anything reads it
    2. Request ID: correlation ID for logs and error bodies
    3. Logging: one access line per request, tagged with the request ID
    4. CORS: FastAPI's CORSMiddleware (answers browser preflight OPTIONS)

    Responses travel back through the chain in reverse order.
"""
