"""
RESTful Services — Application Package Initializer
===================================================

What: Marks the `restful_services` directory as a Python package.
Who:  Imported by uvicorn (`restful_services.main:app`), pytest, and the routes.

Architecture Note:
    The service is a thin layered FastAPI application:

    ┌─────────────────────────────────────┐
    │        Middleware (cross-cutting)   │  ← request id, access log, path rules
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← one route per HTTP verb
    ├─────────────────────────────────────┤
    │     Status catalog & conventions    │  ← HTTP reference data, URI rules
    ├─────────────────────────────────────┤
    │          Schemas (Contracts)        │  ← Pydantic response models
    └─────────────────────────────────────┘

    There is no persistence layer: every verb on the example resource maps
    to a fixed response and never touches server state.
"""

__version__ = "1.0.0"
