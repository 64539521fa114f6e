# Schemas package init
"""
RESTful Services — Pydantic Schemas
====================================

What:  Response models that define the API contract and the OpenAPI document.

Schema Inventory:
    - common.py:  ErrorResponse, HealthResponse
    - status.py:  StatusCodeInfo, StatusCodeListResponse
"""
