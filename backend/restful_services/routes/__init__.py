# Routes package init
"""
RESTful Services — API Routes Package
======================================

Route Inventory:
    - example.py:  GET/POST/PUT/PATCH/DELETE/OPTIONS /api/example
    - status.py:   GET /api/status-codes
                   GET /api/status-codes/{code}
    - health.py:   GET /health

Routes are thin: they map a request to a fixed response or a catalog
lookup, and raise application exceptions for the global handlers to render.
"""
