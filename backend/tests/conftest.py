"""
RESTful Services — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── test_client: HTTPX AsyncClient bound to the application over ASGI
    ├── fresh_app / fresh_client: a newly built app and its client
    └── sample_payloads: JSON bodies of assorted shapes for POST/PUT/PATCH
"""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run before restful_services.config is imported
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["AUTH_REALM"] = "example-tests"


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_payloads():
    """JSON bodies of every top-level shape the API must accept."""
    return [
        {"name": "widget", "size": 3},
        [1, 2, 3],
        "plain string",
        42,
        True,
        None,
        {"nested": {"deep": [{"k": "v"}]}},
        {},
    ]


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from restful_services.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def fresh_app():
    """A new application instance, so tests can mount extra routes safely."""
    from restful_services.main import create_app
    return create_app()


@pytest_asyncio.fixture
async def fresh_client(fresh_app):
    """
    Client for `fresh_app`, with server errors returned as 500 responses
    instead of re-raised into the test.
    """
    transport = ASGITransport(app=fresh_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
