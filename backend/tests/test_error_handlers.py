"""
RESTful Services — Exception Hierarchy & Handler Tests
=======================================================

What:  Tests that every application exception renders with its status,
       error code, headers and body shape, and that unexpected errors
       become a generic 500.
How:   Extra routes that raise are mounted on a fresh app per test.
"""

import logging

import pytest

from restful_services.exceptions import (
    ForbiddenError,
    NotFoundError,
    RestfulServicesError,
    UnauthorizedError,
    ValidationError,
)
from restful_services.main import error_code_for_status


class TestExceptionHierarchy:

    def test_all_derive_from_base(self):
        for exc_type in (ValidationError, UnauthorizedError, ForbiddenError, NotFoundError):
            assert issubclass(exc_type, RestfulServicesError)

    def test_status_codes(self):
        assert RestfulServicesError().status_code == 500
        assert ValidationError().status_code == 400
        assert UnauthorizedError().status_code == 401
        assert ForbiddenError().status_code == 403
        assert NotFoundError().status_code == 404

    def test_validation_error_records_field(self):
        exc = ValidationError(message="bad", field="name")

        assert exc.field == "name"
        assert exc.context == {"field": "name"}

    def test_unauthorized_challenge_header(self):
        exc = UnauthorizedError(realm="admin")

        assert exc.headers == {"WWW-Authenticate": 'Bearer realm="admin"'}

    def test_not_found_message(self):
        assert NotFoundError().message == "The requested resource was not found"
        assert NotFoundError(resource="widget", resource_id="7").message == (
            "widget with ID '7' was not found"
        )


class TestErrorCodeForStatus:

    @pytest.mark.parametrize(
        "status, code",
        [
            (404, "not_found"),
            (405, "method_not_allowed"),
            (413, "payload_too_large"),
            (418, "i_m_a_teapot"),
            (414, "request_uri_too_long"),
            (299, "http_error"),
        ],
    )
    def test_derived_codes(self, status, code):
        assert error_code_for_status(status) == code


class TestHandlers:

    @pytest.mark.asyncio
    async def test_forbidden_renders_403(self, fresh_app, fresh_client):
        @fresh_app.get("/api/forbidden-thing")
        async def forbidden():
            raise ForbiddenError(context={"secret": "do-not-leak"})

        response = await fresh_client.get("/api/forbidden-thing")

        assert response.status_code == 403
        body = response.json()
        assert body["error"] == "forbidden"
        assert "details" not in body
        assert "do-not-leak" not in response.text

    @pytest.mark.asyncio
    async def test_base_error_renders_500(self, fresh_app, fresh_client):
        @fresh_app.get("/api/broken-thing")
        async def broken():
            raise RestfulServicesError(message="Something we know about")

        response = await fresh_client.get("/api/broken-thing")

        assert response.status_code == 500
        assert response.json()["error"] == "server_error"

    @pytest.mark.asyncio
    async def test_unexpected_error_renders_generic_500(self, fresh_app, fresh_client):
        @fresh_app.get("/api/crashing-thing")
        async def crashing():
            raise RuntimeError("internal detail")

        response = await fresh_client.get("/api/crashing-thing")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "internal_server_error"
        assert "internal detail" not in response.text

    @pytest.mark.asyncio
    async def test_unexpected_error_keeps_request_id_and_is_logged(self, fresh_app, fresh_client, caplog):
        @fresh_app.get("/api/crashing-thing")
        async def crashing():
            raise RuntimeError("internal detail")

        with caplog.at_level(logging.INFO, logger="restful_services.access"):
            response = await fresh_client.get(
                "/api/crashing-thing", headers={"X-Request-ID": "trace-500"}
            )

        assert response.status_code == 500
        assert response.headers["x-request-id"] == "trace-500"
        assert response.json()["request_id"] == "trace-500"

        records = [r for r in caplog.records if r.name == "restful_services.access"]
        assert len(records) == 1
        assert records[0].levelno == logging.ERROR
        assert records[0].status == 500
        assert records[0].request_id == "trace-500"

    @pytest.mark.asyncio
    async def test_unknown_route_renders_404(self, fresh_client):
        response = await fresh_client.get("/api/nothing-here")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert body["request_id"] == response.headers["x-request-id"]
