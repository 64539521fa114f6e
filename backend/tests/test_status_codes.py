"""
RESTful Services — Status Code Catalog Tests
=============================================

What:  Tests for the status catalog helpers and the /api/status-codes routes.

What we test:
    ✅ Category boundaries and out-of-range codes
    ✅ Lookup of standard and non-IANA codes
    ✅ Filtering by category (sorted, complete)
    ✅ OpenAPI response mapping
    ✅ HTTP routes: list, filter, lookup, 400 and 404 paths
"""

import pytest

from restful_services.status_codes import (
    STATUS_PHRASES,
    StatusCategory,
    all_codes,
    category,
    codes_in,
    describe,
    openapi_responses,
    reason_phrase,
)


class TestCategory:

    @pytest.mark.parametrize(
        "code, expected",
        [
            (100, StatusCategory.INFORMATIONAL),
            (199, StatusCategory.INFORMATIONAL),
            (200, StatusCategory.SUCCESS),
            (308, StatusCategory.REDIRECTION),
            (401, StatusCategory.CLIENT_ERROR),
            (499, StatusCategory.CLIENT_ERROR),
            (500, StatusCategory.SERVER_ERROR),
            (599, StatusCategory.SERVER_ERROR),
        ],
    )
    def test_category_by_first_digit(self, code, expected):
        assert category(code) is expected

    @pytest.mark.parametrize("code", [0, 99, 600, 999, -1])
    def test_out_of_range_rejected(self, code):
        with pytest.raises(ValueError, match="between 100 and 599"):
            category(code)


class TestLookup:

    def test_reason_phrase_standard_codes(self):
        assert reason_phrase(200) == "OK"
        assert reason_phrase(201) == "Created"
        assert reason_phrase(401) == "Unauthorized"
        assert reason_phrase(405) == "Method Not Allowed"

    def test_reason_phrase_non_iana_codes(self):
        assert reason_phrase(418) == "I'm a teapot"
        assert reason_phrase(444) == "Connection Closed Without Response"
        assert reason_phrase(499) == "Client Closed Request"
        assert reason_phrase(599) == "Network Connect Timeout Error"

    def test_reason_phrase_unknown_code(self):
        with pytest.raises(KeyError):
            reason_phrase(299)

    def test_describe(self):
        info = describe(307)

        assert info.code == 307
        assert info.phrase == "Temporary Redirect"
        assert info.category == "redirection"


class TestListing:

    def test_codes_in_category_sorted_and_filtered(self):
        codes = codes_in(StatusCategory.REDIRECTION)

        assert [c.code for c in codes] == [300, 301, 302, 303, 304, 305, 307, 308]
        assert all(c.category == "redirection" for c in codes)

    def test_categories_partition_the_catalog(self):
        total = sum(len(codes_in(c)) for c in StatusCategory)

        assert total == len(STATUS_PHRASES) == len(all_codes())

    def test_openapi_responses(self):
        responses = openapi_responses(200, 204, 401)

        assert responses == {
            200: {"description": "OK"},
            204: {"description": "No Content"},
            401: {"description": "Unauthorized"},
        }

    def test_openapi_responses_returns_fresh_dicts(self):
        first = openapi_responses(401)
        first[401]["model"] = object

        assert "model" not in openapi_responses(401)[401]


class TestStatusRoutes:

    @pytest.mark.asyncio
    async def test_list_all(self, test_client):
        response = await test_client.get("/api/status-codes")

        assert response.status_code == 200
        body = response.json()
        assert body["total_count"] == len(STATUS_PHRASES)
        codes = [c["code"] for c in body["codes"]]
        assert codes == sorted(codes)

    @pytest.mark.asyncio
    async def test_list_filtered_case_insensitive(self, test_client):
        response = await test_client.get("/api/status-codes", params={"category": "Informational"})

        assert response.status_code == 200
        assert [c["code"] for c in response.json()["codes"]] == [100, 101, 102]

    @pytest.mark.asyncio
    async def test_list_unknown_category_returns_400(self, test_client):
        response = await test_client.get("/api/status-codes", params={"category": "teapots"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["details"]["field"] == "category"
        assert "client_error" in body["details"]["allowed"]

    @pytest.mark.asyncio
    async def test_get_known_code(self, test_client):
        response = await test_client.get("/api/status-codes/404")

        assert response.status_code == 200
        assert response.json() == {"code": 404, "phrase": "Not Found", "category": "client_error"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["299", "700"])
    async def test_get_unknown_code_returns_404(self, test_client, code):
        response = await test_client.get(f"/api/status-codes/{code}")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert code in body["message"]

    @pytest.mark.asyncio
    async def test_get_non_numeric_code_returns_400(self, test_client):
        response = await test_client.get("/api/status-codes/teapot")

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
