"""ApiClient tests — envelope unwrapping and error mapping.

Transport-level behaviour uses ``httpx.MockTransport``; the happy paths run
against the real app through the ``api`` fixture.
"""

from __future__ import annotations

import httpx
import pytest

from peoplehub.client.api import ApiClient, ApiError, NetworkError, NotFoundError
from tests.conftest import _create_employee, _make_bonus


def _mock_client(handler) -> ApiClient:
    return ApiClient(client=httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://mock",
    ))


# ═════════════════════════════════════════════════════════════════════
# Decoding & errors (mock transport)
# ═════════════════════════════════════════════════════════════════════


class TestDecoding:

    async def test_no_content_is_none(self):
        api = _mock_client(lambda request: httpx.Response(204))
        assert await api.request("DELETE", "/api/notes/1") is None

    async def test_json_body_decoded(self):
        api = _mock_client(lambda request: httpx.Response(200, json={"data": {"id": "x"}}))
        assert await api.request("GET", "/anything") == {"data": {"id": "x"}}

    async def test_text_body_returned_as_text(self):
        api = _mock_client(lambda request: httpx.Response(200, text="pong"))
        assert await api.request("GET", "/ping") == "pong"

    async def test_empty_200_is_none(self):
        api = _mock_client(lambda request: httpx.Response(200))
        assert await api.request("GET", "/empty") is None

    async def test_malformed_json_body_is_api_error(self):
        api = _mock_client(lambda request: httpx.Response(
            200, content=b"{bad", headers={"content-type": "application/json"},
        ))
        with pytest.raises(ApiError) as excinfo:
            await api.request("GET", "/api/employees/emp-1")
        assert excinfo.value.status == 200
        assert excinfo.value.message == "Malformed JSON response"

    async def test_sends_json_payload(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["body"] = request.content
            return httpx.Response(201, json={"data": {"id": "n-1"}})

        api = _mock_client(handler)
        result = await api.create("notes", "emp-1", {"title": "Hi"})
        assert result == {"id": "n-1"}
        assert seen["method"] == "POST"
        assert b'"title"' in seen["body"]


class TestErrors:

    async def test_problem_message_preferred(self):
        api = _mock_client(lambda request: httpx.Response(
            409,
            json={"message": "Duplicate email", "errors": {"email": ["taken"]}},
            headers={"content-type": "application/problem+json"},
        ))
        with pytest.raises(ApiError) as info:
            await api.request("POST", "/api/employees")
        assert info.value.status == 409
        assert info.value.message == "Duplicate email"
        assert info.value.errors == {"email": ["taken"]}

    async def test_error_key_fallback(self):
        api = _mock_client(lambda request: httpx.Response(500, json={"error": "boom"}))
        with pytest.raises(ApiError, match="boom"):
            await api.request("GET", "/x")

    async def test_plain_text_error(self):
        api = _mock_client(lambda request: httpx.Response(502, text="Bad gateway"))
        with pytest.raises(ApiError) as info:
            await api.request("GET", "/x")
        assert info.value.message == "Bad gateway"

    async def test_404_is_not_found_error(self):
        api = _mock_client(lambda request: httpx.Response(404, json={"detail": "gone"}))
        with pytest.raises(NotFoundError) as info:
            await api.get_record("notes", "n-1")
        assert info.value.status == 404

    async def test_timeout_is_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        api = _mock_client(handler)
        with pytest.raises(NetworkError) as info:
            await api.fetch("notes", "emp-1")
        assert info.value.status == 0
        assert info.value.message == "Request timed out"

    async def test_connection_refused_is_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(NetworkError, match="refused"):
            await _mock_client(handler).get_employee("emp-1")


# ═════════════════════════════════════════════════════════════════════
# Against the app
# ═════════════════════════════════════════════════════════════════════


class TestAgainstApp:

    async def test_record_lifecycle(self, api, client):
        await _create_employee(client, id="emp-1")

        created = await api.create("bonuses", "emp-1", _make_bonus())
        assert created["amount_display"] == "$5,000.00"

        updated = await api.update("bonuses", created["id"], {"frequency": "Annual"})
        assert updated["frequency"] == "Annual"

        assert [r["id"] for r in await api.fetch("bonuses", "emp-1")] == [created["id"]]

        assert await api.delete("bonuses", created["id"]) is None
        with pytest.raises(NotFoundError):
            await api.get_record("bonuses", created["id"])

    async def test_employee_calls(self, api, client):
        await _create_employee(client, id="emp-1")
        employee = await api.get_employee("emp-1")
        assert employee["full_name"] == "Dana Whitfield"

        changed = await api.update_employee("emp-1", {"job_title": "Controller"})
        assert changed["job_title"] == "Controller"

        page = await api.list_employees(page_size=10)
        assert page["meta"]["total"] == 1

    async def test_validation_error_carries_field_errors(self, api, client):
        await _create_employee(client, id="emp-1")
        with pytest.raises(ApiError) as info:
            await api.create("bonuses", "emp-1", _make_bonus(amount="lots"))
        assert info.value.status == 422
        assert "amount" in info.value.errors

    async def test_owned_client_closed_by_context_manager(self):
        async with ApiClient("http://localhost:1", timeout=0.5) as api:
            assert api._owns_client
        assert api._client.is_closed
