"""Async HTTP client for the PeopleHub REST API.

Thin wrapper over ``httpx.AsyncClient``: it unwraps the ``{"data": ...}``
envelope and turns every failure into an :class:`ApiError`. There are no
retries; callers decide what a failure means for the user.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from peoplehub.config import settings

logger = logging.getLogger(__name__)


# ── Errors ──────────────────────────────────────────────────────────

class ApiError(Exception):
    """Non-2xx answer (``status`` > 0) or transport failure (``status`` 0)."""

    def __init__(
        self,
        status: int,
        message: str,
        errors: Optional[dict[str, Any]] = None,
    ) -> None:
        self.status = status
        self.message = message
        self.errors = errors or {}
        super().__init__(f"{status}: {message}")


class NotFoundError(ApiError):
    """404 from the API."""


class NetworkError(ApiError):
    """Timeout, refused connection or other transport-level failure."""

    def __init__(self, message: str) -> None:
        super().__init__(0, message)


def _error_from(response: httpx.Response) -> ApiError:
    message = response.text or response.reason_phrase
    errors = None
    if "json" in response.headers.get("content-type", ""):
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get("message") or body.get("detail") or body.get("error") or message
            errors = body.get("errors")
    cls = NotFoundError if response.status_code == 404 else ApiError
    return cls(response.status_code, str(message), errors)


def _decode(response: httpx.Response) -> Any:
    if response.status_code == 204 or not response.content:
        return None
    if "json" in response.headers.get("content-type", ""):
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(response.status_code, "Malformed JSON response") from exc
    return response.text


# ── Client ──────────────────────────────────────────────────────────

class ApiClient:
    """Talks to ``/api`` on *base_url*.

    Pass *client* to reuse an existing ``httpx.AsyncClient`` (tests wire one
    to the ASGI app); otherwise one is created with the configured timeout.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout if timeout is not None else settings.API_TIMEOUT_SECONDS,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ── Transport ───────────────────────────────────────────────────

    async def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Send one request; returns the decoded body (``None`` when empty)."""
        kwargs: dict[str, Any] = {}
        if json is not None:
            kwargs["json"] = json
        if params:
            kwargs["params"] = params

        logger.debug("%s %s", method, path)
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            logger.warning("%s %s timed out", method, path)
            raise NetworkError("Request timed out") from exc
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise NetworkError(str(exc) or type(exc).__name__) from exc

        if response.is_error:
            error = _error_from(response)
            logger.warning("%s %s → %s", method, path, error)
            raise error
        return _decode(response)

    async def _data(self, method: str, path: str, json: Any = None) -> Any:
        body = await self.request(method, path, json=json)
        return body.get("data") if isinstance(body, dict) else body

    # ── Employees ───────────────────────────────────────────────────

    async def list_employees(self, **params: Any) -> dict[str, Any]:
        """Raw paginated envelope (``data`` + ``meta``)."""
        return await self.request("GET", "/api/employees", params=params)

    async def get_employee(self, employee_id: str) -> dict[str, Any]:
        return await self._data("GET", f"/api/employees/{employee_id}")

    async def update_employee(self, employee_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._data("PATCH", f"/api/employees/{employee_id}", payload)

    # ── Record collections ──────────────────────────────────────────

    async def fetch(self, kind: str, employee_id: str) -> list[dict[str, Any]]:
        return await self._data("GET", f"/api/employees/{employee_id}/{kind}") or []

    async def get_record(self, kind: str, record_id: str) -> dict[str, Any]:
        return await self._data("GET", f"/api/{kind}/{record_id}")

    async def create(self, kind: str, employee_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._data("POST", f"/api/employees/{employee_id}/{kind}", payload)

    async def update(self, kind: str, record_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._data("PATCH", f"/api/{kind}/{record_id}", payload)

    async def delete(self, kind: str, record_id: str) -> None:
        await self.request("DELETE", f"/api/{kind}/{record_id}")
