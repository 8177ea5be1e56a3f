"""HTTP client for the construction REST API.

Every gateway goes through ``UpstreamApiClient``: it attaches the caller's
bearer token, turns non-2xx answers into domain exceptions and reports a
rejected token so the login session can be dropped.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from construction_portal.domain.exceptions import (
    AuthenticationError,
    UpstreamApiError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)

UnauthorizedHandler = Callable[[], Awaitable[None]]

SESSION_EXPIRED_MESSAGE = "Session expired. Please log in again."


class UpstreamApiClient:
    """Infrastructure adapter — one instance per portal request.

    A 401 on a JSON request calls ``on_unauthorized`` (forced logout) and
    raises ``AuthenticationError``. File downloads (``get_bytes`` /
    ``post_bytes``) never log the user out; their 401 surfaces as a plain
    ``UpstreamApiError``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000/api",
        *,
        token: str | None = None,
        timeout: float = 10.0,
        on_unauthorized: UnauthorizedHandler | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._on_unauthorized = on_unauthorized
        self._http_client = http_client

    def _get_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    # ── JSON verbs ────────────────────────────────────────────────────

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        response = await self._request("GET", path, params=params)
        return self._parse_json(response)

    async def post(
        self, path: str, json: Any = None, *, handle_unauthorized: bool = True
    ) -> Any:
        response = await self._request(
            "POST", path, json=json, handle_unauthorized=handle_unauthorized
        )
        return self._parse_json(response)

    async def put(self, path: str, json: Any = None) -> Any:
        response = await self._request("PUT", path, json=json)
        return self._parse_json(response)

    async def delete(self, path: str) -> Any:
        response = await self._request("DELETE", path)
        return self._parse_json(response)

    # ── Blob verbs ────────────────────────────────────────────────────

    async def get_bytes(self, path: str, params: dict[str, Any] | None = None) -> bytes:
        response = await self._request("GET", path, params=params, blob=True)
        return response.content

    async def post_bytes(self, path: str, json: Any = None) -> bytes:
        response = await self._request("POST", path, json=json, blob=True)
        return response.content

    # ── Internals ─────────────────────────────────────────────────────

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        blob: bool = False,
        handle_unauthorized: bool = True,
    ) -> httpx.Response:
        url = f"{self._base_url}/{path.lstrip('/')}"
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.request(
                method,
                url,
                params=_clean_params(params),
                json=json,
                headers=self._get_headers(),
            )
        except httpx.TransportError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise UpstreamUnavailableError() from e
        finally:
            if should_close:
                await client.aclose()

        logger.debug("%s %s -> %d", method, url, response.status_code)

        if response.is_success:
            return response

        message = self._error_message(response)
        if response.status_code == 401 and not blob and handle_unauthorized:
            logger.info("Upstream rejected the token on %s %s", method, path)
            if self._on_unauthorized is not None and self._token:
                await self._on_unauthorized()
            raise AuthenticationError(message if self._token is None else SESSION_EXPIRED_MESSAGE)

        raise UpstreamApiError(
            status_code=response.status_code,
            message=message,
            payload=self._payload(response),
        )

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        if not response.content:
            return None
        return response.json()

    @staticmethod
    def _payload(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    def _error_message(self, response: httpx.Response) -> str:
        """The body's ``message`` when present, else ``HTTP error! status: N``."""
        data = self._payload(response)
        if isinstance(data, dict):
            message = data.get("message")
            if isinstance(message, str) and message:
                return message
        return f"HTTP error! status: {response.status_code}"


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    """Drop unset filters so they are not sent as empty query values."""
    if not params:
        return None
    return {k: v for k, v in params.items() if v is not None and v != ""}
