"""Gateway for the upstream authentication endpoints."""

from typing import Any

from construction_portal.application.interfaces import AuthGateway
from construction_portal.domain.entities import AuthUser
from construction_portal.domain.exceptions import AuthenticationError
from construction_portal.infrastructure.api import mappers
from construction_portal.infrastructure.api.upstream_client import UpstreamApiClient


class HttpAuthGateway(AuthGateway):
    def __init__(self, client: UpstreamApiClient):
        self._client = client

    @staticmethod
    def _token_and_user(body: Any) -> tuple[str, AuthUser]:
        if not isinstance(body, dict) or not body.get("token"):
            raise AuthenticationError("Authentication failed")
        return body["token"], mappers.to_auth_user(body.get("user") or {})

    async def login(self, email: str, password: str) -> tuple[str, AuthUser]:
        body = await self._client.post("/auth/login", json={"email": email, "password": password})
        return self._token_and_user(body)

    async def register(self, payload: dict[str, Any]) -> tuple[str, AuthUser]:
        body = await self._client.post("/auth/register", json=payload)
        return self._token_and_user(body)

    async def me(self) -> AuthUser:
        body = await self._client.get("/auth/me")
        return mappers.to_auth_user(mappers.unwrap(body, "user"))

    async def update_password(self, current_password: str, new_password: str) -> None:
        await self._client.put(
            "/auth/password",
            json={"currentPassword": current_password, "newPassword": new_password},
        )

    async def verify_password(self, password: str) -> None:
        # A wrong password answers 401; that must not end the session.
        await self._client.post(
            "/auth/verify-password",
            json={"password": password},
            handle_unauthorized=False,
        )
