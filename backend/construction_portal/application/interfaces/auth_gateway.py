"""Port for the upstream authentication endpoints."""

from abc import ABC, abstractmethod
from typing import Any

from construction_portal.domain.entities import AuthUser


class AuthGateway(ABC):
    """Credential checks are delegated upstream; this port only relays them."""

    @abstractmethod
    async def login(self, email: str, password: str) -> tuple[str, AuthUser]:
        """Return the upstream bearer token and the authenticated user."""
        ...

    @abstractmethod
    async def register(self, payload: dict[str, Any]) -> tuple[str, AuthUser]:
        ...

    @abstractmethod
    async def me(self) -> AuthUser:
        ...

    @abstractmethod
    async def update_password(self, current_password: str, new_password: str) -> None:
        ...

    @abstractmethod
    async def verify_password(self, password: str) -> None:
        """Raise if ``password`` is not the current user's password."""
        ...
