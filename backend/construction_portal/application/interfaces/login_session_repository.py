"""Abstract repository interface (port) for LoginSession persistence."""

from abc import ABC, abstractmethod

from construction_portal.domain.entities import LoginSession


class LoginSessionRepository(ABC):
    """Port for portal login sessions — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, session_id: str) -> LoginSession | None:
        ...

    @abstractmethod
    async def create(self, session: LoginSession) -> LoginSession:
        ...

    @abstractmethod
    async def touch(self, session: LoginSession) -> None:
        """Persist a refreshed ``last_seen_at``."""
        ...

    @abstractmethod
    async def delete(self, session_id: str) -> bool:
        """Delete a session. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def delete_by_token(self, token: str) -> int:
        """Delete every session holding ``token``; returns how many were removed."""
        ...
