"""Application services for login sessions and password confirmation."""

import logging
from datetime import timedelta

from construction_portal.application.interfaces import AuthGateway, LoginSessionRepository
from construction_portal.application.schemas.auth import RegisterRequest
from construction_portal.domain.entities import AuthUser, LoginSession
from construction_portal.domain.exceptions import (
    AuthenticationError,
    PasswordConfirmationError,
    UpstreamApiError,
    UpstreamUnavailableError,
)
from construction_portal.domain.formatting import role_redirect_path

logger = logging.getLogger(__name__)


class AuthService:
    """Logs users in against the upstream API and keeps their token server-side."""

    def __init__(
        self,
        gateway: AuthGateway,
        sessions: LoginSessionRepository,
        idle_timeout: timedelta = timedelta(hours=12),
    ):
        self._gateway = gateway
        self._sessions = sessions
        self._idle_timeout = idle_timeout

    async def login(self, email: str, password: str) -> LoginSession:
        token, user = await self._gateway.login(email, password)
        session = await self._sessions.create(LoginSession(token=token, user=user))
        logger.info("User %s logged in as %s", user.email, user.role)
        return session

    async def register(self, data: RegisterRequest) -> LoginSession:
        token, user = await self._gateway.register(data.to_api())
        session = await self._sessions.create(LoginSession(token=token, user=user))
        logger.info("Registered user %s as %s", user.email, user.role)
        return session

    async def logout(self, session_id: str) -> None:
        await self._sessions.delete(session_id)

    async def resolve_session(self, session_id: str | None) -> LoginSession:
        """The live session for ``session_id``; idle sessions are dropped."""
        if not session_id:
            raise AuthenticationError()
        session = await self._sessions.get_by_id(session_id)
        if session is None:
            raise AuthenticationError("Token is not valid")
        if session.is_idle(self._idle_timeout):
            await self._sessions.delete(session.id)
            raise AuthenticationError("Session expired. Please log in again.")
        session.touch()
        await self._sessions.touch(session)
        return session

    async def me(self) -> AuthUser:
        return await self._gateway.me()

    async def update_password(self, current_password: str, new_password: str) -> None:
        await self._gateway.update_password(current_password, new_password)

    @staticmethod
    def redirect_path(user: AuthUser) -> str:
        return role_redirect_path(user.role, user.position)


class PasswordGate:
    """Re-checks the account password before an edit or delete goes through."""

    def __init__(self, gateway: AuthGateway):
        self._gateway = gateway

    async def confirm(self, password: str | None) -> None:
        if not password or not password.strip():
            raise PasswordConfirmationError("Password is required")
        try:
            await self._gateway.verify_password(password)
        except UpstreamApiError as e:
            logger.info("Password confirmation refused (%d)", e.status_code)
            raise PasswordConfirmationError(_upstream_message(e) or "Invalid password") from e
        except UpstreamUnavailableError as e:
            raise PasswordConfirmationError() from e


def _upstream_message(error: UpstreamApiError) -> str | None:
    if isinstance(error.payload, dict):
        message = error.payload.get("message")
        if isinstance(message, str) and message:
            return message
    return None
