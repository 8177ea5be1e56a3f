"""Unit tests for AuthService and PasswordGate."""

from datetime import datetime, timedelta, timezone

import pytest

from construction_portal.application.interfaces import AuthGateway, LoginSessionRepository
from construction_portal.application.schemas.auth import RegisterRequest
from construction_portal.application.services import AuthService, PasswordGate
from construction_portal.domain.entities import AuthUser, LoginSession
from construction_portal.domain.exceptions import (
    AuthenticationError,
    PasswordConfirmationError,
    UpstreamApiError,
    UpstreamUnavailableError,
)

MANAGER = AuthUser(id="u1", email="manager@example.com", role="manager", name="Mala")


class FakeAuthGateway(AuthGateway):
    def __init__(self):
        self.verify_error: Exception | None = None
        self.verified: list[str] = []
        self.registered: dict | None = None

    async def login(self, email, password):
        if password != "secret":
            raise AuthenticationError("Invalid credentials")
        return "upstream-token", MANAGER

    async def register(self, payload):
        self.registered = payload
        return "new-token", AuthUser(id="u2", email=payload["email"], role=payload["role"])

    async def me(self):
        return MANAGER

    async def update_password(self, current_password, new_password):
        return None

    async def verify_password(self, password):
        if self.verify_error:
            raise self.verify_error
        self.verified.append(password)


class FakeLoginSessionRepository(LoginSessionRepository):
    def __init__(self):
        self.sessions: dict[str, LoginSession] = {}
        self.touched: list[str] = []

    async def get_by_id(self, session_id):
        return self.sessions.get(session_id)

    async def create(self, session):
        self.sessions[session.id] = session
        return session

    async def touch(self, session):
        self.touched.append(session.id)

    async def delete(self, session_id):
        return self.sessions.pop(session_id, None) is not None

    async def delete_by_token(self, token):
        doomed = [s.id for s in self.sessions.values() if s.token == token]
        for session_id in doomed:
            del self.sessions[session_id]
        return len(doomed)


@pytest.fixture
def gateway() -> FakeAuthGateway:
    return FakeAuthGateway()


@pytest.fixture
def sessions() -> FakeLoginSessionRepository:
    return FakeLoginSessionRepository()


@pytest.fixture
def service(gateway, sessions) -> AuthService:
    return AuthService(gateway, sessions, idle_timeout=timedelta(hours=1))


@pytest.mark.asyncio
async def test_login_keeps_upstream_token_server_side(service: AuthService, sessions):
    login = await service.login("manager@example.com", "secret")
    assert login.token == "upstream-token"
    assert login.id != login.token
    assert sessions.sessions[login.id].user.role == "manager"


@pytest.mark.asyncio
async def test_failed_login_creates_no_session(service: AuthService, sessions):
    with pytest.raises(AuthenticationError):
        await service.login("manager@example.com", "wrong")
    assert sessions.sessions == {}


@pytest.mark.asyncio
async def test_register_sends_camel_case_payload(service: AuthService, gateway):
    data = RegisterRequest(
        first_name="Sam", last_name="Silva", email="sam@example.com",
        password="secret1", role="supervisor",
    )
    login = await service.register(data)
    assert gateway.registered["firstName"] == "Sam"
    assert "phoneNumber" not in gateway.registered
    assert login.user.role == "supervisor"


@pytest.mark.asyncio
async def test_resolve_session_without_token(service: AuthService):
    with pytest.raises(AuthenticationError, match="No token"):
        await service.resolve_session(None)


@pytest.mark.asyncio
async def test_resolve_unknown_session(service: AuthService):
    with pytest.raises(AuthenticationError, match="Token is not valid"):
        await service.resolve_session("nope")


@pytest.mark.asyncio
async def test_resolve_session_touches_it(service: AuthService, sessions):
    login = await service.login("manager@example.com", "secret")
    resolved = await service.resolve_session(login.id)
    assert resolved is login
    assert sessions.touched == [login.id]


@pytest.mark.asyncio
async def test_idle_session_is_dropped(service: AuthService, sessions):
    login = await service.login("manager@example.com", "secret")
    login.last_seen_at = datetime.now(timezone.utc) - timedelta(hours=2)

    with pytest.raises(AuthenticationError, match="Session expired"):
        await service.resolve_session(login.id)
    assert login.id not in sessions.sessions


@pytest.mark.asyncio
async def test_logout_removes_session(service: AuthService, sessions):
    login = await service.login("manager@example.com", "secret")
    await service.logout(login.id)
    assert sessions.sessions == {}


def test_redirect_path_prefers_position():
    supervisor = AuthUser(id="u3", email="s@example.com", role="employee", position="Supervisor")
    assert AuthService.redirect_path(supervisor) == "/supervisordash"
    assert AuthService.redirect_path(MANAGER) == "/dashboard"


# ── PasswordGate ──


@pytest.mark.asyncio
@pytest.mark.parametrize("password", [None, "", "   "])
async def test_password_is_required(gateway: FakeAuthGateway, password):
    with pytest.raises(PasswordConfirmationError, match="Password is required"):
        await PasswordGate(gateway).confirm(password)
    assert gateway.verified == []


@pytest.mark.asyncio
async def test_correct_password_passes(gateway: FakeAuthGateway):
    await PasswordGate(gateway).confirm("secret")
    assert gateway.verified == ["secret"]


@pytest.mark.asyncio
async def test_wrong_password_uses_upstream_message(gateway: FakeAuthGateway):
    gateway.verify_error = UpstreamApiError(
        400, "Current password is incorrect", {"message": "Current password is incorrect"}
    )
    with pytest.raises(PasswordConfirmationError, match="Current password is incorrect"):
        await PasswordGate(gateway).confirm("guess")


@pytest.mark.asyncio
async def test_wrong_password_without_message(gateway: FakeAuthGateway):
    gateway.verify_error = UpstreamApiError(401, "HTTP error! status: 401", {})
    with pytest.raises(PasswordConfirmationError, match="Invalid password"):
        await PasswordGate(gateway).confirm("guess")


@pytest.mark.asyncio
async def test_unreachable_upstream_refuses_confirmation(gateway: FakeAuthGateway):
    gateway.verify_error = UpstreamUnavailableError()
    with pytest.raises(PasswordConfirmationError):
        await PasswordGate(gateway).confirm("secret")
