"""Domain entities for authenticated users and their portal login sessions."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from uuid import uuid4


@dataclass
class AuthUser:
    """The user as reported by the upstream auth service."""

    id: str
    email: str
    role: str
    name: str = ""
    position: str | None = None

    def has_role(self, required: str | list[str] | tuple[str, ...]) -> bool:
        if isinstance(required, str):
            return self.role == required
        return self.role in required


@dataclass
class LoginSession:
    """Server-side holder of an upstream bearer token.

    The portal hands ``id`` to its clients; the upstream token never leaves
    the server.
    """

    token: str
    user: AuthUser
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_seen_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        self.last_seen_at = datetime.now(timezone.utc)

    def is_idle(self, max_idle: timedelta, now: datetime | None = None) -> bool:
        now = now or datetime.now(timezone.utc)
        last_seen = self.last_seen_at
        if last_seen.tzinfo is None:
            last_seen = last_seen.replace(tzinfo=timezone.utc)
        return now - last_seen > max_idle
