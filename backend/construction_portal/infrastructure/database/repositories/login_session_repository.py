"""Concrete repository implementation for LoginSession backed by SQLAlchemy."""

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from construction_portal.application.interfaces import LoginSessionRepository
from construction_portal.domain.entities import AuthUser, LoginSession
from construction_portal.infrastructure.database.models import LoginSessionModel


class SQLAlchemyLoginSessionRepository(LoginSessionRepository):
    """Implements the LoginSessionRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: LoginSessionModel) -> LoginSession:
        """Map ORM model → domain entity."""
        return LoginSession(
            id=model.id,
            token=model.token,
            user=AuthUser(
                id=model.user_id,
                email=model.email,
                role=model.role,
                name=model.name,
                position=model.position,
            ),
            created_at=model.created_at,
            last_seen_at=model.last_seen_at,
        )

    def _to_model(self, entity: LoginSession) -> LoginSessionModel:
        """Map domain entity → ORM model (for creation)."""
        return LoginSessionModel(
            id=entity.id,
            token=entity.token,
            user_id=entity.user.id,
            email=entity.user.email,
            role=entity.user.role,
            position=entity.user.position,
            name=entity.user.name,
            created_at=entity.created_at,
            last_seen_at=entity.last_seen_at,
        )

    async def get_by_id(self, session_id: str) -> LoginSession | None:
        result = await self._session.get(LoginSessionModel, session_id)
        return self._to_entity(result) if result else None

    async def create(self, session: LoginSession) -> LoginSession:
        model = self._to_model(session)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def touch(self, session: LoginSession) -> None:
        model = await self._session.get(LoginSessionModel, session.id)
        if model is None:
            return
        model.last_seen_at = session.last_seen_at
        await self._session.flush()

    async def delete(self, session_id: str) -> bool:
        model = await self._session.get(LoginSessionModel, session_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def delete_by_token(self, token: str) -> int:
        result = await self._session.execute(
            delete(LoginSessionModel).where(LoginSessionModel.token == token)
        )
        await self._session.flush()
        return result.rowcount or 0
