from .login_session_repository import SQLAlchemyLoginSessionRepository

__all__ = ["SQLAlchemyLoginSessionRepository"]
