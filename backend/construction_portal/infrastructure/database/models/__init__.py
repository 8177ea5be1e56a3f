from .login_session import LoginSessionModel

__all__ = ["LoginSessionModel"]
