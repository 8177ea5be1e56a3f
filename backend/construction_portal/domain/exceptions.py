"""Domain-specific exceptions — framework-independent."""

from typing import Any


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class UpstreamApiError(Exception):
    """Raised when the construction REST API answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str, payload: Any = None):
        self.status_code = status_code
        self.message = message
        self.payload = payload
        super().__init__(message)

    @property
    def is_duplicate_key(self) -> bool:
        """MongoDB unique-index violations surface as E11000 messages."""
        return "E11000" in self.message or "duplicate key" in self.message


class UpstreamUnavailableError(Exception):
    """Raised when the upstream API cannot be reached at all."""

    def __init__(self, message: str = "Network Error: upstream API unreachable"):
        self.message = message
        super().__init__(message)


class AuthenticationError(Exception):
    """Raised when the caller has no valid login session or token."""

    def __init__(self, message: str = "No token, authorization denied"):
        self.message = message
        super().__init__(message)


class PermissionDeniedError(Exception):
    """Raised when the caller's role does not allow the action."""

    def __init__(self, required_roles: tuple[str, ...] | list[str]):
        self.required_roles = tuple(required_roles)
        super().__init__(f"Access denied. Required role: {' or '.join(self.required_roles)}")


class PasswordConfirmationError(Exception):
    """Raised when re-entering the account password fails for an edit/delete."""

    def __init__(self, message: str = "Invalid password"):
        self.message = message
        super().__init__(message)


class ValidationFailedError(Exception):
    """Raised when a payload is rejected before it is sent upstream."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidTableQueryError(ValidationFailedError):
    """Raised when a list view is asked to sort on a field it cannot order by."""

    def __init__(self, field: str, allowed: tuple[str, ...] | list[str]):
        self.field = field
        self.allowed = tuple(allowed)
        super().__init__(
            f"Cannot sort by '{field}'. Sortable fields: {', '.join(self.allowed)}"
        )
