"""Turn any failure into the one-line message shown next to a form or table."""

from construction_portal.domain.exceptions import (
    AuthenticationError,
    PermissionDeniedError,
    UpstreamApiError,
    UpstreamUnavailableError,
)

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"


def get_error_message(error: BaseException | str | None) -> str:
    if isinstance(error, str):
        return error
    if isinstance(error, UpstreamApiError) and error.message:
        return error.message
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    if error is not None and str(error):
        return str(error)
    return DEFAULT_ERROR_MESSAGE


def is_network_error(error: BaseException | None) -> bool:
    if isinstance(error, UpstreamUnavailableError):
        return True
    text = str(error or "")
    return "Network Error" in text or "NETWORK_ERROR" in text


def is_auth_error(error: BaseException | None) -> bool:
    if isinstance(error, (AuthenticationError, PermissionDeniedError)):
        return True
    if isinstance(error, UpstreamApiError) and error.status_code in (401, 403):
        return True
    text = str(error or "").lower()
    return "unauthorized" in text or "forbidden" in text
