"""Unit tests for user-facing error message extraction."""

from construction_portal.application.error_messages import (
    DEFAULT_ERROR_MESSAGE,
    get_error_message,
    is_auth_error,
    is_network_error,
)
from construction_portal.domain.exceptions import (
    AuthenticationError,
    PermissionDeniedError,
    UpstreamApiError,
    UpstreamUnavailableError,
)


def test_message_precedence():
    assert get_error_message("plain text") == "plain text"
    assert get_error_message(UpstreamApiError(400, "Labour ID exists")) == "Labour ID exists"
    assert get_error_message(AuthenticationError("Token is not valid")) == "Token is not valid"
    assert get_error_message(ValueError("bad value")) == "bad value"


def test_empty_errors_fall_back_to_default():
    assert get_error_message(None) == DEFAULT_ERROR_MESSAGE
    assert get_error_message(RuntimeError()) == DEFAULT_ERROR_MESSAGE


def test_network_errors_are_recognised():
    assert is_network_error(UpstreamUnavailableError())
    assert is_network_error(RuntimeError("NETWORK_ERROR while fetching"))
    assert not is_network_error(UpstreamApiError(500, "boom"))


def test_auth_errors_are_recognised():
    assert is_auth_error(AuthenticationError())
    assert is_auth_error(PermissionDeniedError(["manager"]))
    assert is_auth_error(UpstreamApiError(403, "nope"))
    assert is_auth_error(RuntimeError("Request failed: Unauthorized"))
    assert not is_auth_error(UpstreamApiError(404, "missing"))


def test_permission_denied_names_the_roles():
    assert str(PermissionDeniedError(("supervisor", "manager"))) == (
        "Access denied. Required role: supervisor or manager"
    )


def test_duplicate_key_detection():
    assert UpstreamApiError(500, "E11000 duplicate key error collection").is_duplicate_key
    assert not UpstreamApiError(500, "Server error").is_duplicate_key
