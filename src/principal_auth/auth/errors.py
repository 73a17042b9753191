"""Exception hierarchy for principal resolution."""

from __future__ import annotations


class AuthError(Exception):
    """Base exception for all principal-auth errors."""

    code = "authentication_error"


class MissingCredentialError(AuthError):
    """Raised when a request carries no bearer token.

    Covers an absent ``Authorization`` header and a header without a
    second, non-empty token.
    """

    code = "missing_credentials"


class InvalidCredentialError(AuthError):
    """Raised when a bearer token is present but cannot be trusted.

    Bad signature, malformed token, expired token, wrong audience or
    issuer, and a payload without a usable user-identifier claim all
    end up here.
    """

    code = "invalid_credentials"


class ConfigurationError(AuthError):
    """Raised when the authenticator cannot be built from the given settings.

    Example:
        ConfigurationError("AUTH_JWT_SECRET must be set when AUTH_MODE=strict")
    """

    code = "configuration_error"
