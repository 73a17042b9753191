"""Bearer token parsing, JWT verification and development token minting."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Sequence

import jwt
from jwt.algorithms import get_default_algorithms

from principal_auth.auth.errors import ConfigurationError, InvalidCredentialError


def extract_bearer_token(header: str | None) -> str | None:
    """Return the credential half of ``<scheme> <credential>``.

    The header is split on single spaces and the second element is taken
    as-is; the scheme is not inspected. Returns None when there is no
    usable second element.
    """
    if not header:
        return None
    parts = header.split(" ")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


class TokenVerifier:
    """Verifies signed tokens and extracts the user-identifier claim."""

    def __init__(
        self,
        secret: str,
        algorithms: Sequence[str] = ("HS256",),
        user_id_claim: str = "userId",
        leeway: int = 0,
        audience: str | None = None,
        issuer: str | None = None,
    ) -> None:
        if not secret:
            raise ConfigurationError("Token verification secret must not be empty")
        if not algorithms:
            raise ConfigurationError("At least one JWT algorithm must be configured")
        unknown = [a for a in algorithms if a not in get_default_algorithms()]
        if unknown:
            raise ConfigurationError(f"Unsupported JWT algorithm(s): {', '.join(unknown)}")
        self.secret = secret
        self.algorithms = list(algorithms)
        self.user_id_claim = user_id_claim
        self.leeway = leeway
        self.audience = audience
        self.issuer = issuer

    def decode(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self.secret,
                algorithms=self.algorithms,
                audience=self.audience,
                issuer=self.issuer,
                leeway=self.leeway,
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidCredentialError("Token has expired") from exc
        except jwt.PyJWTError as exc:
            raise InvalidCredentialError(f"Token rejected: {type(exc).__name__}") from exc
        except Exception as exc:
            # PyJWT can still leak decoding errors for some malformed inputs
            raise InvalidCredentialError(f"Token could not be decoded: {type(exc).__name__}") from exc

    def verify(self, token: str) -> str:
        """Verify ``token`` and return its user identifier.

        Raises:
            InvalidCredentialError: on any verification failure, or when the
                verified payload has no non-empty string/integer identifier.
        """
        payload = self.decode(token)
        value = payload.get(self.user_id_claim)
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise InvalidCredentialError(f"Token has no usable '{self.user_id_claim}' claim")
        principal_id = str(value)
        if not principal_id:
            raise InvalidCredentialError(f"Token has an empty '{self.user_id_claim}' claim")
        return principal_id


def issue_token(
    subject: str,
    secret: str,
    *,
    ttl: timedelta = timedelta(days=7),
    user_id_claim: str = "userId",
    algorithm: str = "HS256",
    extra_claims: dict[str, Any] | None = None,
) -> str:
    """Mint a signed token for local development and tests."""
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = dict(extra_claims or {})
    payload.update({
        user_id_claim: subject,
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    })
    return jwt.encode(payload, secret, algorithm=algorithm)
