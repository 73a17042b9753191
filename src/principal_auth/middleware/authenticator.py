"""Middleware that resolves the calling principal from a bearer token.

Every HTTP request gets ``request.state.principal_id``. A verified token
yields the token's user-identifier claim; a missing or unverifiable token
yields the configured placeholder principal. What happens next depends on
the mode:

* ``insecure``: the request always continues, as the placeholder when
  authentication did not succeed.
* ``strict``: the request is rejected with 401 unless the path is public.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from principal_auth.api.errors import unauthorized_error
from principal_auth.auth.errors import (
    AuthError,
    ConfigurationError,
    InvalidCredentialError,
    MissingCredentialError,
)
from principal_auth.auth.tokens import TokenVerifier, extract_bearer_token
from principal_auth.config import DEFAULT_INSECURE_SECRET, AuthMode, Settings
from principal_auth.observability.logging import AUTH_LOGGER
from principal_auth.observability.metrics import Metrics

logger = logging.getLogger(AUTH_LOGGER)


@dataclass(frozen=True)
class Resolution:
    principal_id: str
    outcome: str  # verified | missing | invalid
    error: AuthError | None = None


def resolve_principal(header: str | None, verifier: TokenVerifier, placeholder: str) -> Resolution:
    """Resolve an ``Authorization`` header value to a principal. Never raises."""
    token = extract_bearer_token(header)
    if token is None:
        return Resolution(placeholder, "missing", MissingCredentialError("No bearer token supplied"))
    try:
        return Resolution(verifier.verify(token), "verified")
    except InvalidCredentialError as exc:
        return Resolution(placeholder, "invalid", exc)


def build_verifier(settings: Settings) -> TokenVerifier:
    secret = settings.jwt_secret
    if not secret:
        if settings.mode is AuthMode.STRICT:
            raise ConfigurationError("AUTH_JWT_SECRET must be set when AUTH_MODE=strict")
        logger.warning("AUTH_JWT_SECRET is not set; verifying tokens against the built-in default secret")
        secret = DEFAULT_INSECURE_SECRET
    return TokenVerifier(
        secret,
        algorithms=settings.jwt_algorithms,
        user_id_claim=settings.user_id_claim,
        leeway=settings.leeway_seconds,
        audience=settings.audience,
        issuer=settings.issuer,
    )


class AuthenticatorMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app: ASGIApp,
        verifier: TokenVerifier,
        placeholder: str = "demo-user",
        mode: AuthMode = AuthMode.INSECURE,
        public_paths: Iterable[str] = (),
        metrics: Metrics | None = None,
    ) -> None:
        super().__init__(app)
        if not placeholder:
            raise ConfigurationError("Placeholder principal must be a non-empty string")
        self.verifier = verifier
        self.placeholder = placeholder
        self.mode = AuthMode(mode)
        self.public_paths = tuple(p.rstrip("/") or "/" for p in public_paths)
        self.metrics = metrics

    def is_public(self, path: str) -> bool:
        path = path.rstrip("/") or "/"
        return any(path == p or path.startswith(p + "/") for p in self.public_paths)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        resolution = resolve_principal(request.headers.get("Authorization"), self.verifier, self.placeholder)
        if self.metrics is not None:
            self.metrics.record_resolution(resolution.outcome)

        if resolution.error is not None:
            logger.debug("%s %s: %s", request.method, request.url.path, resolution.error)
            if self.mode is AuthMode.STRICT and not self.is_public(request.url.path):
                if self.metrics is not None:
                    self.metrics.record_rejection(resolution.error.code)
                return unauthorized_error(
                    resolution.error.code,
                    str(resolution.error),
                    trace_id=getattr(request.state, "request_id", None),
                )

        request.state.principal_id = resolution.principal_id
        request.state.auth_outcome = resolution.outcome
        return await call_next(request)
