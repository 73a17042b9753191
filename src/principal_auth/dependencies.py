"""FastAPI dependency injection wiring."""

from __future__ import annotations

from typing import Any

from fastapi import Request

from principal_auth.observability.metrics import Metrics


def _auth_state(request: Request, name: str) -> Any:
    value = getattr(request.state, name, None)
    if value is None:
        raise RuntimeError("AuthenticatorMiddleware is not installed on this application")
    return value


def get_principal_id(request: Request) -> str:
    """Principal resolved by AuthenticatorMiddleware for this request."""
    return _auth_state(request, "principal_id")


def get_auth_outcome(request: Request) -> str:
    return _auth_state(request, "auth_outcome")


def get_metrics(request: Request) -> Metrics:
    return request.app.state.metrics
