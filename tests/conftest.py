"""Test fixtures: isolated metrics registry per app, no env leakage."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from prometheus_client import CollectorRegistry

from principal_auth.app import create_app
from principal_auth.auth.tokens import TokenVerifier, issue_token
from principal_auth.config import get_settings

_SECRET = "unit-test-secret-0123456789abcdef0123456789"
_OTHER_SECRET = "some-other-secret-0123456789abcdef012345678"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("AUTH_JWT_SECRET", "AUTH_MODE", "AUTH_USER_ID_CLAIM", "AUTH_PLACEHOLDER_PRINCIPAL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def verifier():
    return TokenVerifier(_SECRET)


@pytest.fixture
def make_token():
    def _make(subject: str = "user-42", secret: str = _SECRET, **kwargs) -> str:
        return issue_token(subject, secret, **kwargs)

    return _make


@pytest.fixture
def registry():
    return CollectorRegistry()


@pytest.fixture
def settings():
    return {
        "jwt_secret": _SECRET,
        "mode": "insecure",
        "log_level": "WARNING",
    }


@pytest.fixture
def app(settings, registry):
    return create_app(settings_override=settings, metrics_registry=registry)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers(make_token):
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def secret():
    return _SECRET


@pytest.fixture
def other_secret():
    return _OTHER_SECRET
