"""FastAPI application factory."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI
from prometheus_client import CollectorRegistry

from principal_auth import __version__
from principal_auth.api.routes_health import router as health_router
from principal_auth.api.routes_whoami import router as whoami_router
from principal_auth.config import Settings
from principal_auth.middleware.authenticator import AuthenticatorMiddleware, build_verifier
from principal_auth.middleware.request_id import RequestIDMiddleware
from principal_auth.observability.logging import setup_logging
from principal_auth.observability.metrics import Metrics, get_metrics

logger = logging.getLogger("principal_auth.app")


def create_app(
    settings_override: dict[str, Any] | None = None,
    metrics_registry: CollectorRegistry | None = None,
) -> FastAPI:
    settings = Settings(**(settings_override or {}))
    setup_logging(settings.log_level, auth_level=settings.auth_log_level)

    # Raises ConfigurationError before anything is served
    verifier = build_verifier(settings)
    metrics = Metrics(metrics_registry) if metrics_registry is not None else get_metrics()

    app = FastAPI(title="Principal Auth", version=__version__)
    app.state.settings = settings
    app.state.metrics = metrics

    # Starlette wraps in reverse order: the last one added runs first
    app.add_middleware(
        AuthenticatorMiddleware,
        verifier=verifier,
        placeholder=settings.placeholder_principal,
        mode=settings.mode,
        public_paths=settings.public_paths,
        metrics=metrics,
    )
    app.add_middleware(RequestIDMiddleware)

    app.include_router(health_router)
    app.include_router(whoami_router)

    logger.info("Principal auth ready: mode=%s, claim=%s", settings.mode.value, settings.user_id_claim)
    return app
