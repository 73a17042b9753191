"""Logging setup: one stdout handler, bearer credentials masked on output."""

from __future__ import annotations

import logging
import re
import sys

AUTH_LOGGER = "principal_auth.middleware"

_BEARER = re.compile(r"(Bearer\s+)[A-Za-z0-9\-._~+/]+=*")
_JWT = re.compile(r"eyJ[0-9A-Za-z_-]+\.[0-9A-Za-z_-]+\.[0-9A-Za-z_-]*")


def redact_credentials(text: str) -> str:
    text = _BEARER.sub(r"\1[REDACTED]", text)
    return _JWT.sub("[REDACTED]", text)


class CredentialRedactingFilter(logging.Filter):
    """Masks bearer tokens and JWT-shaped strings in formatted messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_credentials(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def _level(name: str | None, default: int) -> int:
    if not name:
        return default
    return getattr(logging, name.upper(), default)


def setup_logging(level: str = "INFO", auth_level: str | None = None) -> None:
    """Install the stdout handler on the root logger.

    ``auth_level`` sets the authenticator's logger on its own, so per-request
    DEBUG lines about rejected credentials can be enabled without turning the
    whole process to DEBUG.
    """
    log_level = _level(level, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handler.addFilter(CredentialRedactingFilter())

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers.clear()
    root.addHandler(handler)

    # Unset means inherit from root
    logging.getLogger(AUTH_LOGGER).setLevel(_level(auth_level, logging.NOTSET))

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
