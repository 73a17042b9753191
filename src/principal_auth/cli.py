"""Command-line entry points for running the service and minting dev tokens."""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

import typer
import uvicorn

from principal_auth.auth.tokens import issue_token
from principal_auth.config import DEFAULT_INSECURE_SECRET, AuthMode, get_settings

app = typer.Typer(help="Bearer-token principal resolution")


@app.command()
def serve(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Run the API with uvicorn using AUTH_* settings.

    AUTH_MODE defaults to strict, which refuses to start without
    AUTH_JWT_SECRET. Set AUTH_MODE=insecure to fall back to the built-in
    secret and the placeholder principal.
    """

    settings = get_settings()
    uvicorn.run(
        "principal_auth.app:create_app",
        factory=True,
        host=host if host is not None else settings.host,
        port=port if port is not None else settings.port,
        log_level=settings.log_level.lower(),
    )


@app.command("issue-token")
def issue_token_cmd(
    subject: str,
    ttl: Optional[int] = typer.Option(None, help="Lifetime in seconds"),
    secret: Optional[str] = typer.Option(None, envvar="AUTH_JWT_SECRET", help="Signing secret"),
) -> None:
    """Print a signed development token for SUBJECT."""

    settings = get_settings()
    if not secret:
        if settings.mode is AuthMode.STRICT:
            typer.echo("AUTH_JWT_SECRET must be set when AUTH_MODE=strict", err=True)
            raise typer.Exit(code=1)
        secret = DEFAULT_INSECURE_SECRET
    token = issue_token(
        subject,
        secret,
        ttl=timedelta(seconds=ttl if ttl is not None else settings.token_ttl_seconds),
        user_id_claim=settings.user_id_claim,
        algorithm=settings.jwt_algorithms[0],
    )
    typer.echo(token)


if __name__ == "__main__":  # pragma: no cover - manual invocation
    app()
