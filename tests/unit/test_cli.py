import jwt
from typer.testing import CliRunner

import principal_auth.cli as cli

runner = CliRunner()


def _token(result):
    # library warnings may precede the token on the captured stream
    return result.stdout.strip().splitlines()[-1]


def test_issue_token_with_explicit_secret(secret):
    result = runner.invoke(cli.app, ["issue-token", "alice", "--secret", secret, "--ttl", "60"])
    assert result.exit_code == 0
    payload = jwt.decode(_token(result), secret, algorithms=["HS256"])
    assert payload["userId"] == "alice"
    assert payload["exp"] - payload["iat"] == 60


def test_issue_token_reads_env_secret(monkeypatch, secret):
    monkeypatch.setenv("AUTH_JWT_SECRET", secret)
    result = runner.invoke(cli.app, ["issue-token", "bob"])
    assert result.exit_code == 0
    assert jwt.decode(_token(result), secret, algorithms=["HS256"])["userId"] == "bob"


def test_issue_token_strict_requires_secret():
    result = runner.invoke(cli.app, ["issue-token", "carol"])
    assert result.exit_code == 1


def test_issue_token_insecure_uses_default_secret(monkeypatch):
    monkeypatch.setenv("AUTH_MODE", "insecure")
    result = runner.invoke(cli.app, ["issue-token", "dave"])
    assert result.exit_code == 0
    assert jwt.decode(_token(result), "secret", algorithms=["HS256"])["userId"] == "dave"


def test_serve_invokes_uvicorn(monkeypatch):
    called = {}

    def fake_run(app, **kwargs):
        called["app"] = app
        called.update(kwargs)

    monkeypatch.setattr(cli.uvicorn, "run", fake_run)
    result = runner.invoke(cli.app, ["serve", "--port", "9001"])
    assert result.exit_code == 0
    assert called["app"] == "principal_auth.app:create_app"
    assert called["factory"] is True
    assert called["port"] == 9001


def test_serve_passes_explicit_zero_port(monkeypatch):
    called = {}
    monkeypatch.setattr(cli.uvicorn, "run", lambda app, **kwargs: called.update(kwargs))
    result = runner.invoke(cli.app, ["serve", "--port", "0", "--host", ""])
    assert result.exit_code == 0
    assert called["port"] == 0
    assert called["host"] == ""


def test_serve_help_mentions_strict_default():
    result = runner.invoke(cli.app, ["serve", "--help"])
    assert result.exit_code == 0
    assert "AUTH_MODE" in result.stdout
