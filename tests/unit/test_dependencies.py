import pytest
from starlette.requests import Request

from principal_auth.dependencies import get_auth_outcome, get_principal_id


def _bare_request() -> Request:
    return Request({"type": "http", "method": "GET", "path": "/", "headers": []})


@pytest.mark.parametrize("dependency", [get_principal_id, get_auth_outcome])
def test_raises_without_middleware(dependency):
    with pytest.raises(RuntimeError, match="AuthenticatorMiddleware"):
        dependency(_bare_request())


def test_reads_values_set_by_middleware():
    request = _bare_request()
    request.state.principal_id = "alice"
    request.state.auth_outcome = "verified"
    assert get_principal_id(request) == "alice"
    assert get_auth_outcome(request) == "verified"
