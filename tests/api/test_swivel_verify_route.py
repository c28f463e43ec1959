import pytest

from swivel_mfa.domain.entities import SwivelConfig
from tests.api.conftest import as_principal
from tests.fakes import ExplodingSwivelTransport, FakeSwivelTransport, no_reply, rejected


def test_verify_happy_path(client, app_and_deps):
    _, deps = app_and_deps

    response = client.post(
        "/v1/swivel/verify",
        json={"token": "123456"},
        headers=as_principal("casuser"),
    )

    assert response.status_code == 200
    assert response.json() == {"principal_id": "casuser"}
    (sent,) = deps.transport.requests
    assert sent.principal_id == "casuser"
    assert sent.otc == "123456"


def test_verify_blank_token_is_400(client, app_and_deps):
    _, deps = app_and_deps
    deps.transport = ExplodingSwivelTransport()

    response = client.post(
        "/v1/swivel/verify", json={"token": "  "}, headers=as_principal("casuser")
    )

    assert response.status_code == 400
    assert response.json() == {"detail": {"code": "swivel.auth.credential.invalid"}}


def test_verify_without_principal_is_401(client, app_and_deps):
    _, deps = app_and_deps
    deps.transport = ExplodingSwivelTransport()

    response = client.post("/v1/swivel/verify", json={"token": "123456"})

    assert response.status_code == 401
    assert response.json() == {"detail": {"code": "swivel.auth.context.missing"}}


def test_verify_misconfigured_is_503(client, app_and_deps):
    _, deps = app_and_deps
    deps.transport = ExplodingSwivelTransport()
    deps.config = SwivelConfig(swivel_url="https://swivel.test.local")

    response = client.post(
        "/v1/swivel/verify", json={"token": "123456"}, headers=as_principal("casuser")
    )

    assert response.status_code == 503
    assert response.json() == {"detail": {"code": "swivel.server.misconfigured"}}


def test_verify_remote_failure_is_502(client, app_and_deps):
    _, deps = app_and_deps
    deps.transport = FakeSwivelTransport(no_reply())

    response = client.post(
        "/v1/swivel/verify", json={"token": "123456"}, headers=as_principal("casuser")
    )

    assert response.status_code == 502
    assert response.json() == {"detail": {"code": "swivel.server.unreachable"}}


@pytest.mark.parametrize(
    "token, code",
    [
        ("AGENT_ERROR_USER_LOCKED", "swivel.auth.user.locked"),
        ("AGENT_ERROR_NO_USER_FOUND", "swivel.auth.user.unknown"),
        ("AGENT_ERROR_XYZ", "swivel.server.error"),
        ("", "swivel.server.error"),
    ],
)
def test_verify_rejections_are_401_with_message_key(client, app_and_deps, token, code):
    _, deps = app_and_deps
    deps.transport = FakeSwivelTransport(rejected(token))

    response = client.post(
        "/v1/swivel/verify", json={"token": "123456"}, headers=as_principal("casuser")
    )

    assert response.status_code == 401
    assert response.json() == {"detail": {"code": code}}


def test_verify_requires_token_field(client):
    response = client.post(
        "/v1/swivel/verify", json={}, headers=as_principal("casuser")
    )
    assert response.status_code == 422
