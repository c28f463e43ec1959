import pytest
from fastapi.testclient import TestClient

from swivel_mfa.domain.entities import SwivelConfig
from swivel_mfa.main import create_app
from swivel_mfa.presentation.dependencies import (
    get_probe,
    get_swivel_config,
    get_transport,
)
from tests.fakes import FakeProbe, FakeSwivelTransport, passed

PRINCIPAL_HEADER = "X-Authenticated-Principal"


class Deps:
    def __init__(self) -> None:
        self.transport = FakeSwivelTransport(passed())
        self.probe = FakeProbe(reachable=True)
        self.config = SwivelConfig(
            swivel_url="https://swivel.test.local/pinsafe",
            shared_secret="s3cret-shared",
        )


@pytest.fixture()
def app_and_deps():
    app = create_app()
    deps = Deps()

    app.dependency_overrides[get_transport] = lambda: deps.transport
    app.dependency_overrides[get_probe] = lambda: deps.probe
    app.dependency_overrides[get_swivel_config] = lambda: deps.config

    try:
        yield app, deps
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app_and_deps):
    app, _ = app_and_deps
    return TestClient(app, raise_server_exceptions=False)


def as_principal(principal_id: str) -> dict[str, str]:
    return {PRINCIPAL_HEADER: principal_id}
