import pytest

from swivel_mfa.domain.entities import SwivelConfig
from tests.fakes import ExplodingSwivelTransport, FakeProbe


@pytest.fixture()
def swivel_config():
    return SwivelConfig(
        swivel_url="https://swivel.test.local:8080/pinsafe",
        shared_secret="s3cret-shared",
    )


@pytest.fixture()
def exploding_transport():
    return ExplodingSwivelTransport()


@pytest.fixture()
def probe():
    return FakeProbe(reachable=True)
