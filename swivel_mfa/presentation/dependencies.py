from fastapi import Request

from swivel_mfa.domain.entities import SwivelConfig
from swivel_mfa.domain.error_codes import DEFAULT_ERROR_CODE_TABLE, ErrorCodeTable
from swivel_mfa.domain.ports.authentication_context import AuthenticationContextPort
from swivel_mfa.domain.ports.reachability_probe import ReachabilityProbePort
from swivel_mfa.domain.ports.swivel_transport import SwivelTransportPort
from swivel_mfa.infrastructure.swivel.transport import HttpAgentXmlTransport
from swivel_mfa.presentation.auth_context import HeaderAuthenticationContext
from swivel_mfa.settings import get_settings


def get_swivel_config() -> SwivelConfig:
    return get_settings().swivel_config()


def get_error_table() -> ErrorCodeTable:
    return DEFAULT_ERROR_CODE_TABLE


def get_transport() -> SwivelTransportPort:
    settings = get_settings()
    return HttpAgentXmlTransport(
        timeout=settings.swivel_timeout_seconds,
        agent_path=settings.swivel_agent_path,
    )


def get_probe(request: Request) -> ReachabilityProbePort:
    # This is set in swivel_mfa.main lifespan()
    return request.app.state.probe


def get_auth_context(request: Request) -> AuthenticationContextPort:
    return HeaderAuthenticationContext(request, get_settings().principal_header)
