from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from swivel_mfa.application.check_reachability import check_reachability
from swivel_mfa.application.verify_otc import verify_otc
from swivel_mfa.domain.entities import SwivelConfig
from swivel_mfa.domain.error_codes import ErrorCodeTable, ErrorKind
from swivel_mfa.domain.errors import VerificationError
from swivel_mfa.domain.ports.authentication_context import AuthenticationContextPort
from swivel_mfa.domain.ports.reachability_probe import ReachabilityProbePort
from swivel_mfa.domain.ports.swivel_transport import SwivelTransportPort
from swivel_mfa.presentation.dependencies import (
    get_auth_context,
    get_error_table,
    get_probe,
    get_swivel_config,
    get_transport,
)
from swivel_mfa.schemas.requests import SwivelTokenIn
from swivel_mfa.schemas.responses import PrincipalOut, ReachabilityOut

router = APIRouter(prefix="/swivel", tags=["Swivel"])

_STATUS_BY_KIND = {
    ErrorKind.INVALID_CREDENTIAL: status.HTTP_400_BAD_REQUEST,
    ErrorKind.MISSING_AUTHENTICATION_CONTEXT: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.MISCONFIGURED: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.REMOTE_FAILURE: status.HTTP_502_BAD_GATEWAY,
}


@router.post("/verify", response_model=PrincipalOut)
async def post_verify(
    body: SwivelTokenIn,
    transport: Annotated[SwivelTransportPort, Depends(get_transport)],
    config: Annotated[SwivelConfig, Depends(get_swivel_config)],
    error_table: Annotated[ErrorCodeTable, Depends(get_error_table)],
    auth_context: Annotated[AuthenticationContextPort, Depends(get_auth_context)],
):
    try:
        result = await verify_otc(
            transport=transport,
            config=config,
            otc=body.token,
            principal_id=auth_context.current_principal_id(),
            error_table=error_table,
        )
    except VerificationError as e:
        raise HTTPException(
            status_code=_STATUS_BY_KIND.get(e.kind, status.HTTP_401_UNAUTHORIZED),
            detail={"code": e.kind.value},
        )
    return PrincipalOut(principal_id=result.principal_id)


@router.get("/status", response_model=ReachabilityOut)
async def get_status(
    probe: Annotated[ReachabilityProbePort, Depends(get_probe)],
    config: Annotated[SwivelConfig, Depends(get_swivel_config)],
):
    return ReachabilityOut(reachable=await check_reachability(probe, config))
