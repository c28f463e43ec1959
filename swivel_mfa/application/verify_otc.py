import logging

from swivel_mfa.domain.entities import (
    PrincipalResult,
    SwivelConfig,
    VerificationRequest,
)
from swivel_mfa.domain.error_codes import (
    DEFAULT_ERROR_CODE_TABLE,
    ErrorCodeTable,
    ErrorKind,
)
from swivel_mfa.domain.errors import VerificationError
from swivel_mfa.domain.outcomes import (
    AuthenticationRejected,
    RemoteFailure,
    Success,
    interpret_exchange,
)
from swivel_mfa.domain.ports.swivel_transport import SwivelTransportPort

logger = logging.getLogger(__name__)


async def verify_otc(
    transport: SwivelTransportPort,
    config: SwivelConfig,
    otc: str | None,
    principal_id: str | None,
    error_table: ErrorCodeTable = DEFAULT_ERROR_CODE_TABLE,
) -> PrincipalResult:
    """
    Verify a one-time code for a principal that already passed primary
    authentication. Raises VerificationError classified by ErrorKind.
    """
    if not otc or not otc.strip():
        raise VerificationError(
            ErrorKind.INVALID_CREDENTIAL, "credential token is blank"
        )
    if not principal_id or not principal_id.strip():
        raise VerificationError(
            ErrorKind.MISSING_AUTHENTICATION_CONTEXT,
            "no authentication event to locate a principal",
        )
    if not config.is_complete():
        raise VerificationError(
            ErrorKind.MISCONFIGURED, "swivel url/shared secret is not specified"
        )

    logger.debug("swivel: verifying otc", extra={"principal_id": principal_id})
    request = VerificationRequest.login(config, principal_id, otc)
    result = await transport.exchange(request)
    outcome = interpret_exchange(result)

    if isinstance(outcome, Success):
        logger.info(
            "swivel: authentication succeeded", extra={"principal_id": principal_id}
        )
        return PrincipalResult(principal_id=principal_id)

    failure = {
        "principal_id": principal_id,
        "response_code": result.response_code,
        "agent_error": result.agent_error,
        "raw_response": result.raw_response,
    }

    if isinstance(outcome, RemoteFailure):
        logger.error("swivel: request error", extra=failure)
        raise VerificationError(
            ErrorKind.REMOTE_FAILURE,
            f"failed to authenticate swivel token: {outcome.raw_response}",
        )

    if isinstance(outcome, AuthenticationRejected):
        kind = error_table.resolve(outcome.remote_error_code)
    else:
        kind = error_table.fallback
    logger.error(
        "swivel: authentication rejected",
        extra={**failure, "error_kind": kind.value},
    )
    raise VerificationError(kind)
