from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from swivel_mfa.domain.entities import ExchangeResult, VerificationRequest
from swivel_mfa.domain.ports.swivel_transport import SwivelTransportPort
from swivel_mfa.infrastructure.swivel.agent_xml import (
    AgentXmlParseError,
    build_login_request,
    parse_response,
)

logger = logging.getLogger(__name__)

_MAX_RAW_RESPONSE = 500


class HttpAgentXmlTransport(SwivelTransportPort):
    """
    Sends one AgentXML login request per exchange.

    A fresh AsyncClient is opened for every exchange so the TLS mode can
    follow the request. Pass ``transport`` to plug in e.g. httpx.MockTransport.
    """

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        agent_path: str = "/AgentXML",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout = timeout
        self._agent_path = agent_path if agent_path.startswith("/") else f"/{agent_path}"
        self._transport = transport

    def url_for(self, request: VerificationRequest) -> str:
        return f"{request.endpoint.rstrip('/')}{self._agent_path}"

    def client_options(self, request: VerificationRequest) -> Dict[str, Any]:
        options: Dict[str, Any] = {"timeout": self._timeout, "verify": True}
        if request.ignore_tls_errors:
            # INSECURE: certificate validation is off for this exchange
            options["verify"] = False
        if self._transport is not None:
            options["transport"] = self._transport
        return options

    async def exchange(self, request: VerificationRequest) -> ExchangeResult:
        if request.ignore_tls_errors:
            logger.warning(
                "swivel: TLS certificate validation disabled",
                extra={"endpoint": request.endpoint},
            )

        url = self.url_for(request)
        body = build_login_request(request)
        headers = {"Content-Type": "text/xml; charset=utf-8"}

        try:
            async with httpx.AsyncClient(**self.client_options(request)) as client:
                resp = await client.post(url, content=body, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(
                "swivel: HTTP error",
                extra={"endpoint": request.endpoint, "error": str(e)},
            )
            return ExchangeResult(completed=False, raw_response=str(e))

        text = resp.text
        if not (200 <= resp.status_code < 300):
            return ExchangeResult(
                completed=False,
                response_code=resp.status_code,
                raw_response=text[:_MAX_RAW_RESPONSE],
            )

        try:
            reply = parse_response(text)
        except AgentXmlParseError as e:
            logger.warning("swivel: unusable response", extra={"error": str(e)})
            return ExchangeResult(
                completed=False,
                response_code=resp.status_code,
                raw_response=text[:_MAX_RAW_RESPONSE],
            )

        return ExchangeResult(
            completed=True,
            action_succeeded=reply.passed,
            agent_error=reply.agent_error,
            response_code=resp.status_code,
            raw_response=text[:_MAX_RAW_RESPONSE],
        )
