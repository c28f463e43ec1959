from typing import Protocol

from swivel_mfa.domain.entities import ExchangeResult, VerificationRequest


class SwivelTransportPort(Protocol):
    async def exchange(self, request: VerificationRequest) -> ExchangeResult:
        """Perform exactly one verification round trip. Must not retry."""
