from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from swivel_mfa.domain.entities import ExchangeResult


@dataclass(frozen=True)
class Success:
    pass


@dataclass(frozen=True)
class RemoteFailure:
    response_code: int | None
    raw_response: str


@dataclass(frozen=True)
class AuthenticationRejected:
    remote_error_code: str


@dataclass(frozen=True)
class AuthenticationRejectedGeneric:
    pass


VerificationOutcome = Union[
    Success, RemoteFailure, AuthenticationRejected, AuthenticationRejectedGeneric
]


def interpret_exchange(result: ExchangeResult) -> VerificationOutcome:
    if not result.completed:
        return RemoteFailure(result.response_code, result.raw_response)
    if result.action_succeeded:
        return Success()
    # a plain wrong code usually comes back without an agent error
    token = (result.agent_error or "").strip()
    if not token:
        return AuthenticationRejectedGeneric()
    return AuthenticationRejected(token)
