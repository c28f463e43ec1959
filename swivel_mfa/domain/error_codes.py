from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ErrorKind(str, Enum):
    """Local failure taxonomy. Values double as user-facing message keys."""

    INVALID_CREDENTIAL = "swivel.auth.credential.invalid"
    MISSING_AUTHENTICATION_CONTEXT = "swivel.auth.context.missing"
    MISCONFIGURED = "swivel.server.misconfigured"
    REMOTE_FAILURE = "swivel.server.unreachable"

    OTC_MALFORMED = "swivel.auth.otc.malformed"
    PIN_NOT_SET = "swivel.auth.pin.notset"
    USER_LOCKED = "swivel.auth.user.locked"
    USER_NOT_ALLOWED = "swivel.auth.user.notallowed"
    USER_UNKNOWN = "swivel.auth.user.unknown"
    SESSION_ERROR = "swivel.server.session.error"
    AUTHENTICATION_FAILED = "swivel.server.error"

    @property
    def is_rejection(self) -> bool:
        """True when the server was reached and explicitly denied the OTC."""
        return self not in _NON_REJECTION_KINDS


_NON_REJECTION_KINDS = frozenset(
    {
        ErrorKind.INVALID_CREDENTIAL,
        ErrorKind.MISSING_AUTHENTICATION_CONTEXT,
        ErrorKind.MISCONFIGURED,
        ErrorKind.REMOTE_FAILURE,
    }
)


@dataclass(frozen=True)
class ErrorCodeTable:
    """Read-only mapping from Swivel agent error tokens to local kinds."""

    entries: Mapping[str, ErrorKind]
    fallback: ErrorKind = ErrorKind.AUTHENTICATION_FAILED

    def __post_init__(self) -> None:
        # private copy, so the caller's dict can't change the table afterwards
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def resolve(self, token: str | None) -> ErrorKind:
        if not token or not token.strip():
            return self.fallback
        return self.entries.get(token.strip(), self.fallback)

    def __contains__(self, token: object) -> bool:
        return token in self.entries

    def __len__(self) -> int:
        return len(self.entries)


DEFAULT_ERROR_CODE_TABLE = ErrorCodeTable(
    {
        "AGENT_ERROR_NO_OTC": ErrorKind.OTC_MALFORMED,
        "AGENT_ERROR_BAD_OTC": ErrorKind.OTC_MALFORMED,
        "AGENT_ERROR_NO_PIN": ErrorKind.PIN_NOT_SET,
        "AGENT_ERROR_USER_LOCKED": ErrorKind.USER_LOCKED,
        "AGENT_ERROR_NO_SECURITY_STRINGS": ErrorKind.USER_LOCKED,
        "AGENT_ERROR_AGENT_ACCESS": ErrorKind.USER_NOT_ALLOWED,
        "AGENT_ERROR_USER_NOT_IN_GROUP": ErrorKind.USER_NOT_ALLOWED,
        "AGENT_ERROR_NO_USER_FOUND": ErrorKind.USER_UNKNOWN,
        "AGENT_ERROR_NO_AUTH": ErrorKind.USER_UNKNOWN,
        "AGENT_ERROR_USERNAME": ErrorKind.USER_UNKNOWN,
        "AGENT_ERROR_SESSION": ErrorKind.SESSION_ERROR,
        "AGENT_ERROR_GENERAL": ErrorKind.AUTHENTICATION_FAILED,
    }
)
