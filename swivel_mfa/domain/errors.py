from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from swivel_mfa.domain.error_codes import ErrorKind


class DomainError(Exception):
    """Base class for all domain-level errors."""

    pass


class VerificationError(DomainError):
    """An OTC verification attempt failed.

    Callers branch on ``kind`` rather than on exception subclasses.
    """

    def __init__(self, kind: "ErrorKind", detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)
