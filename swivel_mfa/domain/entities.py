from __future__ import annotations

from dataclasses import dataclass, field


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class SwivelConfig:
    swivel_url: str = ""
    shared_secret: str = field(default="", repr=False)
    ignore_ssl_errors: bool = False

    def is_complete(self) -> bool:
        return not (_is_blank(self.swivel_url) or _is_blank(self.shared_secret))


@dataclass(frozen=True)
class VerificationRequest:
    endpoint: str
    shared_secret: str = field(repr=False)
    principal_id: str
    password: str = field(repr=False)
    otc: str = field(repr=False)
    ignore_tls_errors: bool = False

    def __post_init__(self) -> None:
        if _is_blank(self.endpoint) or _is_blank(self.shared_secret):
            raise ValueError("Swivel url/shared secret cannot be blank")

    @classmethod
    def login(
        cls, config: SwivelConfig, principal_id: str, otc: str
    ) -> "VerificationRequest":
        """
        Build a login request for the given principal.
        Swivel-side passwords are not supported, only the one-time code.
        """
        return cls(
            endpoint=config.swivel_url,
            shared_secret=config.shared_secret,
            principal_id=principal_id,
            password="",
            otc=otc,
            ignore_tls_errors=config.ignore_ssl_errors,
        )


@dataclass(frozen=True)
class ExchangeResult:
    completed: bool
    action_succeeded: bool = False
    agent_error: str = ""
    response_code: int | None = None
    raw_response: str = ""


@dataclass(frozen=True)
class PrincipalResult:
    principal_id: str
