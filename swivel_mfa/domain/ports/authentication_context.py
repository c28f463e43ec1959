from typing import Protocol


class AuthenticationContextPort(Protocol):
    def current_principal_id(self) -> str | None:
        """Principal established by the primary authentication step, if any."""
