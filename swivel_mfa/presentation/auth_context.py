from fastapi import Request

from swivel_mfa.domain.ports.authentication_context import AuthenticationContextPort


class HeaderAuthenticationContext(AuthenticationContextPort):
    """
    Reads the principal that the upstream primary authentication step
    attached to the request (e.g. by a gateway) from a trusted header.
    """

    def __init__(self, request: Request, header_name: str) -> None:
        self._request = request
        self._header_name = header_name

    def current_principal_id(self) -> str | None:
        value = self._request.headers.get(self._header_name)
        if value is None:
            return None
        return value.strip() or None
