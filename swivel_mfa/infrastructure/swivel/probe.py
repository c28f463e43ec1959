from __future__ import annotations

import logging
from typing import Optional

import httpx

from swivel_mfa.domain.ports.reachability_probe import ReachabilityProbePort

logger = logging.getLogger(__name__)


class HttpReachabilityProbe(ReachabilityProbePort):
    def __init__(
        self,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 5.0,
    ) -> None:
        self._owns_client: bool = client is None
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(timeout=timeout)
        self._timeout = timeout

    async def can_reach(self, endpoint: str) -> bool:
        try:
            resp = await self._client.get(endpoint, timeout=self._timeout)
            return resp.status_code == 200
        except Exception as e:
            logger.warning(
                "swivel: ping failed", extra={"endpoint": endpoint, "error": str(e)}
            )
        return False

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
