from typing import Protocol


class ReachabilityProbePort(Protocol):
    async def can_reach(self, endpoint: str) -> bool:
        """True only if a GET on endpoint answers 200. Never raises."""
