from swivel_mfa.domain.entities import SwivelConfig
from swivel_mfa.domain.ports.reachability_probe import ReachabilityProbePort


async def check_reachability(
    probe: ReachabilityProbePort, config: SwivelConfig
) -> bool:
    if not config.swivel_url or not config.swivel_url.strip():
        return False
    return await probe.can_reach(config.swivel_url)
