"""
Action waiting until the container reaches the internet
"""
import logging
from .base import Action

logger = logging.getLogger(__name__)


class WaitForNetworkAction(Action):
    """Bounded readiness poll; NetworkTimeoutError aborts the run"""
    description = "wait for network"

    def execute(self, plan):
        waits = self.cfg.waits
        logger.info("Waiting for network ...")
        self.ctx.pct_service.wait_for_network(
            plan.ctid,
            waits.probe_host,
            max_attempts=waits.network_attempts,
            sleep_interval=waits.network_interval,
            probe_timeout=waits.probe_timeout,
        )
        return plan
