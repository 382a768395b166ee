"""
Action to create and start the container
"""
import logging
import time
from .base import Action

logger = logging.getLogger(__name__)


class CreateContainerAction(Action):
    """Create container with the fixed resource shape, then start it"""
    description = "create and start container"
    mutates_host = True

    def execute(self, plan):
        plan.validate()
        pct_service = self.ctx.pct_service
        logger.info("Creating LXC %s (%s) ...", plan.ctid, plan.hostname)
        pct_service.create(
            container_id=plan.ctid,
            template_volume=plan.template_volume,
            hostname=plan.hostname,
            memory=plan.memory,
            swap=plan.swap,
            cores=plan.cores,
            storage=plan.storage,
            rootfs_size=plan.rootfs_size,
            net0=plan.net0,
        )
        logger.info("LXC %s created.", plan.ctid)

        logger.info("Starting LXC %s ...", plan.ctid)
        pct_service.start(plan.ctid)
        time.sleep(self.cfg.waits.settle_delay)
        return plan
