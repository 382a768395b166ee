"""
Action verifying the tool runs as root on a Proxmox host
"""
import logging
from libs.errors import PreconditionError
from .base import Action

logger = logging.getLogger(__name__)


class PreflightAction(Action):
    """Check for pct and root privileges before anything else"""
    description = "preflight checks"

    def execute(self, plan):
        if not self.ctx.host_service.command_exists("pct"):
            raise PreconditionError("This script must run on a Proxmox host (pct not found).")
        if not self.ctx.host_service.is_root():
            raise PreconditionError("Run as root.")
        logger.debug("Preflight checks passed")
        return plan
