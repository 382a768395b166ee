"""
Action launching the Newt service manager inside the container
"""
import logging
from cli import Curl
from .base import Action

logger = logging.getLogger(__name__)


class BootstrapNewtAction(Action):
    """Fetch the remote installer and hand the terminal to it"""
    description = "launch Newt service manager"
    mutates_host = True

    def execute(self, plan):
        newt = self.cfg.newt
        logger.info("Launching Newt Service Manager ...")
        logger.info("=" * 44)
        logger.info("  Newt Service Manager (interactive setup)")
        logger.info("=" * 44)
        if newt.endpoint:
            logger.info("  Endpoint: %s", newt.endpoint)
        logger.info("  Get Newt ID + Secret from Pangolin UI")

        script = Curl().silent().follow_redirects().pipe_to_shell(newt.installer_url)
        self.ctx.pct_service.run_interactive(plan.ctid, script, "Newt service manager")

        logger.info("Done! LXC %s (%s) is running with Newt agent.", plan.ctid, plan.hostname)
        logger.info("Manage: pct enter %s", plan.ctid)
        return plan
