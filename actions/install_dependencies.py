"""
Action installing the packages the Newt installer needs
"""
import logging
from .base import Action

logger = logging.getLogger(__name__)


class InstallDependenciesAction(Action):
    """apt-get update + install inside the container"""
    description = "install dependencies"
    mutates_host = True

    def execute(self, plan):
        logger.info("Installing dependencies ...")
        self.ctx.apt_service.install(plan.ctid, self.cfg.newt.packages)
        return plan
