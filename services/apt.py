"""
APT Service - installs packages inside a container, wraps Apt CLI
"""
import logging
from typing import List
from cli.apt import Apt
from .pct import PCTService

logger = logging.getLogger(__name__)
APT_LONG_TIMEOUT = 600


class APTService:
    """Service for non-interactive apt-get runs inside a container"""

    def __init__(self, pct_service: PCTService, long_timeout: int = APT_LONG_TIMEOUT):
        self.pct = pct_service
        self.long_timeout = long_timeout

    def install(self, container_id: int, packages: List[str]):
        """Refresh package lists and install packages in one pct exec"""
        update_cmd = Apt().quiet().update()
        install_cmd = Apt().quiet().install(packages)
        script = f"{update_cmd} && {install_cmd} > /dev/null"
        self.pct.run(
            container_id,
            script,
            f"Installing {', '.join(packages)}",
            timeout=self.long_timeout,
        )
