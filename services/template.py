"""
Template Service - resolves OS templates from the pveam catalog and caches them
"""
import logging
from typing import Optional
from cli import Pveam
from libs.errors import TemplateNotFoundError
from .host import HostService

logger = logging.getLogger(__name__)

# pveam download can take several minutes on slow mirrors
DOWNLOAD_TIMEOUT = 900


class TemplateService:
    """Service for template lookup and download"""

    def __init__(self, host_service: HostService, section: str = "system"):
        self.host = host_service
        self.section = section

    def resolve(self, pattern: str) -> str:
        """
        Latest catalog template whose name contains pattern
        Raises:
            TemplateNotFoundError: nothing in the catalog matches
        """
        output = self.host.run(Pveam.available_cmd(self.section), "Listing available templates")
        matches = [name for name in Pveam.parse_available(output) if pattern in name]
        if not matches:
            raise TemplateNotFoundError(f"No template matching '{pattern}' found. Run: pveam update")
        template = matches[-1]
        logger.debug("Template candidates for %s: %s", pattern, ", ".join(matches))
        return template

    def is_cached(self, storage: str, template: str) -> bool:
        """Check if the storage already holds exactly this template"""
        output = self.host.run(Pveam.list_cmd(storage), f"Listing templates on {storage}")
        return Pveam.volume_has_template(Pveam.parse_list(output), template)

    def download(self, storage: str, template: str, timeout: Optional[int] = DOWNLOAD_TIMEOUT):
        """Download template onto storage"""
        logger.info("Downloading %s ...", template)
        self.host.run(Pveam.download_cmd(storage, template), f"Downloading template {template}", timeout=timeout)
