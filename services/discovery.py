"""
Discovery Service - enumerates host resources (ids, storages, bridges)
"""
import logging
from typing import List
from cli import IpLink, Pvesh, Pvesm, CONTENT_ROOTDIR, CONTENT_VZTMPL
from libs.errors import DiscoveryError
from libs.plan import HostInventory
from .host import HostService

logger = logging.getLogger(__name__)


class DiscoveryService:
    """Service for querying the Proxmox host for available resources"""

    def __init__(self, host_service: HostService, default_bridge: str = "vmbr0"):
        self.host = host_service
        self.default_bridge = default_bridge

    def next_container_id(self) -> int:
        """Next free container id from the cluster"""
        output = self.host.run(Pvesh.next_id_cmd(), "Querying next container id")
        try:
            return Pvesh.parse_next_id(output)
        except ValueError as err:
            raise DiscoveryError(str(err)) from err

    def storages(self, content: str) -> List[str]:
        """Active storage names declaring the given content type"""
        output = self.host.run(Pvesm().content(content).status(), f"Listing {content} storage")
        try:
            rows = Pvesm.parse_status(output)
        except ValueError as err:
            raise DiscoveryError(str(err)) from err
        for row in rows:
            if not row.active:
                logger.debug("Skipping %s storage %s (status %s)", content, row.name, row.status)
        names = [row.name for row in rows if row.active]
        if not names:
            raise DiscoveryError(f"No storage with content type '{content}' found")
        return names

    def bridges(self) -> List[str]:
        """Linux bridge names, falling back to the default bridge"""
        output, exit_code = self.host.execute(IpLink().type("bridge").show())
        names = IpLink.parse_names(output) if exit_code == 0 else []
        if not names:
            logger.warning("No network bridges found, falling back to %s", self.default_bridge)
            return [self.default_bridge]
        return names

    def inventory(self) -> HostInventory:
        """Run all resource queries"""
        return HostInventory(
            storages=self.storages(CONTENT_ROOTDIR),
            template_storages=self.storages(CONTENT_VZTMPL),
            bridges=self.bridges(),
        )
