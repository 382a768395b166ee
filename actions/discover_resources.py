"""
Action querying the host for the next CTID, storages and bridges
"""
import dataclasses
import logging
from .base import Action

logger = logging.getLogger(__name__)


class DiscoverResourcesAction(Action):
    """Fill in the CTID and the host inventory"""
    description = "discover host resources"

    def execute(self, plan):
        discovery = self.ctx.discovery_service
        ctid = discovery.next_container_id()
        logger.info("Using CTID: %s", ctid)
        inventory = discovery.inventory()
        logger.debug(
            "Discovered storages=%s template_storages=%s bridges=%s",
            inventory.storages,
            inventory.template_storages,
            inventory.bridges,
        )
        return dataclasses.replace(plan, ctid=ctid, inventory=inventory)
