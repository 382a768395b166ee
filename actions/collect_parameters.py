"""
Action prompting the operator for hostname, storages, bridge and VLAN
"""
import dataclasses
from libs.errors import DiscoveryError
from libs.prompts import ask_hostname, ask_vlan, select_option
from .base import Action


class CollectParametersAction(Action):
    """Interactive parameter collection with defaults"""
    description = "collect container parameters"

    def execute(self, plan):
        prompter = self.ctx.prompter
        inventory = plan.inventory
        if not inventory.storages:
            raise DiscoveryError("No storage with content type 'rootdir' found")
        if not inventory.template_storages:
            raise DiscoveryError("No storage with content type 'vztmpl' found")
        if not inventory.bridges:
            raise DiscoveryError("No network bridge found")

        hostname = ask_hostname(prompter, self.cfg.hostname)
        storage = select_option("storage", inventory.storages, prompter, preferred=self.cfg.proxmox_storage)
        template_storage = select_option(
            "template storage",
            inventory.template_storages,
            prompter,
            preferred=self.cfg.proxmox_template_storage,
        )
        bridge = select_option("network bridge", inventory.bridges, prompter, preferred=self.cfg.proxmox_bridge)
        vlan = ask_vlan(prompter)
        return dataclasses.replace(
            plan,
            hostname=hostname,
            storage=storage,
            template_storage=template_storage,
            bridge=bridge,
            vlan=vlan,
            memory=self.cfg.resources.memory,
            rootfs_size=self.cfg.resources.rootfs_size,
        )
