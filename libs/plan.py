"""
Provisioning state threaded through the procedure steps
"""
from dataclasses import dataclass, field
from typing import List, Optional
from .errors import PlanError

# Fixed container shape
CORES = 1
SWAP = 0
NET_IFACE = "eth0"


@dataclass(frozen=True)
class HostInventory:
    """Resources discovered on the Proxmox host"""
    storages: List[str] = field(default_factory=list)
    template_storages: List[str] = field(default_factory=list)
    bridges: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ProvisionPlan:  # pylint: disable=too-many-instance-attributes
    """Everything needed to create the container; each step returns a new plan"""
    ctid: Optional[int] = None
    hostname: Optional[str] = None
    memory: int = 128
    rootfs_size: int = 2
    storage: Optional[str] = None
    template_storage: Optional[str] = None
    bridge: Optional[str] = None
    vlan: Optional[int] = None
    template: Optional[str] = None
    template_cached: bool = False
    inventory: HostInventory = field(default_factory=HostInventory)
    cores: int = CORES
    swap: int = SWAP

    @property
    def net0(self) -> str:
        """Network spec for --net0"""
        spec = f"name={NET_IFACE},bridge={self.bridge},ip=dhcp"
        if self.vlan is not None:
            spec += f",tag={self.vlan}"
        return spec

    @property
    def template_volume(self) -> str:
        """Volume id of the template on the template storage"""
        return f"{self.template_storage}:vztmpl/{self.template}"

    def validate(self):
        """Refuse creation with any unresolved value"""
        missing = [
            name
            for name in ("ctid", "hostname", "storage", "template_storage", "bridge", "template")
            if not getattr(self, name)
        ]
        if missing:
            raise PlanError(f"Unresolved plan values: {', '.join(missing)}")

    def summary_lines(self) -> List[str]:
        """Human readable summary shown before confirmation"""
        network = f"{self.bridge} (DHCP)"
        if self.vlan is not None:
            network += f", VLAN {self.vlan}"
        template_state = "cached" if self.template_cached else "will be downloaded"
        return [
            f"  CTID:             {self.ctid}",
            f"  Hostname:         {self.hostname}",
            f"  Template:         {self.template} ({template_state})",
            f"  Storage:          {self.storage} ({self.rootfs_size} GB)",
            f"  Template storage: {self.template_storage}",
            f"  Memory:           {self.memory} MB",
            f"  Cores / swap:     {self.cores} / {self.swap} MB",
            f"  Network:          {network}",
        ]
