"""
Configuration data model - class-based representation of newt-lxc.yaml
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
import yaml
from .errors import ConfigError

DEFAULT_INSTALLER_URL = (
    "https://raw.githubusercontent.com/dpurnam/scripts/main/newt/newt-service-manager.sh"
)

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "NEWT_HOSTNAME": (None, "hostname"),
    "NEWT_BRIDGE": ("proxmox", "bridge"),
    "NEWT_STORAGE": ("proxmox", "storage"),
    "NEWT_TEMPLATE_STORAGE": ("proxmox", "template_storage"),
    "NEWT_MEMORY": ("resources", "memory"),
    "NEWT_DISK": ("resources", "rootfs_size"),
}


def _package_list(value) -> List[str]:
    """Package names from YAML: a list, or one name as a plain string"""
    if value is None:
        return ["curl", "ca-certificates"]
    if isinstance(value, str):
        value = value.split()
    valid = isinstance(value, list) and value and all(isinstance(item, str) and item for item in value)
    if not valid:
        raise ConfigError(f"newt.packages must be a list of package names, got {value!r}")
    return list(value)


@dataclass
class ContainerResources:
    """Container resource allocation (memory in MB, rootfs in GB)"""
    memory: int = 128
    rootfs_size: int = 2


@dataclass
class ProxmoxConfig:
    """Preferred host resources; None means choose from discovery"""
    storage: Optional[str] = None
    template_storage: Optional[str] = None
    bridge: Optional[str] = None
    default_bridge: str = "vmbr0"


@dataclass
class TemplateConfig:
    """OS template selection"""
    pattern: str = "debian-12-standard"
    section: str = "system"


@dataclass
class WaitsConfig:
    """Wait/retry configuration"""
    settle_delay: int = 5
    network_attempts: int = 30
    network_interval: int = 1
    probe_host: str = "github.com"
    probe_timeout: int = 1


@dataclass
class NewtConfig:
    """Newt agent bootstrap configuration"""
    installer_url: str = DEFAULT_INSTALLER_URL
    endpoint: Optional[str] = None
    packages: List[str] = field(default_factory=lambda: ["curl", "ca-certificates"])


@dataclass
class NewtLxcConfig:
    """Main configuration class"""
    hostname: str = "newt"
    resources: ContainerResources = field(default_factory=ContainerResources)
    proxmox: ProxmoxConfig = field(default_factory=ProxmoxConfig)
    template: TemplateConfig = field(default_factory=TemplateConfig)
    waits: WaitsConfig = field(default_factory=WaitsConfig)
    newt: NewtConfig = field(default_factory=NewtConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "NewtLxcConfig":
        """Create NewtLxcConfig from dictionary (loaded from YAML)"""
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigError("Configuration root must be a mapping")
        try:
            res_data = data.get("resources") or {}
            resources = ContainerResources(
                memory=int(res_data.get("memory", ContainerResources.memory)),
                rootfs_size=int(res_data.get("rootfs_size", ContainerResources.rootfs_size)),
            )
            px_data = data.get("proxmox") or {}
            proxmox = ProxmoxConfig(
                storage=px_data.get("storage"),
                template_storage=px_data.get("template_storage"),
                bridge=px_data.get("bridge"),
                default_bridge=px_data.get("default_bridge", ProxmoxConfig.default_bridge),
            )
            tmpl_data = data.get("template") or {}
            template = TemplateConfig(
                pattern=tmpl_data.get("pattern", TemplateConfig.pattern),
                section=tmpl_data.get("section", TemplateConfig.section),
            )
            waits_data = data.get("waits") or {}
            waits = WaitsConfig(
                settle_delay=int(waits_data.get("settle_delay", WaitsConfig.settle_delay)),
                network_attempts=int(waits_data.get("network_attempts", WaitsConfig.network_attempts)),
                network_interval=int(waits_data.get("network_interval", WaitsConfig.network_interval)),
                probe_host=waits_data.get("probe_host", WaitsConfig.probe_host),
                probe_timeout=int(waits_data.get("probe_timeout", WaitsConfig.probe_timeout)),
            )
            newt_data = data.get("newt") or {}
            newt = NewtConfig(
                installer_url=newt_data.get("installer_url", DEFAULT_INSTALLER_URL),
                endpoint=newt_data.get("endpoint"),
                packages=_package_list(newt_data.get("packages")),
            )
        except (TypeError, ValueError, AttributeError) as err:
            raise ConfigError(f"Invalid configuration value: {err}") from err
        cfg = cls(
            hostname=str(data.get("hostname", cls.hostname)),
            resources=resources,
            proxmox=proxmox,
            template=template,
            waits=waits,
            newt=newt,
        )
        cfg.validate()
        return cfg

    def validate(self):
        """Reject values the procedure cannot work with"""
        if self.resources.memory <= 0 or self.resources.rootfs_size <= 0:
            raise ConfigError("memory and rootfs_size must be positive")
        if self.waits.network_attempts < 1:
            raise ConfigError("waits.network_attempts must be at least 1")
        if self.waits.network_interval < 0 or self.waits.settle_delay < 0:
            raise ConfigError("wait intervals cannot be negative")
        if not self.template.pattern:
            raise ConfigError("template.pattern cannot be empty")

    def apply_env(self, environ: Optional[Mapping[str, str]] = None) -> "NewtLxcConfig":
        """Apply NEWT_* environment overrides in place"""
        environ = os.environ if environ is None else environ
        for var, (section, key) in ENV_OVERRIDES.items():
            value = environ.get(var)
            if value is None or value == "":
                continue
            target = self if section is None else getattr(self, section)
            if isinstance(getattr(target, key), int):
                try:
                    value = int(value)
                except ValueError as err:
                    raise ConfigError(f"{var} must be an integer, got {value!r}") from err
            setattr(target, key, value)
        self.validate()
        return self

    # Convenience properties
    @property
    def proxmox_storage(self) -> Optional[str]:
        """Return preferred rootfs storage."""
        return self.proxmox.storage

    @property
    def proxmox_template_storage(self) -> Optional[str]:
        """Return preferred template storage."""
        return self.proxmox.template_storage

    @property
    def proxmox_bridge(self) -> Optional[str]:
        """Return preferred bridge."""
        return self.proxmox.bridge


def load_config(path: Path, required: bool = False) -> NewtLxcConfig:
    """Load configuration from a YAML file.

    A missing file yields defaults unless ``required`` is set.
    """
    if not path.exists():
        if required:
            raise ConfigError(f"Configuration file {path} not found")
        return NewtLxcConfig()
    try:
        with open(path, "r", encoding="utf-8") as config_file:
            data = yaml.safe_load(config_file)
    except (OSError, yaml.YAMLError) as err:
        raise ConfigError(f"Error loading configuration: {err}") from err
    return NewtLxcConfig.from_dict(data)
