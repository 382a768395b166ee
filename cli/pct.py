"""
PCT (Proxmox Container Toolkit) command wrapper with fluent API
"""
import shlex
import logging
from typing import Optional
from .base import CommandWrapper

logger = logging.getLogger(__name__)


class PCT(CommandWrapper):
    """Wrapper for PCT commands - generates command strings"""

    def __init__(self):
        self._container_id: Optional[str] = None
        self._shell: str = "bash"

    def container_id(self, value) -> "PCT":
        """Set container id (returns self for chaining)."""
        self._container_id = str(value)
        return self

    def shell(self, value: str) -> "PCT":
        """Set shell used by exec_shell (returns self for chaining)."""
        self._shell = value
        return self

    def _require_id(self) -> str:
        if not self._container_id:
            raise ValueError("container_id must be set before generating a pct command")
        return self._container_id

    def create(  # pylint: disable=too-many-arguments
        self,
        template_volume: str,
        hostname: str,
        memory: int,
        swap: int,
        cores: int,
        storage: str,
        rootfs_size: int,
        net0: str,
        unprivileged: bool = False,
        nesting: bool = True,
        onboot: bool = True,
        start: bool = False,
    ) -> str:
        """Generate command to create a container"""
        features = "nesting=1" if nesting else "nesting=0"
        return " ".join(
            [
                "pct",
                "create",
                self._require_id(),
                shlex.quote(template_volume),
                f"--hostname {shlex.quote(hostname)}",
                f"--memory {memory}",
                f"--swap {swap}",
                f"--cores {cores}",
                f"--rootfs {shlex.quote(f'{storage}:{rootfs_size}')}",
                f"--net0 {shlex.quote(net0)}",
                f"--unprivileged {'1' if unprivileged else '0'}",
                f"--features {features}",
                f"--onboot {'1' if onboot else '0'}",
                f"--start {'1' if start else '0'}",
            ]
        )

    def start(self) -> str:
        """Generate command to start a container"""
        return f"pct start {self._require_id()}"

    def exec(self, command: str) -> str:
        """Generate command running an argv-style command in the container, no shell"""
        return f"pct exec {self._require_id()} -- {command}"

    def exec_shell(self, script: str) -> str:
        """Generate command running a shell snippet in the container"""
        return f"pct exec {self._require_id()} -- {self._shell} -c {shlex.quote(script)}"

