"""
PCT Service - uses the host service to execute PCT CLI commands
"""
import logging
import time
from enum import Enum
from typing import Optional
from cli import PCT, Ping
from libs.errors import NetworkTimeoutError
from .host import HostService

logger = logging.getLogger(__name__)


class NetworkState(Enum):
    """Network readiness states of a freshly started container"""
    WAITING = "waiting"
    READY = "ready"
    FAILED = "failed"


class PCTService:
    """Service for executing PCT commands using the host service"""
    DEFAULT_SHELL = "bash"

    def __init__(self, host_service: HostService, shell: str = None):
        """
        Initialize PCT service
        Args:
            host_service: Host service used to run pct
            shell: Shell to use for command execution (default: bash)
        """
        self.host = host_service
        self.shell = shell or self.DEFAULT_SHELL

    def create(  # pylint: disable=too-many-arguments
        self,
        container_id: int,
        template_volume: str,
        hostname: str,
        memory: int,
        swap: int,
        cores: int,
        storage: str,
        rootfs_size: int,
        net0: str,
    ):
        """
        Create a privileged, nesting-enabled, onboot container in stopped state
        Args:
            container_id: Container ID
            template_volume: Template volume id (storage:vztmpl/name)
            hostname: Container hostname
            memory: Memory in MB
            swap: Swap in MB
            cores: Number of CPU cores
            storage: Rootfs storage name
            rootfs_size: Root filesystem size in GB
            net0: Network spec for eth0
        """
        cmd = PCT().container_id(container_id).create(
            template_volume=template_volume,
            hostname=hostname,
            memory=memory,
            swap=swap,
            cores=cores,
            storage=storage,
            rootfs_size=rootfs_size,
            net0=net0,
            unprivileged=False,
            nesting=True,
            onboot=True,
            start=False,
        )
        self.host.run(cmd, f"Creating container {container_id}")

    def start(self, container_id: int):
        """Start container using pct start"""
        self.host.run(PCT().container_id(container_id).start(), f"Starting container {container_id}")

    def execute(
        self, container_id: int, command: str, timeout: Optional[int] = None
    ) -> tuple[Optional[str], Optional[int]]:
        """
        Execute a shell snippet in the container, returning (output, exit_code)
        """
        logger.debug("Running in container %s: %s", container_id, command)
        cmd = PCT().container_id(container_id).shell(self.shell).exec_shell(command)
        return self.host.execute(cmd, timeout=timeout)

    def run(self, container_id: int, command: str, description: str, timeout: Optional[int] = None) -> Optional[str]:
        """Execute a shell snippet in the container, raising CommandError on failure"""
        logger.debug("Running in container %s: %s", container_id, command)
        cmd = PCT().container_id(container_id).shell(self.shell).exec_shell(command)
        return self.host.run(cmd, description, timeout=timeout)

    def run_interactive(self, container_id: int, command: str, description: str):
        """Execute a shell snippet in the container with the terminal attached"""
        cmd = PCT().container_id(container_id).shell(self.shell).exec_shell(command)
        self.host.run(cmd, description, interactive=True)

    def probe_network(self, container_id: int, target: str, wait: int = 1) -> bool:
        """Single-packet reachability probe from inside the container"""
        probe = Ping().count(1).wait(wait).host(target)
        cmd = PCT().container_id(container_id).exec(probe)
        # pct exec itself gets a margin over the ping deadline
        _, exit_code = self.host.execute(cmd, timeout=wait + 10)
        return exit_code == 0

    def wait_for_network(
        self,
        container_id: int,
        target: str,
        max_attempts: int = 30,
        sleep_interval: int = 1,
        probe_timeout: int = 1,
    ) -> int:
        """
        Poll until the container can reach target
        Args:
            container_id: Container ID
            target: Always-up external host
            max_attempts: Number of probes before giving up
            sleep_interval: Seconds between probes
            probe_timeout: Per-probe reply timeout in seconds
        Returns:
            Number of attempts used
        Raises:
            NetworkTimeoutError: no probe succeeded within max_attempts
        """
        state = NetworkState.WAITING
        attempt = 0
        while state is NetworkState.WAITING:
            attempt += 1
            if self.probe_network(container_id, target, wait=probe_timeout):
                state = NetworkState.READY
            elif attempt >= max_attempts:
                state = NetworkState.FAILED
            else:
                logger.debug("Network not ready yet (attempt %s/%s)", attempt, max_attempts)
                time.sleep(sleep_interval)
        if state is NetworkState.FAILED:
            raise NetworkTimeoutError(
                f"Network not available after {max_attempts} attempts ({target} unreachable)"
            )
        logger.info("Network ready after %s attempt(s).", attempt)
        return attempt
