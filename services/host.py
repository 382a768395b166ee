"""
Host Service - executes commands on the local Proxmox host
"""
import logging
import os
import shutil
import subprocess
from typing import Optional
from cli import CommandWrapper
from libs.errors import CommandError

logger = logging.getLogger(__name__)


class HostService:
    """Service for running host-level commands (pct, pveam, pvesm, ...)"""
    DEFAULT_TIMEOUT = None

    def __init__(self, default_timeout: Optional[int] = DEFAULT_TIMEOUT):
        self.default_timeout = default_timeout

    def execute(
        self, command: str, timeout: Optional[int] = None, interactive: bool = False
    ) -> tuple[Optional[str], Optional[int]]:
        """
        Execute a command through the shell
        Args:
            command: Command string (built by a cli wrapper)
            timeout: Timeout in seconds (None waits forever)
            interactive: Attach the terminal instead of capturing output
        Returns:
            Tuple of (output, exit_code). output is stdout, with stderr
            appended when the command failed. exit_code is None on timeout;
            output is None when interactive or on timeout
        """
        timeout = timeout if timeout is not None else self.default_timeout
        logger.debug("Running on host: %s", command)
        try:
            if interactive:
                result = subprocess.run(command, shell=True, check=False, timeout=timeout)
                return None, result.returncode
            result = subprocess.run(
                command,
                shell=True,
                check=False,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired:
            logger.debug("Command timed out after %ss: %s", timeout, command)
            return None, None
        output = result.stdout.strip() if result.stdout else ""
        errors = result.stderr.strip() if result.stderr else ""
        logger.debug("Exit code %s", result.returncode)
        if errors:
            if result.returncode == 0:
                # callers parse stdout; keep stderr out of it
                logger.debug("stderr: %s", errors)
            else:
                output = f"{output}\n{errors}" if output else errors
        return output, result.returncode

    def run(
        self, command: str, description: str, timeout: Optional[int] = None, interactive: bool = False
    ) -> Optional[str]:
        """
        Execute a command that must succeed
        Raises:
            CommandError: non-zero exit status or timeout
        """
        output, exit_code = self.execute(command, timeout=timeout, interactive=interactive)
        result = CommandWrapper.parse_result(output, exit_code)
        if result.failed:
            if output:
                logger.debug("%s output: %s", description, output)
            raise CommandError(description, command, result)
        return output

    @staticmethod
    def command_exists(name: str) -> bool:
        """Check if a command is available on PATH"""
        return shutil.which(name) is not None

    @staticmethod
    def is_root() -> bool:
        """Check if running with root privileges"""
        return os.geteuid() == 0
