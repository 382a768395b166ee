"""
APT-GET command wrapper with fluent API
"""
import shlex
import logging
from typing import List
from .base import CommandWrapper

logger = logging.getLogger(__name__)


class Apt(CommandWrapper):
    """Wrapper for apt-get commands - generates non-interactive command strings"""

    def __init__(self):
        self._quiet: bool = False

    def quiet(self, value: bool = True) -> "Apt":
        """Use -qq (returns self for chaining)."""
        self._quiet = value
        return self

    def _base(self) -> str:
        cmd = "DEBIAN_FRONTEND=noninteractive apt-get"
        if self._quiet:
            cmd += " -qq"
        return cmd

    def update(self) -> str:
        """Generate command to update package lists"""
        return f"{self._base()} update"

    def install(self, packages: List[str]) -> str:
        """Generate command to install packages"""
        if not packages:
            raise ValueError("install requires at least one package")
        packages_str = " ".join(shlex.quote(p) for p in packages)
        return f"{self._base()} install -y {packages_str}"
