"""
iproute2 link command wrapper
"""
from typing import List, Optional
from .base import CommandWrapper


class IpLink(CommandWrapper):
    """Wrapper for `ip link` with fluent API"""

    def __init__(self):
        self._type: Optional[str] = None

    def type(self, value: str) -> "IpLink":
        """Restrict listing to a link type (returns self for chaining)."""
        self._type = value
        return self

    def show(self) -> str:
        """Generate one-line-per-link listing command"""
        cmd = "ip -o link show"
        if self._type:
            cmd += f" type {self._type}"
        return cmd

    @staticmethod
    def parse_names(output: Optional[str]) -> List[str]:
        """Interface names from `ip -o link show` output.

        ``4: vmbr0: <BROADCAST,MULTICAST,UP> mtu 1500 ...`` gives ``vmbr0``;
        ``vmbr0.100@vmbr0`` style names lose the parent suffix.
        """
        names = []
        for line in CommandWrapper.data_rows(output, header=False):
            parts = line.split(": ")
            if len(parts) < 2:
                continue
            name = parts[1].split("@")[0].strip()
            if name and name not in names:
                names.append(name)
        return names
