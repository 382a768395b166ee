"""
PVESH (Proxmox API shell) command wrapper
"""
import shlex
from typing import Optional
from .base import CommandWrapper

NEXTID_PATH = "/cluster/nextid"


class Pvesh(CommandWrapper):
    """Wrapper for pvesh commands - generates command strings"""

    @staticmethod
    def get_cmd(path: str) -> str:
        """Generate API GET command"""
        return f"pvesh get {shlex.quote(path)}"

    @staticmethod
    def next_id_cmd() -> str:
        """Generate command returning the next free container/VM id"""
        return Pvesh.get_cmd(NEXTID_PATH)

    @staticmethod
    def parse_next_id(output: Optional[str]) -> int:
        """Parse `pvesh get /cluster/nextid`; output may be JSON-quoted.

        Raises:
            ValueError: output is not a positive integer
        """
        value = (output or "").strip().strip('"')
        if not value.isdigit() or int(value) <= 0:
            raise ValueError(f"Unexpected next id output: {output!r}")
        return int(value)
