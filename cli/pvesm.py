"""
PVESM (Proxmox storage manager) command wrapper
"""
import shlex
from dataclasses import dataclass
from typing import List, Optional
from .base import CommandWrapper

# Content types accepted by `pvesm status --content`
CONTENT_ROOTDIR = "rootdir"
CONTENT_VZTMPL = "vztmpl"


@dataclass
class StorageStatus:
    """One row of `pvesm status`"""
    name: str
    type: str
    status: str

    @property
    def active(self) -> bool:
        return self.status.lower() == "active"


class Pvesm(CommandWrapper):
    """Wrapper for pvesm commands with fluent API"""

    def __init__(self):
        self._content: Optional[str] = None

    def content(self, value: str) -> "Pvesm":
        """Filter by declared content type (returns self for chaining)."""
        self._content = value
        return self

    def status(self) -> str:
        """Generate storage status command"""
        if self._content:
            return f"pvesm status --content {shlex.quote(self._content)}"
        return "pvesm status"

    @staticmethod
    def parse_status(output: Optional[str]) -> List[StorageStatus]:
        """Parse `pvesm status` rows.

        Raises:
            ValueError: a data row has fewer than the three leading columns
        """
        rows = []
        for line in CommandWrapper.data_rows(output):
            fields = line.split()
            if len(fields) < 3:
                raise ValueError(f"Malformed pvesm status row: {line.strip()!r}")
            rows.append(StorageStatus(name=fields[0], type=fields[1], status=fields[2]))
        return rows
