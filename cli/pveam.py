"""
PVEAM (Proxmox appliance/template manager) command wrapper
"""
import shlex
from typing import List, Optional
from .base import CommandWrapper


class Pveam(CommandWrapper):
    """Wrapper for pveam commands - generates command strings and parses listings"""

    @staticmethod
    def available_cmd(section: Optional[str] = "system") -> str:
        """Generate command to list the downloadable template catalog"""
        if section:
            return f"pveam available --section {shlex.quote(section)}"
        return "pveam available"

    @staticmethod
    def list_cmd(storage: str) -> str:
        """Generate command to list templates cached on a storage"""
        return f"pveam list {shlex.quote(storage)}"

    @staticmethod
    def download_cmd(storage: str, template: str) -> str:
        """Generate command to download a template onto a storage"""
        return f"pveam download {shlex.quote(storage)} {shlex.quote(template)}"

    @staticmethod
    def parse_available(output: Optional[str]) -> List[str]:
        """Template names from `pveam available`, in catalog order.

        Rows look like ``system          debian-12-standard_12.7-1_amd64.tar.zst``;
        the name is the last column.
        """
        names = []
        for line in CommandWrapper.data_rows(output, header=False):
            fields = line.split()
            names.append(fields[-1])
        return names

    @staticmethod
    def parse_list(output: Optional[str]) -> List[str]:
        """Volume ids from `pveam list <storage>` (header row skipped)"""
        volids = []
        for line in CommandWrapper.data_rows(output):
            volids.append(line.split()[0])
        return volids

    @staticmethod
    def volume_has_template(volids: List[str], template: str) -> bool:
        """True when one of the volume ids names exactly this template"""
        return any(volid.rsplit("/", 1)[-1] == template for volid in volids)
