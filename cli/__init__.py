"""
CLI command wrappers with error parsing and structured results
"""

from .base import CommandResult, ErrorType, CommandWrapper
from .pct import PCT
from .pveam import Pveam
from .pvesm import Pvesm, StorageStatus, CONTENT_ROOTDIR, CONTENT_VZTMPL
from .pvesh import Pvesh
from .ip import IpLink
from .apt import Apt
from .net import Ping, Curl

__all__ = [
    "CommandResult",
    "ErrorType",
    "CommandWrapper",
    "PCT",
    "Pveam",
    "Pvesm",
    "StorageStatus",
    "CONTENT_ROOTDIR",
    "CONTENT_VZTMPL",
    "Pvesh",
    "IpLink",
    "Apt",
    "Ping",
    "Curl",
]
