"""
Services executing host and container commands
"""
from .host import HostService
from .pct import PCTService, NetworkState
from .discovery import DiscoveryService
from .template import TemplateService
from .apt import APTService

__all__ = [
    "HostService",
    "PCTService",
    "NetworkState",
    "DiscoveryService",
    "TemplateService",
    "APTService",
]
