"""
Error taxonomy for the provisioning procedure
"""
from typing import Optional, TYPE_CHECKING
if TYPE_CHECKING:
    from cli.base import CommandResult


class ProvisionError(RuntimeError):
    """Base class for every fatal provisioning error."""
    label = "Provisioning failed"


class PreconditionError(ProvisionError):
    """Wrong execution context or insufficient privilege."""
    label = "Precondition failed"


class ConfigError(ProvisionError):
    """Configuration file or environment override is invalid."""
    label = "Configuration error"


class DiscoveryError(ProvisionError):
    """A required host resource could not be discovered."""
    label = "Discovery failed"


class PlanError(ProvisionError):
    """The resolved plan is incomplete."""
    label = "Invalid plan"


class TemplateNotFoundError(ProvisionError):
    """No catalog template matches the requested OS pattern."""
    label = "Template not found"


class NetworkTimeoutError(ProvisionError):
    """The container never reached the network."""
    label = "Network timeout"


class InputClosedError(ProvisionError):
    """Operator input ended before a required answer was given."""
    label = "Input closed"


class CommandError(ProvisionError):
    """An external command returned a failure status."""
    label = "Command failed"

    def __init__(self, description: str, command: str, result: Optional["CommandResult"] = None):
        self.description = description
        self.command = command
        self.result = result
        detail = ""
        if result is not None:
            detail = f": {result.error_type.value} - {result.error_message}"
        super().__init__(f"{description} failed{detail}")


class AbortedByUser(Exception):
    """Operator declined to continue; not an error."""
