"""Base class for top-level commands."""
from dataclasses import dataclass
from typing import Optional
from .config import NewtLxcConfig


@dataclass
class Command:
    """Command holding the resolved configuration."""
    cfg: Optional[NewtLxcConfig] = None

    def run(self, args):
        """Execute the command."""
        raise NotImplementedError
