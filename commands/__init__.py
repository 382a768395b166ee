"""Top-level commands."""
from .create import Create

__all__ = ["Create"]
