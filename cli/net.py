"""
Network probe and fetch command wrappers (ping, curl)
"""
import shlex
from .base import CommandWrapper


class Ping(CommandWrapper):
    """Wrapper for ping with fluent API"""

    def __init__(self):
        self._count: int = 1
        self._wait: int = 1

    def count(self, value: int) -> "Ping":
        """Number of echo requests (returns self for chaining)."""
        self._count = value
        return self

    def wait(self, seconds: int) -> "Ping":
        """Per-reply timeout in seconds (returns self for chaining)."""
        self._wait = seconds
        return self

    def host(self, target: str) -> str:
        """Generate probe command"""
        return f"ping -c{self._count} -W{self._wait} {shlex.quote(target)}"


class Curl(CommandWrapper):
    """Wrapper for curl with fluent API"""

    def __init__(self):
        self._silent: bool = True
        self._follow: bool = True

    def silent(self, value: bool = True) -> "Curl":
        """Suppress progress output (returns self for chaining)."""
        self._silent = value
        return self

    def follow_redirects(self, value: bool = True) -> "Curl":
        """Follow redirects (returns self for chaining)."""
        self._follow = value
        return self

    def fetch(self, url: str) -> str:
        """Generate command writing the URL body to stdout"""
        flags = ""
        if self._silent:
            flags += "s"
        if self._follow:
            flags += "L"
        flag_str = f" -{flags}" if flags else ""
        return f"curl{flag_str} {shlex.quote(url)}"

    def pipe_to_shell(self, url: str, shell: str = "bash") -> str:
        """Generate command executing the fetched script with a shell"""
        return f"{self.fetch(url)} | {shell}"
