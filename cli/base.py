"""
Base command wrapper with error parsing and command generation
"""
import re
import logging
from enum import Enum
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Error types that can be detected in command output"""
    NONE = "none"
    TIMEOUT = "timeout"
    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_ARGUMENT = "invalid_argument"
    RESOURCE_EXHAUSTED = "resource_exhausted"
    PACKAGE_ERROR = "package_error"
    NETWORK_ERROR = "network_error"
    COMMAND_FAILED = "command_failed"


@dataclass
class CommandResult:
    """Structured result from command execution"""
    success: bool
    output: Optional[str]
    error_type: ErrorType
    error_message: Optional[str]
    exit_code: Optional[int]

    def __bool__(self):
        return self.success

    @property
    def failed(self) -> bool:
        return not self.success


class CommandWrapper:
    """Base wrapper for CLI commands - generates command strings and parses results"""

    # Error patterns: (pattern, error_type, description)
    ERROR_PATTERNS = [
        (r'timeout|timed out', ErrorType.TIMEOUT, 'Command timed out'),
        (r'permission denied|access denied|operation not permitted|eacces',
         ErrorType.PERMISSION_DENIED, 'Permission denied'),
        (r'unable to locate package|package.*not found|failed to fetch',
         ErrorType.PACKAGE_ERROR, 'Package error'),
        (r'not found|no such file|does not exist|command not found',
         ErrorType.NOT_FOUND, 'Resource not found'),
        (r'already exists|already running|already in use',
         ErrorType.ALREADY_EXISTS, 'Resource already exists'),
        (r'invalid (?:argument|option|parameter|format)|unknown option|400 parameter verification failed',
         ErrorType.INVALID_ARGUMENT, 'Invalid argument'),
        (r'no space left|disk full|out of memory|not enough space',
         ErrorType.RESOURCE_EXHAUSTED, 'Resource exhausted'),
        (r'network.*unreachable|no route to host|could not resolve|temporary failure in name resolution',
         ErrorType.NETWORK_ERROR, 'Network error'),
    ]

    @staticmethod
    def parse_result(output: Optional[str], exit_code: Optional[int] = None) -> CommandResult:
        """
        Parse command output and return structured result

        The exit code decides success; the output only classifies the failure.

        Args:
            output: Command output (stdout/stderr combined)
            exit_code: Exit code, None when the command timed out

        Returns:
            CommandResult object
        """
        if exit_code is None:
            return CommandResult(
                success=False,
                output=output,
                error_type=ErrorType.TIMEOUT,
                error_message="Command produced no exit status (possible timeout)",
                exit_code=None,
            )
        if exit_code == 0:
            return CommandResult(
                success=True,
                output=output,
                error_type=ErrorType.NONE,
                error_message=None,
                exit_code=0,
            )
        error_type, error_msg = CommandWrapper._parse_error(output, exit_code)
        return CommandResult(
            success=False,
            output=output,
            error_type=error_type,
            error_message=error_msg,
            exit_code=exit_code,
        )

    @staticmethod
    def _parse_error(output: Optional[str], exit_code: int) -> tuple[ErrorType, str]:
        """Identify error type and message of a failed command"""
        if output:
            for pattern, error_type, description in CommandWrapper.ERROR_PATTERNS:
                if re.search(pattern, output, re.IGNORECASE):
                    return error_type, CommandWrapper._extract_error_message(output, pattern) or description
            last_line = CommandWrapper._last_line(output)
            if last_line:
                return ErrorType.COMMAND_FAILED, last_line
        return ErrorType.COMMAND_FAILED, f"Command failed with exit code {exit_code}"

    @staticmethod
    def _extract_error_message(output: str, pattern: str) -> Optional[str]:
        """Extract relevant error message from output"""
        for line in output.split('\n'):
            if re.search(pattern, line, re.IGNORECASE):
                msg = line.strip()
                if len(msg) > 200:
                    msg = msg[:197] + "..."
                return msg
        return None

    @staticmethod
    def _last_line(output: str) -> Optional[str]:
        lines = [line.strip() for line in output.splitlines() if line.strip()]
        if not lines:
            return None
        msg = lines[-1]
        if len(msg) > 200:
            msg = msg[:197] + "..."
        return msg

    @staticmethod
    def data_rows(output: Optional[str], header: bool = True) -> List[str]:
        """Return non-blank lines of tabular output, without the header row"""
        if not output:
            return []
        lines = [line for line in output.splitlines() if line.strip()]
        if header and lines:
            lines = lines[1:]
        return lines
