"""
Command and Report Definitions

This module defines the data structures passed between the command-line
parser, the dispatcher and the process exit path.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class CommandType(Enum):
    """Enumeration of supported command types."""
    SET = auto()
    GET = auto()
    REMOVE = auto()


@dataclass(frozen=True)
class Command:
    """
    Represents one parsed user request.

    Attributes:
        type: The type of command (SET, GET, REMOVE)
        key: The key for the operation
        value: The value for SET operations (None for other operations)
    """
    type: CommandType
    key: str
    value: Optional[str] = None

    @classmethod
    def set(cls, key: str, value: str) -> "Command":
        """Create a SET command."""
        return cls(type=CommandType.SET, key=key, value=value)

    @classmethod
    def get(cls, key: str) -> "Command":
        """Create a GET command."""
        return cls(type=CommandType.GET, key=key)

    @classmethod
    def remove(cls, key: str) -> "Command":
        """Create a REMOVE command."""
        return cls(type=CommandType.REMOVE, key=key)

    @property
    def is_valid(self) -> bool:
        """Check if the command carries the arguments its type needs."""
        if self.type == CommandType.SET:
            return self.value is not None
        return self.value is None


@dataclass(frozen=True)
class Report:
    """
    The user-visible outcome of one dispatched command.

    Attributes:
        exit_code: Process exit status (0 = success)
        stdout: Text for standard output, or None for no output
        stderr: Text for the error stream, or None for no output
    """
    exit_code: int = 0
    stdout: Optional[str] = None
    stderr: Optional[str] = None

    @classmethod
    def ok(cls, output: Optional[str] = None) -> "Report":
        """Create a successful report, optionally printing output."""
        return cls(exit_code=0, stdout=output)

    @classmethod
    def failure(cls, message: str, exit_code: int = 1) -> "Report":
        """Create a failed report with a message for the error stream."""
        return cls(exit_code=exit_code, stderr=message)

    @property
    def success(self) -> bool:
        """True when the command exited with status 0."""
        return self.exit_code == 0
