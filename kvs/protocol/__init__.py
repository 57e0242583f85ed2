"""Command protocol module for KVS."""

from .commands import Command, CommandType, Report
from .parser import CommandParser

__all__ = [
    "Command",
    "CommandType",
    "Report",
    "CommandParser",
]
