"""
Command-Line Parser Module

This module turns an argument vector into a Command object.

Usage:
    kvs set <key> <value>    -> store a value
    kvs get <key>            -> print the value or "Key not found"
    kvs rm <key>             -> remove a key
    kvs -V                   -> print the version
"""

import argparse
import sys
from typing import List, Optional

from .. import __version__
from ..config.settings import settings
from .commands import Command, CommandType

# Subcommand name -> command type
SUBCOMMANDS = {
    "set": CommandType.SET,
    "get": CommandType.GET,
    "rm": CommandType.REMOVE,
}


class CommandParser:
    """
    Parser for the kvs command line.

    Argument syntax is handled by argparse. Usage errors (unknown
    subcommand, wrong number of arguments) exit with status 2; a missing
    subcommand prints usage and exits with status 1.
    """

    def __init__(self, prog: str = None):
        """
        Initialize the parser.

        Args:
            prog: Program name for usage output (default from settings.PROG_NAME)
        """
        self.prog = prog if prog is not None else settings.PROG_NAME
        self._parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=self.prog,
            description="A simple in-memory key-value store",
        )

        parser.add_argument(
            "-V", "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )

        parser.add_argument(
            "-d", "--debug",
            action="store_true",
            default=settings.DEBUG,
            help="Enable debug logging",
        )

        subparsers = parser.add_subparsers(dest="command", metavar="<command>")

        set_parser = subparsers.add_parser(
            "set", help="Set the value of a string key to a string",
        )
        set_parser.add_argument("key", help="The key to set")
        set_parser.add_argument("value", help="The value to set")

        get_parser = subparsers.add_parser(
            "get", help="Get the string value of a given string key",
        )
        get_parser.add_argument("key", help="The key to get")

        rm_parser = subparsers.add_parser("rm", help="Remove a given key")
        rm_parser.add_argument("key", help="The key to remove")

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """
        Parse an argument vector into a namespace.

        Args:
            argv: Arguments without the program name (default sys.argv[1:])

        Returns:
            Namespace with ``command``, ``key``, ``value`` and ``debug``.

        Raises:
            SystemExit: On -V/--version (0), a usage error (2) or a
                missing subcommand (1)
        """
        args = self._parser.parse_args(argv)
        if args.command is None:
            self._parser.print_usage(sys.stderr)
            self._parser.exit(1)
        return args

    def to_command(self, args: argparse.Namespace) -> Command:
        """Build a Command from a namespace returned by parse_args()."""
        command_type = SUBCOMMANDS[args.command]

        if command_type == CommandType.SET:
            return Command.set(args.key, args.value)
        if command_type == CommandType.GET:
            return Command.get(args.key)
        return Command.remove(args.key)

    def parse(self, argv: Optional[List[str]] = None) -> Command:
        """
        Parse an argument vector directly into a Command.

        Examples:
            >>> parser = CommandParser()
            >>> cmd = parser.parse(["set", "mykey", "myvalue"])
            >>> cmd.type == CommandType.SET
            True
            >>> cmd.value
            'myvalue'
        """
        return self.to_command(self.parse_args(argv))
