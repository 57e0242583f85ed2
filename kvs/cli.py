#!/usr/bin/env python3
"""
KVS Command-Line Entry Point

Usage:
    kvs set <key> <value>     # Store a value
    kvs get <key>             # Print a value (or "Key not found")
    kvs rm <key>              # Remove a key
    kvs -V                    # Print the version
    kvs --debug get <key>     # Enable debug logging on stderr

Environment Variables:
    KVS_DEBUG       - Enable debug logging (true/false)
    KVS_LOG_LEVEL   - Logging level when not in debug mode (default WARNING)
"""

import logging
import sys
from typing import List, Optional

from .config.settings import settings
from .dispatcher import Dispatcher
from .engine.store import KvsEngine, KvStore
from .protocol.parser import CommandParser


def resolve_log_level(name: str) -> int:
    """Map a level name to a logging level, WARNING for unknown names."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging based on debug flag. Logs go to stderr.

    Replaces any handlers left by an earlier call, so each main() run
    logs at its own level to the current stderr.
    """
    level = logging.DEBUG if debug else resolve_log_level(settings.LOG_LEVEL)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
        force=True,
    )


def main(argv: Optional[List[str]] = None, engine: Optional[KvsEngine] = None) -> int:
    """
    Run one command and return the process exit code.

    Args:
        argv: Arguments without the program name (default sys.argv[1:])
        engine: Storage engine to use (a fresh KvStore if not provided)
    """
    parser = CommandParser()
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug)
    logger = logging.getLogger(__name__)

    command = parser.to_command(args)
    dispatcher = Dispatcher(engine if engine is not None else KvStore())

    report = dispatcher.dispatch(command)

    if report.stdout is not None:
        print(report.stdout)
    if report.stderr is not None:
        print(report.stderr, file=sys.stderr)

    logger.debug(f"Exiting with status {report.exit_code}")
    return report.exit_code


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
