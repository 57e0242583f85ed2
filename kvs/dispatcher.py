"""
Command Dispatcher Module

Maps one parsed Command onto exactly one storage engine call and turns
the result into a Report: what to print, where, and the exit status.

Outcomes:
    set <key> <value>   -> no output, exit 0
    get <key>           -> value on stdout, or "Key not found" on stdout; exit 0
    rm <key>            -> no output, exit 0; "Key not found" on stderr, exit 1
    any engine error    -> message on stderr, exit 1
"""

import logging

from .config.settings import settings
from .engine.errors import KeyNotFoundError, KvsError
from .engine.store import KvsEngine
from .protocol.commands import Command, CommandType, Report

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Executes parsed commands against a storage engine.

    The engine is owned by the caller and passed in, so the same
    dispatcher works unchanged over any KvsEngine implementation.

    Attributes:
        engine: The storage engine commands are applied to
    """

    def __init__(self, engine: KvsEngine):
        self.engine = engine

    def dispatch(self, command: Command) -> Report:
        """
        Execute a command and report the result.

        A failed command leaves the engine unchanged and is never retried.

        Args:
            command: The Command object to execute

        Returns:
            Report describing output and exit status

        Raises:
            ValueError: If the command is missing arguments for its type
        """
        if not command.is_valid:
            raise ValueError(f"invalid command: {command!r}")

        logger.debug(f"Dispatching {command.type.name} {command.key!r}")

        try:
            return self._execute(command)
        except KeyNotFoundError as exc:
            logger.info(f"{command.type.name} {command.key!r}: {exc}")
            return Report.failure(str(exc))
        except KvsError as exc:
            logger.warning(f"{command.type.name} {command.key!r} failed: {exc}")
            return Report.failure(str(exc) or type(exc).__name__)

    def _execute(self, command: Command) -> Report:
        if command.type == CommandType.SET:
            self.engine.set(command.key, command.value)
            return Report.ok()

        if command.type == CommandType.GET:
            value = self.engine.get(command.key)
            if value is None:
                # Absent key is a normal outcome for get
                return Report.ok(settings.KEY_NOT_FOUND_MESSAGE)
            return Report.ok(value)

        if command.type == CommandType.REMOVE:
            self.engine.remove(command.key)
            return Report.ok()

        raise ValueError(f"unsupported command type: {command.type}")
