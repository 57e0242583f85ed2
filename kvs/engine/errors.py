"""
Store Error Hierarchy

Every failure a storage engine can report derives from KvsError, so
callers can catch one type at the dispatch boundary.
"""

from typing import Optional

from ..config.settings import settings


class KvsError(Exception):
    """Base class for all storage engine errors."""


class KeyNotFoundError(KvsError):
    """
    Raised when an operation requires a key that has no current value.

    Attributes:
        key: The key that was looked up
    """

    def __init__(self, key: Optional[str] = None):
        self.key = key
        super().__init__(settings.KEY_NOT_FOUND_MESSAGE)


class StoreFailureError(KvsError):
    """
    Raised when the engine cannot complete an operation (I/O, durability).

    The in-memory store never raises this; it is part of the contract
    for engines that keep state outside the process.
    """
