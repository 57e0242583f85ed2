"""
Key-Value Store Module

This module defines the storage engine contract and the in-memory engine.

- KvsEngine: the set/get/remove contract every engine implements
- KvStore: a dict-backed engine holding all data in process memory
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from .errors import KeyNotFoundError

logger = logging.getLogger(__name__)


class KvsEngine(ABC):
    """
    Contract for a key-value storage engine.

    Keys and values are strings. An absent key is reported as None by
    get() and as KeyNotFoundError by remove(); engines must keep that
    asymmetry. Engines that touch durable state signal I/O problems
    with StoreFailureError.
    """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Set the value of a key, overwriting any previous value."""
        ...

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value of a key, or None if the key is not set."""
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove a key. Raises KeyNotFoundError if the key is not set."""
        ...


class KvStore(KvsEngine):
    """
    In-memory key-value store.

    This class provides O(1) average-case time complexity for:
    - set: Insert or update a key-value pair
    - get: Retrieve a value by key
    - remove: Delete a key-value pair
    - exists: Check if a key exists

    Internal Storage:
        A plain dict, key -> value. Insertion order carries no meaning.

    The store is an ordinary owned object: create one and hand it to
    whatever needs it. Contents are lost when the instance is discarded.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._store: Dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to store
            value: The value to associate with the key

        Time Complexity: O(1) average
        """
        self._store[key] = value
        logger.debug(f"Set key {key!r}")

    def get(self, key: str) -> Optional[str]:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up

        Returns:
            The value if the key is set, None otherwise. A key set to the
            empty string returns the empty string.

        Time Complexity: O(1) average
        """
        return self._store.get(key)

    def remove(self, key: str) -> None:
        """
        Delete a key-value pair.

        Args:
            key: The key to delete

        Raises:
            KeyNotFoundError: If the key is not set

        Time Complexity: O(1) average
        """
        try:
            del self._store[key]
        except KeyError:
            raise KeyNotFoundError(key) from None
        logger.debug(f"Removed key {key!r}")

    def exists(self, key: str) -> bool:
        """Check if a key is set."""
        return key in self._store

    def size(self) -> int:
        """Get the current number of keys in the store."""
        return len(self._store)

    def clear(self) -> None:
        """Remove all keys from the store."""
        self._store.clear()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return key in self._store
