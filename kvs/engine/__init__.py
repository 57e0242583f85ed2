"""Storage engine module for KVS."""

from .errors import KeyNotFoundError, KvsError, StoreFailureError
from .store import KvsEngine, KvStore

__all__ = [
    "KvsEngine",
    "KvStore",
    "KvsError",
    "KeyNotFoundError",
    "StoreFailureError",
]
