"""
KVS Configuration Settings

Settings are read from the environment once, at import time. They only
affect diagnostics; store and command semantics never consult them.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """CLI configuration settings."""

    # Program name shown in usage and version output
    PROG_NAME: str = "kvs"

    # User-facing message for a missing key
    KEY_NOT_FOUND_MESSAGE: str = "Key not found"

    # Logging settings
    DEBUG: bool = os.environ.get("KVS_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("KVS_LOG_LEVEL", "WARNING")


# Global settings instance
settings = Settings()
