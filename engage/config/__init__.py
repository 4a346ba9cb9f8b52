"""
Client Configuration Module

Provides configuration loading for the Engage client.
"""

from .runtime import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ClientConfig,
    load_credentials_from_env,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "ClientConfig",
    "load_credentials_from_env",
]
