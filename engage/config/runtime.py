"""
Runtime Configuration

Base URL, timeout and user agent for the Engage client, with optional
overrides from environment variables.

Nothing is read from the environment (or from a .env file) until one of
the *_from_env entry points is called.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

from dotenv import find_dotenv, load_dotenv

from engage.version import USER_AGENT

logger = logging.getLogger(__name__)


# Base URL for the Engage API
DEFAULT_BASE_URL = "https://api.engage.so"

# Overall request timeout, in seconds
DEFAULT_TIMEOUT = 60.0


def _load_dotenv() -> None:
    """Load a .env file from the working directory, without overriding set variables."""
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path)


@dataclass
class ClientConfig:
    """Configuration for an Engage client."""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = USER_AGENT
    debug: bool = False

    def __post_init__(self):
        if self.debug:
            logging.getLogger("engage").setLevel(logging.DEBUG)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - ENGAGE_BASE_URL: API base URL
        - ENGAGE_TIMEOUT: Request timeout in seconds
        - ENGAGE_DEBUG: Enable debug logging (true/false)
        """
        overrides: dict[str, Any] = {}

        if os.getenv("ENGAGE_BASE_URL"):
            overrides["base_url"] = os.getenv("ENGAGE_BASE_URL")
        raw_timeout = os.getenv("ENGAGE_TIMEOUT")
        if raw_timeout:
            try:
                overrides["timeout"] = float(raw_timeout)
            except ValueError:
                logger.warning(
                    f"Ignoring ENGAGE_TIMEOUT={raw_timeout!r}: not a number, "
                    f"using {DEFAULT_TIMEOUT}s"
                )
        if os.getenv("ENGAGE_DEBUG"):
            overrides["debug"] = os.getenv("ENGAGE_DEBUG", "false").lower() == "true"

        return overrides

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Load configuration from environment variables and a .env file.

        Uses defaults for any values not specified.
        """
        _load_dotenv()
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClientConfig":
        """Load configuration from a dictionary (supports partial data)."""
        return cls(
            base_url=data.get("base_url", DEFAULT_BASE_URL),
            timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
            user_agent=data.get("user_agent", USER_AGENT),
            debug=bool(data.get("debug", False)),
        )


def load_credentials_from_env() -> tuple[Optional[str], Optional[str]]:
    """Return the (key, secret) pair from ENGAGE_API_KEY / ENGAGE_API_SECRET."""
    _load_dotenv()
    return os.getenv("ENGAGE_API_KEY"), os.getenv("ENGAGE_API_SECRET")
