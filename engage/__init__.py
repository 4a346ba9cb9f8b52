"""
Engage Python client.

Minimal client for the Engage user-engagement API: identify users, add
attributes and track events.

Usage:
    from engage import Client

    client = Client("my-key", "my-secret")
    client.user.identify({"id": "u1", "email": "ada@example.com"})
"""

from .version import USER_AGENT, VERSION

from .client import Client
from .config import ClientConfig
from .errors import (
    DecodeException,
    EncodeException,
    EngageError,
    EngageException,
    ErrorCodes,
    InvalidOrMissingEmailException,
    InvalidUserDataException,
    MissingAttributeDataException,
    MissingCredentialsException,
    MissingIDException,
    MissingUserIDException,
    PrematureCloseException,
    TransportException,
    ValidationException,
)
from .http import HttpResponse, SessionTransport, Transport
from .resources import UserResource

__version__ = VERSION

__all__ = [
    "USER_AGENT",
    "VERSION",
    "Client",
    "ClientConfig",
    "DecodeException",
    "EncodeException",
    "EngageError",
    "EngageException",
    "ErrorCodes",
    "HttpResponse",
    "InvalidOrMissingEmailException",
    "InvalidUserDataException",
    "MissingAttributeDataException",
    "MissingCredentialsException",
    "MissingIDException",
    "MissingUserIDException",
    "PrematureCloseException",
    "SessionTransport",
    "Transport",
    "TransportException",
    "UserResource",
    "ValidationException",
]
