"""
HTTP Transport

The transport abstraction the Engage client sends requests through, the
default requests-backed implementation, and the buffered response wrapper.
"""

from __future__ import annotations

import http.client
import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol, TypeVar, runtime_checkable

import requests
from pydantic import TypeAdapter

from engage.config.runtime import DEFAULT_TIMEOUT
from engage.errors import DecodeException

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Exceptions that mean the server hung up before the response was complete.
_PREMATURE_CLOSE_ERRORS = (
    http.client.RemoteDisconnected,
    http.client.IncompleteRead,
    EOFError,
)


@runtime_checkable
class Transport(Protocol):
    """Anything that can send a prepared request and return a response."""

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        ...


class SessionTransport:
    """
    Default transport backed by a requests session.

    The timeout is fixed when the transport is built and applies to every
    request sent through it.

    Usage:
        transport = SessionTransport(timeout=60.0)
        response = transport.send(prepared_request)
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            timeout: Overall request timeout in seconds
            session: Optional requests session for connection pooling
        """
        self.timeout = timeout
        self._session = session

    def _get_session(self) -> requests.Session:
        """Lazy-load requests session."""
        if self._session is None:
            logger.debug(f"Opening HTTP session (timeout={self.timeout}s)")
            self._session = requests.Session()
        return self._session

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        """Send a prepared request with the configured timeout."""
        return self._get_session().send(request, timeout=self.timeout)

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "SessionTransport":
        return self

    def __exit__(self, *args) -> None:
        self.close()


def is_premature_close(exc: BaseException) -> bool:
    """
    Check whether a transport error means the remote closed the connection early.

    requests wraps the low-level error a few layers deep (for example
    ConnectionError -> ProtocolError -> RemoteDisconnected), so the whole
    chain of causes and exception arguments is searched.
    """
    seen: set[int] = set()
    stack: list[BaseException] = [exc]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        if isinstance(current, _PREMATURE_CLOSE_ERRORS):
            return True
        if isinstance(current, requests.exceptions.ChunkedEncodingError):
            return True
        for arg in current.args:
            if isinstance(arg, BaseException):
                stack.append(arg)
        for linked in (current.__cause__, current.__context__):
            if linked is not None:
                stack.append(linked)
    return False


@dataclass
class HttpResponse:
    """
    Buffered response from the Engage API.

    Holds the status code and the raw body. The body is decoded only when
    parse_json() is called.
    """
    status_code: int
    data: bytes

    @property
    def ok(self) -> bool:
        """Check if request was successful (2xx status)."""
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        """Get response content as text."""
        return self.data.decode("utf-8", errors="replace")

    def parse_json(self, target: Optional[type[T]] = None) -> Any:
        """
        Decode the body as JSON.

        Args:
            target: Optional type to decode into (a Pydantic model,
                dict[str, Any], list[...], ...). When omitted the plain
                decoded value is returned.

        Returns:
            The decoded value

        Raises:
            DecodeException: If the body is not valid JSON for the target
        """
        adapter: TypeAdapter[Any] = TypeAdapter(Any if target is None else target)
        try:
            return adapter.validate_json(self.data)
        except ValueError as e:
            raise DecodeException(
                f"could not decode response body: {e}",
                status_code=self.status_code,
            ) from e
