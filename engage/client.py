"""
Engage API Client

Holds credentials, builds authenticated JSON requests against the Engage
API and sends them through an injectable transport.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional
from urllib.parse import urljoin

import requests
from requests.auth import HTTPBasicAuth

from engage.config.runtime import ClientConfig, load_credentials_from_env
from engage.errors import (
    EncodeException,
    MissingCredentialsException,
    PrematureCloseException,
    TransportException,
)
from engage.http.client import HttpResponse, SessionTransport, Transport, is_premature_close
from engage.resources.user import UserResource

logger = logging.getLogger(__name__)


class Client:
    """
    Engage API client.

    Usage:
        client = Client("my-key", "my-secret")
        client.user.identify({"id": "u1", "email": "ada@example.com"})
        client.user.track("u1", "signed_up")
    """

    def __init__(
        self,
        key: str,
        secret: str,
        *,
        config: Optional[ClientConfig] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            key: Engage API key (basic auth username)
            secret: Engage API secret (basic auth password)
            config: Base URL, timeout and user agent; defaults if omitted
            transport: Transport to send requests through; a
                SessionTransport is created if omitted

        Raises:
            MissingCredentialsException: If key or secret is empty
        """
        if not key or not secret:
            raise MissingCredentialsException()

        self._key = key
        self._secret = secret
        self.config = config or ClientConfig()
        self._owns_transport = transport is None
        self._transport: Transport = transport or SessionTransport(timeout=self.config.timeout)

        self.user = UserResource(self)

    @classmethod
    def from_env(cls, *, transport: Optional[Transport] = None) -> "Client":
        """
        Create a client from ENGAGE_API_KEY / ENGAGE_API_SECRET.

        Other settings come from ClientConfig.from_env().
        """
        key, secret = load_credentials_from_env()
        return cls(key or "", secret or "", config=ClientConfig.from_env(), transport=transport)

    @property
    def key(self) -> str:
        return self._key

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def transport(self) -> Transport:
        return self._transport

    def set_transport(self, transport: Transport) -> None:
        """Replace the transport requests are sent through."""
        self._transport = transport
        self._owns_transport = False

    def build_request(
        self,
        method: str,
        path: str,
        body: Any = None,
    ) -> requests.PreparedRequest:
        """
        Build an authenticated request for an API path.

        Raises:
            EncodeException: If body cannot be serialized to JSON
        """
        headers = {"User-Agent": self.config.user_agent}
        data: Optional[bytes] = None
        if body is not None:
            try:
                data = json.dumps(body, allow_nan=False).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise EncodeException(
                    f"could not encode request body: {e}",
                    details={"path": path},
                ) from e
            headers["Content-Type"] = "application/json"

        url = urljoin(self.base_url, path)
        request = requests.Request(
            method=method,
            url=url,
            headers=headers,
            data=data,
            auth=HTTPBasicAuth(self._key, self._secret),
        )
        return request.prepare()

    def make_request(
        self,
        method: str,
        path: str,
        body: Any = None,
    ) -> HttpResponse:
        """
        Send a request to the Engage API and buffer the response.

        Any status code is returned as-is; interpreting it is left to the
        caller.

        Args:
            method: HTTP method
            path: API path, resolved against the base URL
            body: JSON-serializable request body, or None for no body

        Returns:
            HttpResponse with status code and raw body

        Raises:
            EncodeException: If body cannot be serialized
            PrematureCloseException: If the server closed the connection early
            TransportException: For any other transport failure
        """
        prepared = self.build_request(method, path, body)
        logger.debug(
            f"{method} {prepared.url} ({len(prepared.body or b'')} bytes)"
        )

        try:
            response = self._transport.send(prepared)
            # Reading .content buffers the whole body. Any failure here is a
            # transport failure, whatever the transport raised.
            content = response.content or b""
        except Exception as e:
            raise self._transport_error(method, prepared.url, e) from e

        logger.debug(f"{method} {prepared.url} -> {response.status_code}")
        return HttpResponse(status_code=response.status_code, data=content)

    def post_request(self, path: str, body: Any = None) -> HttpResponse:
        """Send a POST request."""
        return self.make_request("POST", path, body)

    def put_request(self, path: str, body: Any = None) -> HttpResponse:
        """Send a PUT request."""
        return self.make_request("PUT", path, body)

    def _transport_error(
        self,
        method: str,
        url: Optional[str],
        error: BaseException,
    ) -> TransportException:
        if is_premature_close(error):
            logger.warning(f"{method} {url}: remote closed connection early")
            return PrematureCloseException(
                f"remote server prematurely closed connection: {error}",
                method=method,
                url=url,
            )
        logger.warning(f"{method} {url} failed: {error}")
        return TransportException(
            f"while making http request: {error}",
            method=method,
            url=url,
        )

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self._transport, SessionTransport):
            self._transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args) -> None:
        self.close()
