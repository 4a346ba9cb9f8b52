"""
Test fixtures package for Engage client tests.

Provides the stub transport and response factory used in place of the
network.

Usage:
    from fixtures import StubTransport, make_response

    def test_something():
        transport = StubTransport(body={"status": "ok"})
"""

from .transport import (
    OK_BODY,
    TEST_KEY,
    TEST_SECRET,
    TEST_USER_ID,
    StubTransport,
    echo_handler,
    make_response,
)

__all__ = [
    "OK_BODY",
    "TEST_KEY",
    "TEST_SECRET",
    "TEST_USER_ID",
    "StubTransport",
    "echo_handler",
    "make_response",
]
