"""
Pytest configuration and shared fixtures for Engage client tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides a client wired to a stub transport
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from engage import Client
from fixtures import TEST_KEY, TEST_SECRET, StubTransport


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def stub_transport():
    """Provide a transport answering 200 {"status": "ok"}."""
    return StubTransport()


@pytest.fixture
def client(stub_transport):
    """Provide a client that sends through the stub transport."""
    return Client(TEST_KEY, TEST_SECRET, transport=stub_transport)
