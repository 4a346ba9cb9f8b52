"""
HTTP Transport Module

Injectable transport and buffered response wrapper.
"""

from .client import HttpResponse, SessionTransport, Transport, is_premature_close

__all__ = [
    "HttpResponse",
    "SessionTransport",
    "Transport",
    "is_premature_close",
]
