"""
API Resources

Operations grouped by the Engage API resource they act on.
"""

from .user import UserResource

__all__ = [
    "UserResource",
]
