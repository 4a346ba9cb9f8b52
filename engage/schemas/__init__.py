"""
Schemas Module

Wire payloads for the Engage API and the helpers that shape them.
"""

from .user import (
    ALLOWED_USER_FIELDS,
    EMAIL_PATTERN,
    NON_META_FIELDS,
    AttributeUpdate,
    EventData,
    TrackedEvent,
    UserProfile,
    build_attribute_payload,
    build_event_payload,
    build_profile_payload,
    is_valid_email,
    partition_attributes,
)

__all__ = [
    "ALLOWED_USER_FIELDS",
    "EMAIL_PATTERN",
    "NON_META_FIELDS",
    "AttributeUpdate",
    "EventData",
    "TrackedEvent",
    "UserProfile",
    "build_attribute_payload",
    "build_event_payload",
    "build_profile_payload",
    "is_valid_email",
    "partition_attributes",
]
