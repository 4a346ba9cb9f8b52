"""
User payload schemas.

Wire shapes for the /users endpoints and the helpers that build them
from caller-supplied mappings. Keys outside the known field lists are
never rejected: identify() drops them, add_attribute() moves them under
``meta``.
"""

import re
from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


# Fields accepted by identify(); anything else is dropped.
ALLOWED_USER_FIELDS: frozenset[str] = frozenset({
    "id",
    "email",
    "device_token",
    "device_platform",
    "number",
    "created_at",
    "first_name",
    "last_name",
})

# Attribute keys sent at the top level; all others are nested under "meta".
NON_META_FIELDS: frozenset[str] = ALLOWED_USER_FIELDS - {"id"}

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

# track() accepts either an event name or a ready-made event mapping.
EventData = Union[str, Mapping[str, Any]]


class UserProfile(BaseModel):
    """
    Body of PUT /users/{id} when identifying a user.

    Unknown keys are ignored so that only profile fields reach the API.
    """

    model_config = ConfigDict(extra="ignore")

    id: Any = Field(..., description="Caller-assigned user identifier")
    email: str = Field(..., description="User email address")
    device_token: Any = None
    device_platform: Any = None
    number: Any = None
    created_at: Any = None
    first_name: Any = None
    last_name: Any = None


class AttributeUpdate(BaseModel):
    """Body of PUT /users/{id} when adding attributes."""

    model_config = ConfigDict(extra="forbid")

    email: Any = None
    device_token: Any = None
    device_platform: Any = None
    number: Any = None
    created_at: Any = None
    first_name: Any = None
    last_name: Any = None
    meta: dict[Any, Any] = Field(
        default_factory=dict,
        description="Custom attributes used for segmentation",
    )


class TrackedEvent(BaseModel):
    """Body of PUT /users/{id}/events for a named event."""

    model_config = ConfigDict(extra="forbid")

    event: str = Field(..., description="Event name")
    value: Any = True


def is_valid_email(value: Any) -> bool:
    """Check that value is a string with email syntax."""
    return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


def build_profile_payload(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Keep only profile fields from data.

    Keys that were not present in data stay absent from the result.
    """
    profile = UserProfile.model_validate(dict(data))
    return profile.model_dump(exclude_unset=True)


def partition_attributes(data: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """
    Split attributes into (top-level, meta).

    Every key of data ends up in exactly one of the two dicts.
    """
    top: dict[str, Any] = {}
    meta: dict[str, Any] = {}
    for key, value in data.items():
        if key in NON_META_FIELDS:
            top[key] = value
        else:
            meta[key] = value
    return top, meta


def build_attribute_payload(data: Mapping[str, Any]) -> dict[str, Any]:
    """Build the attribute update body; ``meta`` is always present."""
    top, meta = partition_attributes(data)
    update = AttributeUpdate(**top, meta=meta)
    return update.model_dump(exclude_unset=True)


def build_event_payload(data: EventData) -> dict[str, Any]:
    """
    Build the event body from an event name or an event mapping.

    Raises:
        TypeError: If data is neither a string nor a mapping
    """
    if isinstance(data, str):
        return TrackedEvent(event=data).model_dump()
    if isinstance(data, Mapping):
        return dict(data)
    raise TypeError(f"unsupported event data type: {type(data).__name__}")
