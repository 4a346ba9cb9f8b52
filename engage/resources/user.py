"""
User Resource

Identify users, add segmentation attributes and track events. Each
operation validates its input, shapes the payload, sends one PUT and
returns the decoded response body.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from engage.errors import (
    InvalidOrMissingEmailException,
    InvalidUserDataException,
    MissingAttributeDataException,
    MissingIDException,
    MissingUserIDException,
)
from engage.schemas.user import (
    EventData,
    build_attribute_payload,
    build_event_payload,
    build_profile_payload,
    is_valid_email,
)

if TYPE_CHECKING:
    from engage.client import Client

logger = logging.getLogger(__name__)


class UserResource:
    """Operations on /users."""

    def __init__(self, client: "Client") -> None:
        self.client = client

    def identify(self, data: Optional[Mapping[str, Any]]) -> dict[str, Any]:
        """
        Create or update a user profile.

        data must carry an ``id`` and a valid ``email``. Keys other than
        the known profile fields are dropped before sending.

        Raises:
            InvalidUserDataException: If data is None
            MissingIDException: If data has no ``id``
            InvalidOrMissingEmailException: If ``email`` is missing or malformed
        """
        if data is None:
            raise InvalidUserDataException()
        if "id" not in data:
            raise MissingIDException()
        if not is_valid_email(data.get("email")):
            raise InvalidOrMissingEmailException()

        params = build_profile_payload(data)
        dropped = set(data) - set(params)
        if dropped:
            logger.debug(f"identify: ignoring unknown fields {sorted(map(str, dropped))}")

        response = self.client.put_request(f"/users/{data['id']}", params)
        return response.parse_json(dict[str, Any])

    def add_attribute(
        self,
        user_id: str,
        data: Optional[Mapping[str, Any]],
    ) -> dict[str, Any]:
        """
        Add attributes to a user for segmentation.

        Profile fields are sent at the top level; any other key is sent
        inside ``meta``.

        Raises:
            MissingUserIDException: If user_id is empty
            MissingAttributeDataException: If data is None
        """
        if not user_id:
            raise MissingUserIDException()
        if data is None:
            raise MissingAttributeDataException()

        params = build_attribute_payload(data)
        response = self.client.put_request(f"/users/{user_id}", params)
        return response.parse_json(dict[str, Any])

    def track(self, user_id: str, data: Optional[EventData]) -> dict[str, Any]:
        """
        Track an event or user action.

        data is either an event name, sent as ``{"event": name, "value": True}``,
        or an event mapping sent unchanged.

        Raises:
            MissingUserIDException: If user_id is empty
            MissingAttributeDataException: If data is None or neither a
                string nor a mapping
        """
        if not user_id:
            raise MissingUserIDException()
        if data is None:
            raise MissingAttributeDataException()

        try:
            payload = build_event_payload(data)
        except TypeError as e:
            raise MissingAttributeDataException() from e

        response = self.client.put_request(f"/users/{user_id}/events", payload)
        return response.parse_json(dict[str, Any])
