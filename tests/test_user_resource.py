"""
Tests for the user resource: identify, add_attribute and track, end to end
through a stub transport.
"""

import pytest

from engage import (
    Client,
    DecodeException,
    ErrorCodes,
    InvalidOrMissingEmailException,
    InvalidUserDataException,
    MissingAttributeDataException,
    MissingIDException,
    MissingUserIDException,
    ValidationException,
)
from fixtures import OK_BODY, TEST_KEY, TEST_SECRET, TEST_USER_ID, StubTransport


class TestIdentify:

    def test_identify_user(self, client, stub_transport):
        data = {"id": TEST_USER_ID, "email": "test@engage.so"}

        res = client.user.identify(data)

        assert res == OK_BODY
        request = stub_transport.last_request
        assert request.method == "PUT"
        assert request.url == f"https://api.engage.so/users/{TEST_USER_ID}"
        assert stub_transport.last_json() == data

    def test_identify_returns_decoded_body(self, client):
        assert client.user.identify({"id": "u1", "email": "a@b.com"}) == {"status": "ok"}

    def test_validation_order(self, client, stub_transport):
        with pytest.raises(InvalidUserDataException):
            client.user.identify(None)

        invalid = {"email": "invalidEmail"}
        with pytest.raises(MissingIDException):
            client.user.identify(invalid)

        invalid["id"] = "u141"
        with pytest.raises(InvalidOrMissingEmailException):
            client.user.identify(invalid)

        assert stub_transport.requests == []

    def test_missing_id_reported_before_missing_email(self, client):
        with pytest.raises(MissingIDException) as exc_info:
            client.user.identify({})
        assert exc_info.value.code == ErrorCodes.MISSING_ID

    @pytest.mark.parametrize("email", [None, 42, "", "not-an-email", "a@b..com"])
    def test_invalid_email_with_id_present(self, client, email):
        with pytest.raises(InvalidOrMissingEmailException) as exc_info:
            client.user.identify({"id": "u1", "email": email})
        assert exc_info.value.code == ErrorCodes.INVALID_OR_MISSING_EMAIL

    def test_missing_email_with_id_present(self, client):
        with pytest.raises(InvalidOrMissingEmailException):
            client.user.identify({"id": "u1", "first_name": "Ada"})

    def test_unknown_fields_not_sent(self, client, stub_transport):
        client.user.identify({
            "id": "u1",
            "email": "a@b.com",
            "first_name": "Ada",
            "device_token": "tok",
            "plan": "pro",
            "is_admin": True,
        })
        assert stub_transport.last_json() == {
            "id": "u1",
            "email": "a@b.com",
            "first_name": "Ada",
            "device_token": "tok",
        }

    def test_numeric_id_in_path(self, client, stub_transport):
        client.user.identify({"id": 99, "email": "a@b.com"})
        assert stub_transport.last_request.url.endswith("/users/99")
        assert stub_transport.last_json()["id"] == 99

    def test_validation_errors_share_base(self, client):
        with pytest.raises(ValidationException):
            client.user.identify(None)

    def test_malformed_response_raises_decode_exception(self):
        transport = StubTransport(status_code=500, body=b"Internal Server Error")
        client = Client(TEST_KEY, TEST_SECRET, transport=transport)
        with pytest.raises(DecodeException):
            client.user.identify({"id": "u1", "email": "a@b.com"})

    def test_error_response_is_returned(self):
        transport = StubTransport(status_code=401, body={"error": "Unauthorized"})
        client = Client(TEST_KEY, TEST_SECRET, transport=transport)
        assert client.user.identify({"id": "u1", "email": "a@b.com"}) == {"error": "Unauthorized"}


class TestAddAttribute:

    def test_add_attribute(self, client, stub_transport):
        res = client.user.add_attribute(TEST_USER_ID, {
            "first_name": "Ada",
            "number": "+15550100",
            "plan": "pro",
            "seats": 4,
        })

        assert res == OK_BODY
        request = stub_transport.last_request
        assert request.method == "PUT"
        assert request.url == f"https://api.engage.so/users/{TEST_USER_ID}"
        assert stub_transport.last_json() == {
            "first_name": "Ada",
            "number": "+15550100",
            "meta": {"plan": "pro", "seats": 4},
        }

    def test_only_meta_attributes(self, client, stub_transport):
        client.user.add_attribute(TEST_USER_ID, {"plan": "free"})
        assert stub_transport.last_json() == {"meta": {"plan": "free"}}

    def test_empty_attributes_send_empty_meta(self, client, stub_transport):
        client.user.add_attribute(TEST_USER_ID, {})
        assert stub_transport.last_json() == {"meta": {}}

    def test_missing_user_id(self, client, stub_transport):
        with pytest.raises(MissingUserIDException) as exc_info:
            client.user.add_attribute("", {"plan": "pro"})
        assert exc_info.value.code == ErrorCodes.MISSING_USER_ID
        assert stub_transport.requests == []

    def test_missing_data(self, client, stub_transport):
        with pytest.raises(MissingAttributeDataException) as exc_info:
            client.user.add_attribute(TEST_USER_ID, None)
        assert exc_info.value.code == ErrorCodes.MISSING_ATTRIBUTE_DATA
        assert stub_transport.requests == []


class TestTrack:

    def test_track_event_name(self, client, stub_transport):
        res = client.user.track(TEST_USER_ID, "welcome")

        assert res == OK_BODY
        request = stub_transport.last_request
        assert request.method == "PUT"
        assert request.url == f"https://api.engage.so/users/{TEST_USER_ID}/events"
        assert stub_transport.last_json() == {"event": "welcome", "value": True}

    def test_track_event_mapping(self, client, stub_transport):
        event = {"event": "purchase", "value": 19.99, "timestamp": "2024-05-01T10:00:00Z"}
        client.user.track(TEST_USER_ID, event)
        assert stub_transport.last_json() == event

    @pytest.mark.parametrize("data", [42, 1.5, ["welcome"], ("a", "b")])
    def test_unsupported_shape(self, client, stub_transport, data):
        with pytest.raises(MissingAttributeDataException):
            client.user.track(TEST_USER_ID, data)
        assert stub_transport.requests == []

    def test_missing_user_id(self, client):
        with pytest.raises(MissingUserIDException):
            client.user.track("", "welcome")

    def test_missing_data(self, client):
        with pytest.raises(MissingAttributeDataException):
            client.user.track(TEST_USER_ID, None)
