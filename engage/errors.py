"""
Engage client errors.

Defines the error taxonomy for the client: stable machine-readable codes,
a Pydantic model for structured error communication, and the Python
exceptions raised by the client and its resources.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the client."""

    # Client construction
    MISSING_CREDENTIALS = "MISSING_CREDENTIALS"

    # Request pipeline
    ENCODE_ERROR = "ENCODE_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    PREMATURE_CLOSE = "PREMATURE_CLOSE"
    DECODE_ERROR = "DECODE_ERROR"

    # User resource validation
    INVALID_USER_DATA = "INVALID_USER_DATA"
    MISSING_ID = "MISSING_ID"
    INVALID_OR_MISSING_EMAIL = "INVALID_OR_MISSING_EMAIL"
    MISSING_USER_ID = "MISSING_USER_ID"
    MISSING_ATTRIBUTE_DATA = "MISSING_ATTRIBUTE_DATA"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class EngageError(BaseModel):
    """
    Structured error model.

    Lets callers log or serialize a failure without holding on to the
    exception object.
    """

    model_config = ConfigDict(extra="forbid")

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.MISSING_ID],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "EngageException":
        """Convert this error model to a raisable exception."""
        return EngageException(
            message=self.message,
            code=self.code,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class EngageException(Exception):
    """
    Base exception for all Engage client errors.

    Carries a stable code and structured details and can be converted
    to an EngageError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "ENGAGE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> EngageError:
        """Convert this exception to an EngageError model."""
        return EngageError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class MissingCredentialsException(EngageException):
    """Raised when a client is created without an API key or secret."""

    def __init__(self, message: str = "API key not set") -> None:
        super().__init__(message=message, code=ErrorCodes.MISSING_CREDENTIALS)


class EncodeException(EngageException):
    """Raised when a request body cannot be serialized to JSON."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.ENCODE_ERROR,
            details=details,
        )


class TransportException(EngageException):
    """Raised when the HTTP round-trip itself fails."""

    premature_close: bool = False

    def __init__(
        self,
        message: str,
        method: str | None = None,
        url: str | None = None,
        details: dict[str, Any] | None = None,
        code: str = ErrorCodes.TRANSPORT_ERROR,
    ) -> None:
        full_details = details or {}
        if method:
            full_details["method"] = method
        if url:
            full_details["url"] = url
        super().__init__(message=message, code=code, details=full_details)


class PrematureCloseException(TransportException):
    """Raised when the remote closed the connection before the response completed."""

    premature_close = True

    def __init__(
        self,
        message: str,
        method: str | None = None,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            method=method,
            url=url,
            details=details,
            code=ErrorCodes.PREMATURE_CLOSE,
        )


class DecodeException(EngageException):
    """Raised when a response body is not valid JSON for the requested shape."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if status_code is not None:
            full_details["status_code"] = status_code
        super().__init__(
            message=message,
            code=ErrorCodes.DECODE_ERROR,
            details=full_details,
        )


# =============================================================================
# Input Validation
# =============================================================================

class ValidationException(EngageException):
    """Base for input validation failures raised before any request is sent."""


class InvalidUserDataException(ValidationException):
    """Raised when identify() receives no user data at all."""

    def __init__(
        self,
        message: str = "You need to pass an object with at least an id and email",
    ) -> None:
        super().__init__(message=message, code=ErrorCodes.INVALID_USER_DATA)


class MissingIDException(ValidationException):
    """Raised when user data has no id."""

    def __init__(self, message: str = "ID is missing") -> None:
        super().__init__(message=message, code=ErrorCodes.MISSING_ID)


class InvalidOrMissingEmailException(ValidationException):
    """Raised when user data has no email, or the email is malformed."""

    def __init__(self, message: str = "Email is missing or invalid") -> None:
        super().__init__(message=message, code=ErrorCodes.INVALID_OR_MISSING_EMAIL)


class MissingUserIDException(ValidationException):
    """Raised when an attribute or event call has an empty user id."""

    def __init__(self, message: str = "User id missing") -> None:
        super().__init__(message=message, code=ErrorCodes.MISSING_USER_ID)


class MissingAttributeDataException(ValidationException):
    """Raised when attribute or event data is missing or of an unsupported shape."""

    def __init__(self, message: str = "Attributes data is missing") -> None:
        super().__init__(message=message, code=ErrorCodes.MISSING_ATTRIBUTE_DATA)
