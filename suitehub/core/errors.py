"""Domain error codes for the suite hub."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when user input is rejected."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message)


class RSVPValidationError(ValidationError):
    """Raised when an RSVP name is empty or too long."""


class UnauthorizedError(DomainError):
    """Raised when an admin-only operation runs without a valid session."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.UNAUTHORIZED, message="Unauthorized")


class InvalidCredentialsError(DomainError):
    """Raised when the admin password does not match."""

    def __init__(self, message: str = "Invalid password") -> None:
        super().__init__(code=ErrorCode.INVALID_CREDENTIALS, message=message)


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class StoreUnavailableError(DomainError):
    """Raised when the key-value store is unconfigured or unreachable."""

    def __init__(self, detail: str = "Key-value store unavailable") -> None:
        super().__init__(code=ErrorCode.STORE_UNAVAILABLE, message=detail)
