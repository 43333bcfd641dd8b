"""Domain error codes for the campus events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_USER_ID = "INVALID_USER_ID"
    NOT_REGISTERED = "NOT_REGISTERED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidUserIdError(DomainError):
    """Raised when a user ID is blank."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_USER_ID,
            message="Invalid user ID",
        )


class NotRegisteredError(DomainError):
    """Returned when no registration exists for an (event, user) pair."""

    def __init__(self, event_id: object, user_id: object) -> None:
        super().__init__(
            code=ErrorCode.NOT_REGISTERED,
            message="User is not registered for this event",
        )
        self.event_id = event_id
        self.user_id = user_id
