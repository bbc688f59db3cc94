"""Domain error codes for the webinars module."""

from dataclasses import dataclass
from enum import Enum

from webinars.domain.value_objects import ADVANCE_NOTICE, MAX_SEATS, MIN_SEATS


class ErrorCode(Enum):
    """Domain error codes."""

    WEBINAR_NOT_FOUND = "WEBINAR_NOT_FOUND"
    WEBINAR_NOT_ORGANIZER = "WEBINAR_NOT_ORGANIZER"
    WEBINAR_DATES_TOO_SOON = "WEBINAR_DATES_TOO_SOON"
    WEBINAR_TOO_MANY_SEATS = "WEBINAR_TOO_MANY_SEATS"
    WEBINAR_NOT_ENOUGH_SEATS = "WEBINAR_NOT_ENOUGH_SEATS"
    WEBINAR_REDUCE_SEATS = "WEBINAR_REDUCE_SEATS"
    WEBINAR_CONCURRENT_UPDATE = "WEBINAR_CONCURRENT_UPDATE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class WebinarNotFoundError(DomainError):
    """Raised when a webinar is not found."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_NOT_FOUND,
            message="Webinar not found",
        )
        self.webinar_id = webinar_id


class WebinarNotOrganizerError(DomainError):
    """Raised when a user tries to change a webinar they do not organize."""

    def __init__(self, webinar_id: str, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_NOT_ORGANIZER,
            message="User is not allowed to update this webinar",
        )
        self.webinar_id = webinar_id
        self.user_id = user_id


class WebinarDatesTooSoonError(DomainError):
    """Raised when a webinar starts before the advance-notice window."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_DATES_TOO_SOON,
            message=(
                f"Webinar must be scheduled at least "
                f"{ADVANCE_NOTICE.days} days in advance"
            ),
        )


class WebinarTooManySeatsError(DomainError):
    """Raised when a webinar would exceed the seat ceiling."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_TOO_MANY_SEATS,
            message=f"Webinar must have at most {MAX_SEATS} seats",
        )


class WebinarNotEnoughSeatsError(DomainError):
    """Raised when a webinar would have fewer seats than the floor."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_NOT_ENOUGH_SEATS,
            message=f"Webinar must have at least {MIN_SEATS} seat",
        )


class WebinarReduceSeatsError(DomainError):
    """Raised when an update asks for fewer seats than currently allocated."""

    def __init__(self, current: int, requested: int) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_REDUCE_SEATS,
            message="Webinar seats cannot be reduced",
        )
        self.current = current
        self.requested = requested


class WebinarConcurrentUpdateError(DomainError):
    """Raised by a store when the persisted revision moved under the caller."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_CONCURRENT_UPDATE,
            message="Webinar was modified concurrently",
        )
        self.webinar_id = webinar_id
