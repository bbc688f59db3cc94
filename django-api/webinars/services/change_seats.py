"""ChangeSeats use case.

Checks run in a fixed order: existence, ownership, monotonicity, bounds.
The webinar is only mutated and re-persisted once all of them pass.
"""

import logging
from dataclasses import dataclass

from webinars.domain import MAX_SEATS, MIN_SEATS, User, Webinar
from webinars.domain.errors import (
    DomainError,
    WebinarNotEnoughSeatsError,
    WebinarNotFoundError,
    WebinarNotOrganizerError,
    WebinarReduceSeatsError,
    WebinarTooManySeatsError,
)
from webinars.stores.interfaces import WebinarStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeSeatsCommand:
    user: User
    webinar_id: str
    seats: int


class ChangeSeats:
    """Raise the seat count of a webinar on behalf of its organizer."""

    def __init__(self, store: WebinarStore) -> None:
        self._store = store

    def execute(self, command: ChangeSeatsCommand) -> None:
        """Change the number of seats of a webinar.

        Raises:
            WebinarNotFoundError: If the webinar does not exist.
            WebinarNotOrganizerError: If the user does not organize it.
            WebinarReduceSeatsError: If fewer seats than today are requested.
            WebinarTooManySeatsError: If seats exceed the maximum.
            WebinarConcurrentUpdateError: If it changed since it was loaded.
        """
        webinar = self._store.find_by_id(command.webinar_id)
        if webinar is None:
            logger.info("Webinar %s not found", command.webinar_id)
            raise WebinarNotFoundError(command.webinar_id)

        try:
            self._check(webinar, command)
        except DomainError as error:
            logger.info(
                "Rejected seat change on webinar %s by user %s: %s",
                webinar.id,
                command.user.id,
                error.code.value,
            )
            raise

        previous = webinar.seats
        webinar.update(seats=command.seats)
        self._store.update(webinar)
        logger.info(
            "Changed seats of webinar %s from %d to %d",
            webinar.id,
            previous,
            command.seats,
        )

    def _check(self, webinar: Webinar, command: ChangeSeatsCommand) -> None:
        if webinar.organizer_id != command.user.id:
            raise WebinarNotOrganizerError(webinar.id, command.user.id)
        if command.seats < webinar.seats:
            raise WebinarReduceSeatsError(webinar.seats, command.seats)
        if command.seats > MAX_SEATS:
            raise WebinarTooManySeatsError()
        # Only reachable when the stored row already breaks the floor.
        if command.seats < MIN_SEATS:
            raise WebinarNotEnoughSeatsError()
