"""OrganizeWebinars use case.

Validates a new webinar against the scheduling policy and persists it.
Every rule is checked before the id generator or the store is touched.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from webinars.domain import ADVANCE_NOTICE, MAX_SEATS, MIN_SEATS, Webinar
from webinars.domain.errors import (
    DomainError,
    WebinarDatesTooSoonError,
    WebinarNotEnoughSeatsError,
    WebinarTooManySeatsError,
)
from webinars.generators import DateGenerator, IdGenerator
from webinars.stores.interfaces import WebinarStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrganizeWebinarCommand:
    user_id: str
    title: str
    seats: int
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True)
class OrganizeWebinarResult:
    id: str


class OrganizeWebinars:
    """Create a webinar owned by the requesting user."""

    def __init__(
        self,
        store: WebinarStore,
        id_generator: IdGenerator,
        date_generator: DateGenerator,
    ) -> None:
        self._store = store
        self._id_generator = id_generator
        self._date_generator = date_generator

    def execute(self, command: OrganizeWebinarCommand) -> OrganizeWebinarResult:
        """Validate and persist a new webinar.

        Raises:
            WebinarDatesTooSoonError: If it starts less than 3 days from now.
            WebinarTooManySeatsError: If seats exceed the maximum.
            WebinarNotEnoughSeatsError: If seats are below the minimum.
        """
        try:
            self._validate(command)
        except DomainError as error:
            logger.info(
                "Rejected webinar for user %s: %s", command.user_id, error.code.value
            )
            raise

        webinar = Webinar(
            id=self._id_generator.generate(),
            organizer_id=command.user_id,
            title=command.title,
            start_date=command.start_date,
            end_date=command.end_date,
            seats=command.seats,
        )
        self._store.create(webinar)
        logger.info("Organized webinar %s for user %s", webinar.id, command.user_id)
        return OrganizeWebinarResult(id=webinar.id)

    def _validate(self, command: OrganizeWebinarCommand) -> None:
        if command.start_date < self._date_generator.now() + ADVANCE_NOTICE:
            raise WebinarDatesTooSoonError()
        if command.seats > MAX_SEATS:
            raise WebinarTooManySeatsError()
        if command.seats < MIN_SEATS:
            raise WebinarNotEnoughSeatsError()
