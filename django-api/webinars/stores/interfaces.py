"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from webinars.domain import Webinar


class StoreError(Exception):
    """Base class for persistence failures that are not business rules."""


class WebinarAlreadyExistsError(StoreError):
    """Raised by ``create`` when the webinar id is already taken."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(f"Webinar {webinar_id} already exists")
        self.webinar_id = webinar_id


class WebinarMissingError(StoreError):
    """Raised by ``update`` when there is no record to update."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(f"Webinar {webinar_id} does not exist")
        self.webinar_id = webinar_id


class WebinarStore(ABC):
    """Interface for webinar persistence operations."""

    @abstractmethod
    def create(self, webinar: Webinar) -> None:
        """Insert a new webinar.

        Raises:
            WebinarAlreadyExistsError: If the id is already stored.
        """
        ...

    @abstractmethod
    def find_by_id(self, webinar_id: str) -> Webinar | None:
        """Return a webinar by ID, or None if not found."""
        ...

    @abstractmethod
    def update(self, webinar: Webinar) -> None:
        """Persist the full state of an existing webinar.

        The stored version must match ``webinar.version``; on success both are
        incremented.

        Raises:
            WebinarMissingError: If the webinar is not stored.
            WebinarConcurrentUpdateError: If the stored version moved on.
        """
        ...
