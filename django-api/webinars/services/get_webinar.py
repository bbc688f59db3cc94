"""GetWebinar use case: read one webinar by id."""

from webinars.domain import Webinar
from webinars.domain.errors import WebinarNotFoundError
from webinars.stores.interfaces import WebinarStore


class GetWebinar:
    """Look up a single webinar."""

    def __init__(self, store: WebinarStore) -> None:
        self._store = store

    def execute(self, webinar_id: str) -> Webinar:
        """Return a webinar by ID.

        Raises:
            WebinarNotFoundError: If the webinar does not exist.
        """
        webinar = self._store.find_by_id(webinar_id)
        if webinar is None:
            raise WebinarNotFoundError(webinar_id)
        return webinar
