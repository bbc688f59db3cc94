"""In-process implementation of the WebinarStore.

Used as the test double and for running the API without a database.
"""

import logging
import threading
from collections.abc import Iterable

from webinars.domain import Webinar
from webinars.domain.errors import WebinarConcurrentUpdateError
from webinars.stores.interfaces import (
    WebinarAlreadyExistsError,
    WebinarMissingError,
    WebinarStore,
)

logger = logging.getLogger(__name__)


class InMemoryWebinarStore(WebinarStore):
    """Dictionary-backed webinar store holding snapshots, never live objects."""

    def __init__(self, initial: Iterable[Webinar] = ()) -> None:
        self._lock = threading.Lock()
        self._webinars: dict[str, Webinar] = {
            webinar.id: webinar.snapshot() for webinar in initial
        }

    def create(self, webinar: Webinar) -> None:
        with self._lock:
            if webinar.id in self._webinars:
                raise WebinarAlreadyExistsError(webinar.id)
            self._webinars[webinar.id] = webinar.snapshot()

    def find_by_id(self, webinar_id: str) -> Webinar | None:
        with self._lock:
            stored = self._webinars.get(webinar_id)
            return stored.snapshot() if stored is not None else None

    def update(self, webinar: Webinar) -> None:
        with self._lock:
            stored = self._webinars.get(webinar.id)
            if stored is None:
                raise WebinarMissingError(webinar.id)
            if stored.version != webinar.version:
                logger.warning(
                    "Rejected stale write for webinar %s (stored v%d, got v%d)",
                    webinar.id,
                    stored.version,
                    webinar.version,
                )
                raise WebinarConcurrentUpdateError(webinar.id)
            webinar.version += 1
            updated = webinar.snapshot()
            updated.organizer_id = stored.organizer_id
            self._webinars[webinar.id] = updated

    def clear(self) -> None:
        """Drop every stored webinar (reset tooling only)."""
        with self._lock:
            self._webinars.clear()
