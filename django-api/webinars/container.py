"""Process-wide wiring of stores, generators and use cases.

The concrete store is chosen from ``settings.WEBINARS_STORE`` the first time
the container is requested. Use cases never import a concrete store.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from webinars.generators import (
    DateGenerator,
    IdGenerator,
    SystemDateGenerator,
    UuidIdGenerator,
)
from webinars.services import ChangeSeats, GetWebinar, OrganizeWebinars
from webinars.stores import InMemoryWebinarStore, WebinarStore


@dataclass
class WebinarContainer:
    store: WebinarStore
    id_generator: IdGenerator
    date_generator: DateGenerator

    def organize_webinars(self) -> OrganizeWebinars:
        return OrganizeWebinars(self.store, self.id_generator, self.date_generator)

    def change_seats(self) -> ChangeSeats:
        return ChangeSeats(self.store)

    def get_webinar(self) -> GetWebinar:
        return GetWebinar(self.store)


def build_store(kind: str) -> WebinarStore:
    if kind == "django":
        from webinars.stores.django_store import DjangoWebinarStore

        return DjangoWebinarStore()
    if kind == "memory":
        return InMemoryWebinarStore()
    raise ImproperlyConfigured(
        f"WEBINARS_STORE must be 'django' or 'memory', got {kind!r}"
    )


def build_container() -> WebinarContainer:
    return WebinarContainer(
        store=build_store(getattr(settings, "WEBINARS_STORE", "django")),
        id_generator=UuidIdGenerator(),
        date_generator=SystemDateGenerator(),
    )


_container: WebinarContainer | None = None


def get_container() -> WebinarContainer:
    global _container
    if _container is None:
        _container = build_container()
    return _container


@contextmanager
def override_container(container: WebinarContainer) -> Iterator[WebinarContainer]:
    """Temporarily replace the process container (tests only)."""
    global _container
    previous = _container
    _container = container
    try:
        yield container
    finally:
        _container = previous
