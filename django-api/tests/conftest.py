"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from webinars.container import WebinarContainer, override_container
from webinars.domain import User, Webinar
from webinars.generators import FixedDateGenerator, FixedIdGenerator
from webinars.stores import InMemoryWebinarStore

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def alice() -> User:
    return User(id="alice", email="alice@example.com")


@pytest.fixture
def bob() -> User:
    return User(id="bob", email="bob@example.com")


@pytest.fixture
def make_webinar():
    def _make(**overrides) -> Webinar:
        props = {
            "id": "webinar-id",
            "organizer_id": "alice",
            "title": "Webinar title",
            "start_date": NOW,
            "end_date": NOW + timedelta(hours=1),
            "seats": 100,
        }
        props.update(overrides)
        return Webinar(**props)

    return _make


@pytest.fixture
def memory_store() -> InMemoryWebinarStore:
    return InMemoryWebinarStore()


@pytest.fixture
def id_generator() -> FixedIdGenerator:
    return FixedIdGenerator()


@pytest.fixture
def date_generator() -> FixedDateGenerator:
    return FixedDateGenerator(NOW)


@pytest.fixture
def db_container(db, id_generator, date_generator):
    """Process container backed by the Django store and fixed generators."""
    from webinars.stores.django_store import DjangoWebinarStore

    container = WebinarContainer(
        store=DjangoWebinarStore(),
        id_generator=id_generator,
        date_generator=date_generator,
    )
    with override_container(container):
        yield container
