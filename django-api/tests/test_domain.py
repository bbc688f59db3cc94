"""Unit tests for domain objects and errors.

Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime

import pytest

from webinars.domain.errors import (
    DomainError,
    ErrorCode,
    WebinarDatesTooSoonError,
    WebinarNotEnoughSeatsError,
    WebinarNotFoundError,
    WebinarNotOrganizerError,
    WebinarReduceSeatsError,
    WebinarTooManySeatsError,
)
from webinars.generators import FixedDateGenerator, FixedIdGenerator, UuidIdGenerator


class TestWebinar:
    """Tests for the Webinar entity."""

    def test_update_merges_seats(self, make_webinar):
        """update() changes seats and leaves the rest alone."""
        webinar = make_webinar()
        webinar.update(seats=200)
        assert webinar.seats == 200
        assert webinar.title == "Webinar title"
        assert webinar.organizer_id == "alice"

    def test_update_merges_several_fields(self, make_webinar):
        """update() applies every mutable field it is given."""
        webinar = make_webinar()
        webinar.update(seats=300, title="Updated title")
        assert (webinar.seats, webinar.title) == (300, "Updated title")

    @pytest.mark.parametrize("field", ["id", "organizer_id", "version", "colour"])
    def test_update_rejects_immutable_or_unknown_fields(self, make_webinar, field):
        """update() refuses fields outside the mutable set and applies nothing."""
        webinar = make_webinar()
        with pytest.raises(TypeError, match=field):
            webinar.update(seats=500, **{field: "x"})
        assert webinar == make_webinar()

    def test_snapshot_is_independent(self, make_webinar):
        """Mutating a snapshot does not touch the original."""
        webinar = make_webinar()
        copy = webinar.snapshot()
        copy.update(seats=999)
        assert copy == make_webinar(seats=999)
        assert webinar.seats == 100


class TestDomainErrors:
    """Tests for the error taxonomy."""

    @pytest.mark.parametrize(
        ("error", "code", "message"),
        [
            (WebinarNotFoundError("w"), ErrorCode.WEBINAR_NOT_FOUND, "Webinar not found"),
            (
                WebinarNotOrganizerError("w", "bob"),
                ErrorCode.WEBINAR_NOT_ORGANIZER,
                "User is not allowed to update this webinar",
            ),
            (
                WebinarDatesTooSoonError(),
                ErrorCode.WEBINAR_DATES_TOO_SOON,
                "Webinar must be scheduled at least 3 days in advance",
            ),
            (
                WebinarTooManySeatsError(),
                ErrorCode.WEBINAR_TOO_MANY_SEATS,
                "Webinar must have at most 1000 seats",
            ),
            (
                WebinarNotEnoughSeatsError(),
                ErrorCode.WEBINAR_NOT_ENOUGH_SEATS,
                "Webinar must have at least 1 seat",
            ),
            (
                WebinarReduceSeatsError(100, 50),
                ErrorCode.WEBINAR_REDUCE_SEATS,
                "Webinar seats cannot be reduced",
            ),
        ],
    )
    def test_code_and_message(self, error, code, message):
        """Each error carries its code and user-safe message."""
        assert isinstance(error, DomainError)
        assert error.code is code
        assert error.message == message
        assert str(error) == f"{code.value}: {message}"

    def test_errors_keep_context(self):
        """Errors expose the identifiers they were raised for."""
        error = WebinarNotOrganizerError("webinar-id", "bob")
        assert (error.webinar_id, error.user_id) == ("webinar-id", "bob")


class TestGenerators:
    """Tests for the id and date generators."""

    def test_fixed_id_generator_sequence(self):
        """FixedIdGenerator yields id-1, id-2, ..."""
        generator = FixedIdGenerator()
        assert [generator.generate() for _ in range(3)] == ["id-1", "id-2", "id-3"]

    def test_uuid_id_generator_is_unique(self):
        """UuidIdGenerator never repeats."""
        generator = UuidIdGenerator()
        assert generator.generate() != generator.generate()

    def test_fixed_date_generator_returns_instant(self, now):
        """FixedDateGenerator always returns its instant."""
        generator = FixedDateGenerator(now)
        assert generator.now() == now
        assert generator.now() == now

    def test_fixed_date_generator_rejects_naive_datetime(self):
        """FixedDateGenerator requires a timezone-aware datetime."""
        with pytest.raises(ValueError):
            FixedDateGenerator(datetime(2024, 1, 1))
