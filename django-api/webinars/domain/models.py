"""Domain models representing persisted state.

These are pure domain objects with no API input rules and no seat policy.
Django ORM models are in webinars/models.py (persistence layer).
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Self

MUTABLE_FIELDS = frozenset({"title", "start_date", "end_date", "seats"})


@dataclass(frozen=True)
class User:
    """The user acting on a webinar."""

    id: str
    email: str = ""


@dataclass
class Webinar:
    """Domain representation of a Webinar.

    ``id`` and ``organizer_id`` are fixed at construction. ``version`` is the
    revision counter maintained by the stores.
    """

    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int
    version: int = 0

    def update(self, **changes: Any) -> None:
        """Merge mutable fields into the current state in place.

        Raises:
            TypeError: If a field is unknown or immutable. Nothing is applied.
        """
        rejected = sorted(set(changes) - MUTABLE_FIELDS)
        if rejected:
            raise TypeError(f"Cannot update webinar fields: {', '.join(rejected)}")
        for name, value in changes.items():
            setattr(self, name, value)

    def snapshot(self) -> Self:
        """Return an independent copy of this webinar."""
        return replace(self)
