"""Production and fixed implementations of the generator interfaces."""

import itertools
from datetime import datetime
from uuid import uuid4

from django.utils import timezone

from webinars.generators.interfaces import DateGenerator, IdGenerator


class UuidIdGenerator(IdGenerator):
    """Random UUID4 identifiers."""

    def generate(self) -> str:
        return str(uuid4())


class FixedIdGenerator(IdGenerator):
    """Predictable identifiers: ``id-1``, ``id-2``, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self._prefix = prefix
        self._counter = itertools.count(1)

    def generate(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"


class SystemDateGenerator(DateGenerator):
    """Wall clock, in UTC."""

    def now(self) -> datetime:
        return timezone.now()


class FixedDateGenerator(DateGenerator):
    """Always returns the instant it was built with."""

    def __init__(self, instant: datetime) -> None:
        if timezone.is_naive(instant):
            raise ValueError("FixedDateGenerator requires a timezone-aware datetime")
        self._instant = instant

    def now(self) -> datetime:
        return self._instant
