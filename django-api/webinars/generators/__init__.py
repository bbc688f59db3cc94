from webinars.generators.adapters import (
    FixedDateGenerator,
    FixedIdGenerator,
    SystemDateGenerator,
    UuidIdGenerator,
)
from webinars.generators.interfaces import DateGenerator, IdGenerator

__all__ = [
    "IdGenerator",
    "DateGenerator",
    "UuidIdGenerator",
    "FixedIdGenerator",
    "SystemDateGenerator",
    "FixedDateGenerator",
]
