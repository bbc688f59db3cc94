"""Generator interfaces for identity and time.

Use cases depend on these so their output is deterministic under test.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class IdGenerator(ABC):
    """Produces fresh unique identifiers."""

    @abstractmethod
    def generate(self) -> str:
        ...


class DateGenerator(ABC):
    """Tells the current instant."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware datetime."""
        ...
