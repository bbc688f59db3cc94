from webinars.stores.interfaces import (
    StoreError,
    WebinarAlreadyExistsError,
    WebinarMissingError,
    WebinarStore,
)
from webinars.stores.memory_store import InMemoryWebinarStore

__all__ = [
    "WebinarStore",
    "StoreError",
    "WebinarAlreadyExistsError",
    "WebinarMissingError",
    "InMemoryWebinarStore",
]
