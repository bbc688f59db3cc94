from webinars.domain.models import User, Webinar
from webinars.domain.value_objects import ADVANCE_NOTICE, MAX_SEATS, MIN_SEATS

__all__ = [
    "Webinar",
    "User",
    "MIN_SEATS",
    "MAX_SEATS",
    "ADVANCE_NOTICE",
]
