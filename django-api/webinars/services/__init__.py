from webinars.services.change_seats import ChangeSeats, ChangeSeatsCommand
from webinars.services.get_webinar import GetWebinar
from webinars.services.organize_webinars import (
    OrganizeWebinarCommand,
    OrganizeWebinarResult,
    OrganizeWebinars,
)

__all__ = [
    "ChangeSeats",
    "ChangeSeatsCommand",
    "GetWebinar",
    "OrganizeWebinars",
    "OrganizeWebinarCommand",
    "OrganizeWebinarResult",
]
