"""Django ORM implementation of the WebinarStore."""

import logging

from django.db import IntegrityError, transaction
from django.db.models import F

from webinars import models
from webinars.domain import Webinar
from webinars.domain.errors import WebinarConcurrentUpdateError
from webinars.stores.interfaces import (
    WebinarAlreadyExistsError,
    WebinarMissingError,
    WebinarStore,
)

logger = logging.getLogger(__name__)


def _to_domain(row: models.Webinar) -> Webinar:
    return Webinar(
        id=row.id,
        organizer_id=row.organizer_id,
        title=row.title,
        start_date=row.start_date,
        end_date=row.end_date,
        seats=row.seats,
        version=row.version,
    )


class DjangoWebinarStore(WebinarStore):
    """Database-backed webinar store using Django ORM."""

    def create(self, webinar: Webinar) -> None:
        try:
            with transaction.atomic():
                models.Webinar.objects.create(
                    id=webinar.id,
                    organizer_id=webinar.organizer_id,
                    title=webinar.title,
                    start_date=webinar.start_date,
                    end_date=webinar.end_date,
                    seats=webinar.seats,
                    version=webinar.version,
                )
        except IntegrityError as exc:
            raise WebinarAlreadyExistsError(webinar.id) from exc

    def find_by_id(self, webinar_id: str) -> Webinar | None:
        row = models.Webinar.objects.filter(id=webinar_id).first()
        return _to_domain(row) if row is not None else None

    def update(self, webinar: Webinar) -> None:
        with transaction.atomic():
            updated = models.Webinar.objects.filter(
                id=webinar.id, version=webinar.version
            ).update(
                title=webinar.title,
                start_date=webinar.start_date,
                end_date=webinar.end_date,
                seats=webinar.seats,
                version=F("version") + 1,
            )
            if updated == 0:
                if not models.Webinar.objects.filter(id=webinar.id).exists():
                    raise WebinarMissingError(webinar.id)
                logger.warning(
                    "Rejected stale write for webinar %s at v%d",
                    webinar.id,
                    webinar.version,
                )
                raise WebinarConcurrentUpdateError(webinar.id)
        webinar.version += 1
