"""Mapping of failures to HTTP responses.

Installed as ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``. Domain errors are
switched on their ``ErrorCode``; anything unexpected becomes a generic 500
and internal details never reach the client.
"""

import logging
from typing import Any

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.views import set_rollback

from webinars.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred"

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.WEBINAR_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.WEBINAR_NOT_ORGANIZER: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.WEBINAR_DATES_TOO_SOON: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEBINAR_TOO_MANY_SEATS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEBINAR_NOT_ENOUGH_SEATS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEBINAR_REDUCE_SEATS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEBINAR_CONCURRENT_UPDATE: status.HTTP_409_CONFLICT,
}


def status_for(code: ErrorCode) -> int:
    """Return the HTTP status for a domain error code."""
    return STATUS_BY_CODE[code]


def exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    if isinstance(exc, DomainError):
        set_rollback()
        return Response({"error": exc.message}, status=status_for(exc.code))

    # APIException, Http404 and PermissionDenied keep DRF's status codes.
    response = drf_exception_handler(exc, context)
    if response is not None:
        response.data = {"error": _detail_message(response.data)}
        return response

    view = context.get("view")
    logger.exception(
        "Unhandled error in %s", type(view).__name__ if view else "unknown view"
    )
    set_rollback()
    return Response(
        {"error": GENERIC_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _detail_message(detail: Any) -> str:
    if isinstance(detail, dict):
        if not detail:
            return GENERIC_ERROR_MESSAGE
        if "detail" in detail:
            return str(detail["detail"])
        field, messages = next(iter(detail.items()))
        return f"{field}: {_detail_message(messages)}"
    if isinstance(detail, list):
        return _detail_message(detail[0]) if detail else GENERIC_ERROR_MESSAGE
    return str(detail)
