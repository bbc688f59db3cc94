"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call use cases for business logic
- Leave domain error mapping to handlers.errors.exception_handler
- Never contain business logic
"""

from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from webinars.container import get_container
from webinars.domain import User
from webinars.handlers.serializers import (
    ChangeSeatsSerializer,
    OrganizeWebinarSerializer,
    WebinarSerializer,
)
from webinars.services import ChangeSeatsCommand, OrganizeWebinarCommand


def acting_user(request: Request) -> User:
    """Return the user the request acts as.

    Authentication is out of scope, so this is the configured user.
    """
    return User(id=settings.WEBINARS_ACTING_USER_ID)


class WebinarListView(APIView):
    """Handler for POST /api/webinars"""

    def post(self, request: Request) -> Response:
        serializer = OrganizeWebinarSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = get_container().organize_webinars().execute(
            OrganizeWebinarCommand(
                user_id=acting_user(request).id,
                title=data["title"],
                seats=data["seats"],
                start_date=data["start_date"],
                end_date=data["end_date"],
            )
        )
        return Response(
            {"id": result.id, "message": "Webinar created"},
            status=status.HTTP_201_CREATED,
        )


class WebinarDetailView(APIView):
    """Handler for GET /api/webinars/{webinar_id}"""

    def get(self, request: Request, webinar_id: str) -> Response:
        webinar = get_container().get_webinar().execute(webinar_id)
        return Response(WebinarSerializer(webinar).data)


class WebinarSeatsView(APIView):
    """Handler for POST /api/webinars/{webinar_id}/seats"""

    def post(self, request: Request, webinar_id: str) -> Response:
        serializer = ChangeSeatsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        get_container().change_seats().execute(
            ChangeSeatsCommand(
                user=acting_user(request),
                webinar_id=webinar_id,
                seats=serializer.validated_data["seats"],
            )
        )
        return Response({"message": "Seats updated"})
