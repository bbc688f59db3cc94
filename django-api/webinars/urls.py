from django.urls import path

from webinars.handlers import WebinarDetailView, WebinarListView, WebinarSeatsView

urlpatterns = [
    path("webinars", WebinarListView.as_view(), name="webinar-list"),
    path(
        "webinars/<str:webinar_id>",
        WebinarDetailView.as_view(),
        name="webinar-detail",
    ),
    path(
        "webinars/<str:webinar_id>/seats",
        WebinarSeatsView.as_view(),
        name="webinar-seats",
    ),
]
