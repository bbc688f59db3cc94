from webinars.handlers.views import (
    WebinarDetailView,
    WebinarListView,
    WebinarSeatsView,
)

__all__ = ["WebinarListView", "WebinarDetailView", "WebinarSeatsView"]
