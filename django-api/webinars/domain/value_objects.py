"""Scheduling policy shared by the use cases and the error messages."""

from datetime import timedelta

MIN_SEATS = 1
MAX_SEATS = 1000

# Minimum gap between "now" and a webinar's start date.
ADVANCE_NOTICE = timedelta(days=3)
