"""Serializers for request bodies and Webinar responses.

Field names follow the public camelCase API; ``source`` maps them onto the
snake_case domain attributes.
"""

from rest_framework import serializers


class OrganizeWebinarSerializer(serializers.Serializer):
    """Body of POST /webinars."""

    title = serializers.CharField(max_length=255)
    seats = serializers.IntegerField()
    startDate = serializers.DateTimeField(source="start_date")
    endDate = serializers.DateTimeField(source="end_date")


class ChangeSeatsSerializer(serializers.Serializer):
    """Body of POST /webinars/{id}/seats."""

    seats = serializers.IntegerField()


class WebinarSerializer(serializers.Serializer):
    """Serializer for the Webinar domain model."""

    id = serializers.CharField()
    organizerId = serializers.CharField(source="organizer_id")
    title = serializers.CharField()
    startDate = serializers.DateTimeField(source="start_date")
    endDate = serializers.DateTimeField(source="end_date")
    seats = serializers.IntegerField()
