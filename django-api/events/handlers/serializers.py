"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    user_id = serializers.CharField(source="owner_id.value")
    name = serializers.CharField()
    sport_type = serializers.CharField()
    date_time = serializers.DateTimeField()
    description = serializers.CharField(allow_null=True)
    venues = serializers.ListField(child=serializers.CharField())
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class IdentityUserSerializer(serializers.Serializer):
    id = serializers.CharField()
    email = serializers.EmailField()
