"""Serializers for transforming domain models to API responses."""

from datetime import datetime, timezone

from rest_framework import serializers


class TimestampField(serializers.Field):
    """UTC timestamp rendered with millisecond precision, e.g. 2024-01-31T12:00:00.000Z."""

    def to_representation(self, value: datetime) -> str:
        stamp = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
        return stamp.replace("+00:00", "Z")


class RoomSerializer(serializers.Serializer):
    """Serializer for Room domain model."""

    id = serializers.IntegerField(source="id.value")
    hotelId = serializers.IntegerField(source="hotel_id.value")
    name = serializers.CharField()
    capacity = serializers.IntegerField(source="capacity.value")
    createdAt = TimestampField(source="created_at")
    updatedAt = TimestampField(source="updated_at")


class HotelSerializer(serializers.Serializer):
    """Serializer for Hotel domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    image = serializers.CharField()
    createdAt = TimestampField(source="created_at")
    updatedAt = TimestampField(source="updated_at")


class HotelWithRoomsSerializer(HotelSerializer):
    """Serializer for a Hotel with its rooms embedded."""

    Rooms = RoomSerializer(source="rooms", many=True)
