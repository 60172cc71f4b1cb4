from rest_framework import serializers


class TimestampedSerializer(serializers.ModelSerializer):
    """
    Serializer for models extending CoreModel. Timestamps are always read-only.
    """

    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)
