from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    """Shape of every error body returned by the API."""

    error = serializers.CharField()
