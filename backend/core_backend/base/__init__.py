"""
Core backend base components.

This package provides foundational classes and utilities that should be used
throughout the Django application for consistency and maintainability.
"""

from .results import success, failure
from .serializers import TimestampedSerializer
from .views import BaseAPIView

__all__ = [
    # Results
    'success',
    'failure',

    # Serializers
    'TimestampedSerializer',

    # Views
    'BaseAPIView',
]
