"""
Orders services package.

- OrderService: order lifecycle (create, list, load, status changes, driver assignment)
- OrderNotificationService: real-time order events over the channel layer
"""

from .order_service import OrderService
from .notification_service import OrderNotificationService, order_notification_service

__all__ = [
    "OrderService",
    "OrderNotificationService",
    "order_notification_service",
]
