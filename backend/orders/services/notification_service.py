import logging

logger = logging.getLogger(__name__)


def pending_orders_group(owner_id) -> str:
    return f"owner_{owner_id}_pending_orders"


COOKED_ORDERS_GROUP = "cooked_orders"


def order_updates_group(order_id) -> str:
    return f"order_{order_id}_updates"


class OrderNotificationService:
    """
    Singleton service that publishes order events to channel-layer groups.

    Three scopes exist: new orders for a restaurant owner, cooked orders for
    every delivery user, and per-order updates for anyone allowed to see the
    order. Callers publish after their write has committed.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def publish_pending_order(self, order):
        restaurant = order.restaurant
        if restaurant is None:
            logger.warning(f"Order {order.id} has no restaurant. No pending notification sent.")
            return
        self._broadcast(pending_orders_group(restaurant.owner_id), "pending_order", order)

    def publish_cooked_order(self, order):
        self._broadcast(COOKED_ORDERS_GROUP, "cooked_order", order)

    def publish_order_update(self, order):
        self._broadcast(order_updates_group(order.id), "order_update", order)

    @staticmethod
    def build_order_payload(order) -> dict:
        """Plain-typed snapshot of an order, safe for any channel layer."""
        return {
            "id": order.id,
            "status": str(order.status),
            "total": order.total,
            "restaurant_id": order.restaurant_id,
            "customer_id": order.customer_id,
            "driver_id": order.driver_id,
            "created_at": order.created_at.isoformat() if order.created_at else None,
            "updated_at": order.updated_at.isoformat() if order.updated_at else None,
        }

    def _broadcast(self, group_name, event_type, order):
        from channels.layers import get_channel_layer
        from asgiref.sync import async_to_sync

        channel_layer = get_channel_layer()
        if not channel_layer:
            logger.warning(f"Channel layer not available. Cannot send {event_type} for order {order.id}.")
            return

        logger.debug(f"Broadcasting {event_type} to group: {group_name}")
        async_to_sync(channel_layer.group_send)(
            group_name,
            {"type": event_type, "order": self.build_order_payload(order)},
        )


# Create a single, globally accessible instance of the service.
order_notification_service = OrderNotificationService()
