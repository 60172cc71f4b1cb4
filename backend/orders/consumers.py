import json
import logging

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncWebsocketConsumer

from core_backend.policies import Action, can
from users.models import User
from .services.notification_service import (
    COOKED_ORDERS_GROUP,
    order_updates_group,
    pending_orders_group,
)

logger = logging.getLogger(__name__)

CLOSE_FORBIDDEN = 4003
CLOSE_NOT_FOUND = 4004


class OrderEventsConsumer(AsyncWebsocketConsumer):
    """
    Base consumer for read-only order event streams.

    Subclasses resolve the group to join in ``get_group_name``, returning
    None after closing the socket when the connection is refused.
    """

    group_name = None

    async def connect(self):
        self.user = self.scope.get("user")
        if not self.user or not self.user.is_authenticated:
            logger.warning(f"{self.__class__.__name__}: unauthenticated connection refused")
            await self.close(code=CLOSE_FORBIDDEN)
            return

        group_name = await self.get_group_name()
        if group_name is None:
            return

        self.group_name = group_name
        await self.channel_layer.group_add(self.group_name, self.channel_name)
        await self.accept()
        logger.info(f"User {self.user.pk} subscribed to {self.group_name}")

    async def disconnect(self, close_code):
        if self.group_name:
            await self.channel_layer.group_discard(self.group_name, self.channel_name)
            logger.info(f"User {self.user.pk} left {self.group_name}")

    async def receive(self, text_data=None, bytes_data=None):
        try:
            data = json.loads(text_data or "{}")
        except json.JSONDecodeError:
            logger.error(f"Invalid JSON received on {self.group_name}")
            return

        if data.get("type") == "ping":
            await self.send(text_data=json.dumps({"type": "pong"}))

    async def get_group_name(self):
        raise NotImplementedError

    async def require_role(self, role):
        if self.user.role != role:
            logger.warning(
                f"{self.__class__.__name__}: user {self.user.pk} with role {self.user.role} refused"
            )
            await self.close(code=CLOSE_FORBIDDEN)
            return False
        return True

    async def send_order(self, event):
        await self.send(text_data=json.dumps({"type": event["type"], "order": event["order"]}))


class PendingOrdersConsumer(OrderEventsConsumer):
    """New orders placed at any restaurant the connected owner owns."""

    async def get_group_name(self):
        if not await self.require_role(User.Role.OWNER):
            return None
        return pending_orders_group(self.user.pk)

    async def pending_order(self, event):
        await self.send_order(event)


class CookedOrdersConsumer(OrderEventsConsumer):
    """Orders marked cooked, broadcast to every delivery user."""

    async def get_group_name(self):
        if not await self.require_role(User.Role.DELIVERY):
            return None
        return COOKED_ORDERS_GROUP

    async def cooked_order(self, event):
        await self.send_order(event)


class OrderUpdatesConsumer(OrderEventsConsumer):
    """Status and driver changes of one order."""

    async def get_group_name(self):
        order_id = self.scope["url_route"]["kwargs"]["order_id"]
        visible = await self.check_order_visibility(order_id)
        if visible is None:
            logger.warning(f"OrderUpdatesConsumer: order {order_id} not found")
            await self.close(code=CLOSE_NOT_FOUND)
            return None
        if not visible:
            logger.warning(f"OrderUpdatesConsumer: user {self.user.pk} may not see order {order_id}")
            await self.close(code=CLOSE_FORBIDDEN)
            return None
        return order_updates_group(order_id)

    @database_sync_to_async
    def check_order_visibility(self, order_id):
        from .models import Order

        order = Order.objects.select_related("restaurant").filter(pk=order_id).first()
        if order is None:
            return None
        return can(self.user, order, Action.VIEW_ORDER)

    async def order_update(self, event):
        await self.send_order(event)
