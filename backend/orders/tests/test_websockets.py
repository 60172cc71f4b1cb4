"""
WebSocket Tests

Tests the real-time order streams served by orders.consumers:
1. Connection authentication and role checks
2. Pending orders reach the restaurant owner
3. Cooked orders reach delivery users
4. Per-order updates reach users allowed to see the order
"""
import pytest
from channels.db import database_sync_to_async
from channels.testing import WebsocketCommunicator

from core_backend.asgi import application
from orders.models import Order
from orders.services import OrderService
from users.services import UserService


def communicator_for(path, user=None, via_query=False):
    """Build a communicator authenticated as ``user`` (header or ?token=)."""
    if user is None:
        return WebsocketCommunicator(application, path)

    token = UserService.generate_token(user)
    if via_query:
        return WebsocketCommunicator(application, f"{path}?token={token}")
    return WebsocketCommunicator(application, path, headers=[(b"x-jwt", token.encode())])


# ============================================================================
# CONNECTION TESTS
# ============================================================================

@pytest.mark.django_db(transaction=True)
@pytest.mark.asyncio
class TestWebSocketConnection:
    """Test WebSocket authentication and role checks."""

    async def test_anonymous_connection_rejected(self):
        communicator = communicator_for("/ws/orders/pending/")

        connected, code = await communicator.connect()

        assert not connected
        assert code == 4003

    async def test_invalid_token_rejected(self):
        communicator = WebsocketCommunicator(
            application, "/ws/orders/cooked/", headers=[(b"x-jwt", b"garbage")]
        )

        connected, code = await communicator.connect()

        assert not connected
        assert code == 4003

    async def test_owner_connects_to_pending_stream(self, owner_user):
        communicator = communicator_for("/ws/orders/pending/", owner_user)

        connected, _ = await communicator.connect()

        assert connected
        await communicator.disconnect()

    async def test_token_accepted_from_query_string(self, delivery_user):
        communicator = communicator_for("/ws/orders/cooked/", delivery_user, via_query=True)

        connected, _ = await communicator.connect()

        assert connected
        await communicator.disconnect()

    async def test_client_rejected_from_cooked_stream(self, client_user):
        communicator = communicator_for("/ws/orders/cooked/", client_user)

        connected, code = await communicator.connect()

        assert not connected
        assert code == 4003

    async def test_unknown_order_rejected(self, client_user):
        communicator = communicator_for("/ws/orders/999999/", client_user)

        connected, code = await communicator.connect()

        assert not connected
        assert code == 4004

    async def test_order_stream_hidden_from_stranger(self, other_owner_user, order):
        communicator = communicator_for(f"/ws/orders/{order.id}/", other_owner_user)

        connected, code = await communicator.connect()

        assert not connected
        assert code == 4003

    async def test_ping(self, owner_user):
        communicator = communicator_for("/ws/orders/pending/", owner_user)
        await communicator.connect()

        await communicator.send_json_to({"type": "ping"})
        response = await communicator.receive_json_from(timeout=1)

        assert response == {"type": "pong"}
        await communicator.disconnect()


# ============================================================================
# EVENT DELIVERY TESTS
# ============================================================================

@pytest.mark.django_db(transaction=True)
@pytest.mark.asyncio
class TestOrderEvents:
    """Test that service operations reach the right subscribers."""

    async def test_new_order_reaches_owner(self, owner_user, client_user, restaurant, dish):
        communicator = communicator_for("/ws/orders/pending/", owner_user)
        await communicator.connect()

        result = await database_sync_to_async(OrderService.create_order)(
            client_user, restaurant.id, [{"dish_id": dish.id}]
        )

        message = await communicator.receive_json_from(timeout=1)
        assert message["type"] == "pending_order"
        assert message["order"]["id"] == result["order_id"]
        assert message["order"]["total"] == 10
        assert message["order"]["status"] == "PENDING"
        await communicator.disconnect()

    async def test_new_order_not_sent_to_other_owner(self, other_owner_user, client_user, restaurant, dish):
        communicator = communicator_for("/ws/orders/pending/", other_owner_user)
        await communicator.connect()

        await database_sync_to_async(OrderService.create_order)(
            client_user, restaurant.id, [{"dish_id": dish.id}]
        )

        assert await communicator.receive_nothing(timeout=0.2)
        await communicator.disconnect()

    async def test_cooked_order_reaches_drivers(self, owner_user, delivery_user, order):
        communicator = communicator_for("/ws/orders/cooked/", delivery_user)
        await communicator.connect()

        await database_sync_to_async(OrderService.edit_order_status)(
            owner_user, order.id, Order.OrderStatus.COOKED
        )

        message = await communicator.receive_json_from(timeout=1)
        assert message["type"] == "cooked_order"
        assert message["order"]["id"] == order.id
        assert message["order"]["status"] == "COOKED"
        await communicator.disconnect()

    async def test_order_update_reaches_customer(self, owner_user, client_user, delivery_user, order):
        communicator = communicator_for(f"/ws/orders/{order.id}/", client_user)
        connected, _ = await communicator.connect()
        assert connected

        await database_sync_to_async(OrderService.edit_order_status)(
            owner_user, order.id, Order.OrderStatus.COOKING
        )
        first = await communicator.receive_json_from(timeout=1)

        await database_sync_to_async(OrderService.take_order)(delivery_user, order.id)
        second = await communicator.receive_json_from(timeout=1)

        assert first["type"] == "order_update"
        assert first["order"]["status"] == "COOKING"
        assert second["order"]["driver_id"] == delivery_user.id
        await communicator.disconnect()


# ============================================================================
# CHANNEL LAYER ISOLATION TESTS
# ============================================================================

@pytest.mark.asyncio
class TestChannelLayerIsolation:
    """Each test gets its own in-memory layer: no groups or messages carry over."""

    async def test_first_subscriber_starts_from_empty_layer(self, channel_layer):
        assert channel_layer.groups == {}

        await channel_layer.group_add("owner_1_pending_orders", "first-channel")
        await channel_layer.group_send("owner_1_pending_orders", {"type": "pending_order"})

    async def test_second_subscriber_starts_from_empty_layer(self, channel_layer):
        assert channel_layer.groups == {}

        await channel_layer.group_add("owner_1_pending_orders", "second-channel")
        await channel_layer.group_send("owner_1_pending_orders", {"type": "pending_order"})

    async def test_service_and_fixture_share_the_layer(self, channel_layer):
        from channels.layers import get_channel_layer

        assert get_channel_layer() is channel_layer
