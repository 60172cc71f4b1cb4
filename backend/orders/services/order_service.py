import logging

from django.db import transaction

from core_backend.base.results import failure, success
from core_backend.policies import Action, can
from restaurants.models import Dish, Restaurant
from users.models import User
from ..calculators import OrderCalculator
from ..models import Order, OrderItem
from .notification_service import order_notification_service

logger = logging.getLogger(__name__)


class OrderService:
    """
    Order lifecycle for customers, restaurant owners and delivery drivers.

    Writes happen inside one transaction per operation; real-time events are
    published once the transaction has committed.
    """

    @staticmethod
    def create_order(customer, restaurant_id, items) -> dict:
        """
        Price and persist an order.

        ``items`` is a list of ``{"dish_id": int, "options": [{"name", "choice"?}]}``;
        every dish must be on the restaurant's menu.
        """
        try:
            with transaction.atomic():
                restaurant = Restaurant.objects.filter(pk=restaurant_id).first()
                if restaurant is None:
                    return failure("Restaurant not found")

                calculator = OrderCalculator()
                lines = []
                for item in items:
                    dish = Dish.objects.filter(pk=item["dish_id"], restaurant=restaurant).first()
                    if dish is None:
                        return failure("Dish not found.")
                    options = item.get("options") or []
                    calculator.add(dish, options)
                    lines.append((dish, options))

                order = Order.objects.create(
                    customer=customer, restaurant=restaurant, total=calculator.total
                )
                OrderItem.objects.bulk_create(
                    [OrderItem(order=order, dish=dish, options=options) for dish, options in lines]
                )

            logger.info(f"Order {order.id} created for restaurant {restaurant.id} (total {order.total})")
            OrderService._notify(order_notification_service.publish_pending_order, order)
            return success(order_id=order.id)
        except Exception:
            logger.exception(f"Order creation failed for customer {customer.pk}")
            return failure("Could not create order.")

    @staticmethod
    def get_orders(user, status=None) -> dict:
        try:
            if user.role == User.Role.CLIENT:
                orders = Order.objects.filter(customer=user)
            elif user.role == User.Role.DELIVERY:
                orders = Order.objects.filter(driver=user)
            elif user.role == User.Role.OWNER:
                orders = Order.objects.filter(restaurant__owner=user)
            else:
                orders = Order.objects.none()

            if status:
                orders = orders.filter(status=status)

            orders = orders.select_related("restaurant").prefetch_related("items")
            return success(orders=list(orders))
        except Exception:
            logger.exception(f"Loading orders failed for user {user.pk}")
            return failure("Could not get orders")

    @staticmethod
    def get_order(user, order_id) -> dict:
        try:
            order = OrderService._load(order_id)
            if order is None:
                return failure("Order not found.")

            if not can(user, order, Action.VIEW_ORDER):
                return failure("You cant see that")

            return success(order=order)
        except Exception:
            logger.exception(f"Loading order {order_id} failed for user {user.pk}")
            return failure("Could not load order.")

    @staticmethod
    def edit_order_status(user, order_id, status) -> dict:
        try:
            with transaction.atomic():
                order = OrderService._load(order_id)
                if order is None:
                    return failure("Order not found.")

                if not can(user, order, Action.VIEW_ORDER):
                    return failure("Can't do that.")

                if not can(user, order, Action.UPDATE_ORDER_STATUS, status=status):
                    return failure("You can't do that.")

                if not order.can_transition_to(status):
                    return failure(
                        f"Cannot transition order from {order.status} to {status}."
                    )

                previous = order.status
                order.status = status
                order.save(update_fields=["status", "updated_at"])

            logger.info(f"Order {order.id} moved from {previous} to {status} by user {user.pk}")
            OrderService._notify(order_notification_service.publish_order_update, order)
            if user.role == User.Role.OWNER and status == Order.OrderStatus.COOKED:
                OrderService._notify(order_notification_service.publish_cooked_order, order)
            return success()
        except Exception:
            logger.exception(f"Editing order {order_id} failed")
            return failure("Could not edit order.")

    @staticmethod
    def take_order(driver, order_id) -> dict:
        try:
            with transaction.atomic():
                order = OrderService._load(order_id)
                if order is None:
                    return failure("Order not found")

                if not can(driver, order, Action.TAKE_ORDER):
                    return failure("You can't do that.")

                if order.driver_id:
                    return failure("This order already has a driver")

                order.driver = driver
                order.save(update_fields=["driver", "updated_at"])

            logger.info(f"Driver {driver.pk} took order {order.id}")
            OrderService._notify(order_notification_service.publish_order_update, order)
            return success()
        except Exception:
            logger.exception(f"Taking order {order_id} failed")
            return failure("Could not update order.")

    @staticmethod
    def _load(order_id):
        return (
            Order.objects.select_related("restaurant", "customer", "driver")
            .prefetch_related("items")
            .filter(pk=order_id)
            .first()
        )

    @staticmethod
    def _notify(publish, order):
        # The write has committed; a failed broadcast must not fail the operation.
        try:
            publish(order)
        except Exception as e:
            logger.error(f"Failed to publish event for order {order.id}: {e}")
