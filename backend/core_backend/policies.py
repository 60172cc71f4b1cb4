"""
Central access policy.

Every resource-level authorization decision (who may touch which restaurant,
dish or order) goes through ``can``. Endpoint-level role gates live in
users.permissions.HasRole; this module answers the finer question of whether
a given actor may perform an action on a specific resource.
"""
import enum


class Action(str, enum.Enum):
    MANAGE_RESTAURANT = "manage_restaurant"
    MANAGE_DISH = "manage_dish"
    PROMOTE_RESTAURANT = "promote_restaurant"
    VIEW_ORDER = "view_order"
    UPDATE_ORDER_STATUS = "update_order_status"
    TAKE_ORDER = "take_order"


def _owns_restaurant(actor, restaurant) -> bool:
    return restaurant is not None and restaurant.owner_id == actor.pk


def _restaurant_of(resource):
    # A dish policy check may be made against the dish or its restaurant.
    from restaurants.models import Dish

    if isinstance(resource, Dish):
        return resource.restaurant
    return resource


def _can_view_order(actor, order) -> bool:
    from users.models import User

    if actor.role == User.Role.CLIENT:
        return order.customer_id == actor.pk
    if actor.role == User.Role.DELIVERY:
        return order.driver_id == actor.pk
    if actor.role == User.Role.OWNER:
        return _owns_restaurant(actor, order.restaurant)
    return False


def _allowed_statuses(actor):
    from orders.models import Order
    from users.models import User

    allowed = {
        User.Role.OWNER: (Order.OrderStatus.COOKING, Order.OrderStatus.COOKED),
        User.Role.DELIVERY: (Order.OrderStatus.PICKED_UP, Order.OrderStatus.DELIVERED),
    }.get(actor.role, ())
    return {str(status) for status in allowed}


def can(actor, resource, action, **context) -> bool:
    """
    Return True when ``actor`` may perform ``action`` on ``resource``.

    ``context`` carries action-specific inputs, e.g. the target ``status``
    for UPDATE_ORDER_STATUS.
    """
    from users.models import User

    if actor is None or not getattr(actor, "is_authenticated", False):
        return False

    action = Action(action)

    if action in (Action.MANAGE_RESTAURANT, Action.PROMOTE_RESTAURANT):
        return _owns_restaurant(actor, resource)

    if action == Action.MANAGE_DISH:
        return _owns_restaurant(actor, _restaurant_of(resource))

    if action == Action.VIEW_ORDER:
        return _can_view_order(actor, resource)

    if action == Action.UPDATE_ORDER_STATUS:
        return str(context.get("status")) in _allowed_statuses(actor)

    if action == Action.TAKE_ORDER:
        return actor.role == User.Role.DELIVERY

    return False
