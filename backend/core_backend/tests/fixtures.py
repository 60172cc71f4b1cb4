"""
Shared test fixtures for all backend tests.

This module provides reusable pytest fixtures for common test objects
like users, restaurants, dishes and orders.
"""
import pytest
from datetime import timedelta
from django.utils import timezone

from users.models import User
from restaurants.models import Category, Dish, Restaurant
from orders.models import Order, OrderItem
from payments.models import Payment


# ============================================================================
# USER FIXTURES
# ============================================================================

@pytest.fixture
def client_user(db):
    """Create a customer"""
    return User.objects.create_user(
        email='client@eats.com',
        password='password123',
        role=User.Role.CLIENT,
    )


@pytest.fixture
def owner_user(db):
    """Create a restaurant owner"""
    return User.objects.create_user(
        email='owner@eats.com',
        password='password123',
        role=User.Role.OWNER,
    )


@pytest.fixture
def other_owner_user(db):
    """Create a second owner who owns nothing of owner_user's"""
    return User.objects.create_user(
        email='other-owner@eats.com',
        password='password123',
        role=User.Role.OWNER,
    )


@pytest.fixture
def delivery_user(db):
    """Create a delivery driver"""
    return User.objects.create_user(
        email='driver@eats.com',
        password='password123',
        role=User.Role.DELIVERY,
    )


# ============================================================================
# RESTAURANT FIXTURES
# ============================================================================

@pytest.fixture
def category(db):
    """Create a category"""
    return Category.objects.create(name='Fast Food', slug='fast-food')


@pytest.fixture
def restaurant(owner_user, category):
    """Create a restaurant owned by owner_user"""
    return Restaurant.objects.create(
        name='Burger Palace',
        address='1 Main Street',
        owner=owner_user,
        category=category,
    )


@pytest.fixture
def other_restaurant(other_owner_user, category):
    """Create a restaurant owned by other_owner_user"""
    return Restaurant.objects.create(
        name='Noodle House',
        address='2 Side Street',
        owner=other_owner_user,
        category=category,
    )


@pytest.fixture
def dish(restaurant):
    """
    Create a dish priced 10 with a priced option and a size option.

    Pickle costs 1 when picked; size L costs 2, size S nothing.
    """
    return Dish.objects.create(
        restaurant=restaurant,
        name='Classic Burger',
        price=10,
        description='Beef patty with cheese',
        options=[
            {'name': 'Pickle', 'extra': 1},
            {'name': 'Size', 'choices': [{'name': 'S'}, {'name': 'L', 'extra': 2}]},
        ],
    )


@pytest.fixture
def promoted_restaurant(other_owner_user, category):
    """Create a restaurant whose promotion is still running"""
    return Restaurant.objects.create(
        name='Sushi Garden',
        address='3 Harbor Road',
        owner=other_owner_user,
        category=category,
        is_promoted=True,
        promoted_until=timezone.now() + timedelta(days=3),
    )


@pytest.fixture
def expired_promotion_restaurant(other_owner_user, category):
    """Create a restaurant whose promotion ended yesterday"""
    return Restaurant.objects.create(
        name='Taco Corner',
        address='4 Market Square',
        owner=other_owner_user,
        category=category,
        is_promoted=True,
        promoted_until=timezone.now() - timedelta(days=1),
    )


# ============================================================================
# ORDER FIXTURES
# ============================================================================

@pytest.fixture
def order(client_user, restaurant, dish):
    """Create a pending order for one Classic Burger"""
    order = Order.objects.create(
        customer=client_user,
        restaurant=restaurant,
        total=dish.price,
    )
    OrderItem.objects.create(order=order, dish=dish, options=[])
    return order


@pytest.fixture
def payment(owner_user, restaurant):
    """Create a payment made by owner_user"""
    return Payment.objects.create(
        transaction_id='txn-001',
        user=owner_user,
        restaurant=restaurant,
    )
