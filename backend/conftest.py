"""
Root conftest.py for all backend tests.

This file makes fixtures available to all test files across all apps.
"""
import pytest


# ============================================================================
# AUTO-USE FIXTURES (Run automatically for every test)
# ============================================================================

@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    """
    Use the MD5 hasher in tests.

    Tests create many users and PBKDF2 dominates their runtime.
    """
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture(autouse=True)
def in_memory_backends(settings):
    """
    Keep tests off external services: mail goes to django.core.mail.outbox,
    channel-layer messages stay in process. The layer cache is dropped around
    each test so groups and queued messages never leak between tests.
    """
    from channels.layers import channel_layers

    settings.EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
    settings.CHANNEL_LAYERS = {
        "default": {"BACKEND": "channels.layers.InMemoryChannelLayer"},
    }
    channel_layers.backends.clear()
    yield
    channel_layers.backends.clear()


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def api_client():
    """
    Provide DRF API client for API tests.

    Usage:
        def test_my_api(api_client):
            response = api_client.get('/api/restaurants/')
            assert response.status_code == 200
    """
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def api_client_factory():
    """
    Build API clients authenticated as a given user through the x-jwt header.

    Usage:
        def test_protected_endpoint(api_client_factory, client_user):
            client = api_client_factory(client_user)
            response = client.get('/api/orders/')
    """
    from rest_framework.test import APIClient
    from users.services import UserService

    def make_client(user=None):
        client = APIClient()
        if user is not None:
            client.credentials(HTTP_X_JWT=UserService.generate_token(user))
        return client

    return make_client


@pytest.fixture
def owner_client(api_client_factory, owner_user):
    return api_client_factory(owner_user)


@pytest.fixture
def customer_client(api_client_factory, client_user):
    return api_client_factory(client_user)


@pytest.fixture
def driver_client(api_client_factory, delivery_user):
    return api_client_factory(delivery_user)


# ============================================================================
# CHANNELS FIXTURES
# ============================================================================

@pytest.fixture
def channel_layer(in_memory_backends):
    """The in-memory channel layer configured for tests."""
    from channels.layers import get_channel_layer
    return get_channel_layer()


# ============================================================================
# IMPORT ALL FIXTURES FROM core_backend/tests/fixtures.py
# ============================================================================
from core_backend.tests.fixtures import *
