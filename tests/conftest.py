from unittest.mock import MagicMock

import pytest

from django.contrib.auth import get_user_model

from rest_framework.test import APIClient

from modules.products.repositories.interfaces import IProductRepository


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def user():
    return get_user_model().objects.create_user(
        username="catalog_user", password="testpass123"
    )


@pytest.fixture()
def auth_client(api_client, user):
    """APIClient with a force-authenticated Django user."""
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture()
def mock_repo():
    """Repository double that satisfies the IProductRepository contract."""
    return MagicMock(spec=IProductRepository)
