import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

User = get_user_model()


@pytest.fixture
def user(db):
    return User.objects.create_user(email="carol@example.com", password="secret123", name="Carol")


@pytest.fixture
def oauth_user(db):
    # No password: signed up through an external provider
    return User.objects.create_user(email="dave@example.com", name="Dave")


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client
