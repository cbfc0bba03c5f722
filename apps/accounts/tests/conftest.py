import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken
from apps.artists.models import Artist


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return an artist with a login."""
    return Artist.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        name='Test Artist',
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive artist."""
    return Artist.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        name='Inactive Artist',
        is_active=False,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an API client authenticated with a bearer token."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {AccessToken.for_user(user)}')
    return api_client
