import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken
from apps.artists.models import Artist
from apps.artworks.models import Artwork


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return the logged-in artist."""
    return Artist.objects.create_user(
        email='curator@example.com',
        password='TestPass123!',
        name='Curator',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an API client authenticated with a bearer token."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {AccessToken.for_user(user)}')
    return api_client


@pytest.fixture
def artist(db):
    """Create and return an artist without a login."""
    return Artist.objects.create_user(
        email='monet@example.com',
        name='Claude Monet',
        bio='Founder of impressionism.',
        phone='+33 1 23 45 67 89',
        website='https://monet.example.com',
        specialization=['Oil painting', 'Landscape'],
        achievements=[{'title': 'Salon entry', 'year': 1865, 'description': ''}],
    )


@pytest.fixture
def artist_inactive(db):
    """Create and return an inactive artist."""
    return Artist.objects.create_user(
        email='retired@example.com',
        name='Retired Sculptor',
        specialization=['Sculpture'],
        is_active=False,
    )


@pytest.fixture
def artwork(db, artist):
    """Create and return an artwork owned by `artist`."""
    return Artwork.objects.create(
        title='Water Lilies',
        artist=artist,
        description='Pond study.',
        price=Decimal('1500.00'),
        category='Painting',
    )
