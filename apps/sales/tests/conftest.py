import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken
from apps.artists.models import Artist
from apps.artworks.models import Artwork, ArtworkStatus


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
    """Create and return an artist."""
    return Artist.objects.create_user(email='okeeffe@example.com', name="Georgia O'Keeffe")


@pytest.fixture
def artwork(db, artist):
    """Create and return an available artwork."""
    return Artwork.objects.create(
        title='Red Canna',
        artist=artist,
        description='Flower close-up.',
        price=Decimal('1000.00'),
        category='Painting',
    )


@pytest.fixture
def exhibited_artwork(db, artist):
    """Create and return an artwork on exhibition."""
    return Artwork.objects.create(
        title='Black Iris',
        artist=artist,
        description='Flower study.',
        price=Decimal('3000.00'),
        category='Painting',
        status=ArtworkStatus.EXHIBITION,
    )


@pytest.fixture
def sale_payload(artwork):
    """Valid sale creation payload for `artwork`."""
    return {
        'artwork': str(artwork.id),
        'buyer': 'Alfred Stieglitz',
        'buyer_email': 'alfred@example.com',
        'price': '1234.55',
        'payment_method': 'credit card',
    }
