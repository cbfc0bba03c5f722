import pytest
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken
from apps.artists.models import Artist
from apps.artworks.models import Artwork, ArtworkStatus
from apps.sales.models import Sale, PaymentStatus


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
    return Artist.objects.create_user(email='hokusai@example.com', name='Katsushika Hokusai')


@pytest.fixture
def other_artist(db):
    """Create and return another artist."""
    return Artist.objects.create_user(email='kahlo@example.com', name='Frida Kahlo')


@pytest.fixture
def artwork(db, artist):
    """Create and return an available artwork."""
    return Artwork.objects.create(
        title='The Great Wave',
        artist=artist,
        description='Woodblock print of a wave off Kanagawa.',
        price=Decimal('2500.00'),
        category='Print',
        medium='Woodblock',
        height=Decimal('25.70'),
        width=Decimal('37.90'),
        year=1831,
        tags=['wave', 'ukiyo-e'],
    )


@pytest.fixture
def artwork_sculpture(db, other_artist):
    """Create and return an artwork on exhibition."""
    return Artwork.objects.create(
        title='Stone Figure',
        artist=other_artist,
        description='Carved limestone.',
        price=Decimal('9000.00'),
        category='Sculpture',
        medium='Limestone',
        status=ArtworkStatus.EXHIBITION,
    )


@pytest.fixture
def sold_artwork(db, artist):
    """Create a sold artwork with its completed sale."""
    artwork = Artwork.objects.create(
        title='Red Fuji',
        artist=artist,
        description='Mount Fuji at dawn.',
        price=Decimal('4000.00'),
        category='Print',
        status=ArtworkStatus.SOLD,
    )
    Sale.objects.create(
        artwork=artwork,
        buyer='Collector',
        price=Decimal('4000.00'),
        commission=Decimal('400.00'),
        payment_method='bank transfer',
        payment_status=PaymentStatus.COMPLETED,
        transaction_id='txn-red-fuji',
        date=timezone.now(),
    )
    return artwork
