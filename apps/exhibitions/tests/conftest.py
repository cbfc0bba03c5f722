import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken
from apps.artists.models import Artist
from apps.artworks.models import Artwork, ArtworkStatus
from apps.exhibitions.models import Exhibition, ExhibitionStatus


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
    return Artist.objects.create_user(email='klimt@example.com', name='Gustav Klimt')


def _artwork(artist, title, status=ArtworkStatus.AVAILABLE):
    return Artwork.objects.create(
        title=title,
        artist=artist,
        description=f'{title} description.',
        price=Decimal('1000.00'),
        category='Painting',
        status=status,
    )


@pytest.fixture
def artwork(db, artist):
    """Create and return an available artwork."""
    return _artwork(artist, 'The Kiss')


@pytest.fixture
def other_artwork(db, artist):
    """Create and return another available artwork."""
    return _artwork(artist, 'Judith')


@pytest.fixture
def sold_artwork(db, artist):
    """Create and return a sold artwork."""
    return _artwork(artist, 'Adele', status=ArtworkStatus.SOLD)


@pytest.fixture
def exhibition(db, artwork):
    """Create an upcoming exhibition showing `artwork`."""
    start = timezone.localdate() + timedelta(days=10)
    exhibition = Exhibition.objects.create(
        title='Golden Phase',
        description='Works from the golden period.',
        start_date=start,
        end_date=start + timedelta(days=30),
        curator='Ada Moreau',
        venue='Main Hall',
        address='1 Ring Road',
        city='Vienna',
        country='Austria',
        ticket_price=Decimal('12.50'),
    )
    exhibition.artworks.add(artwork)
    artwork.status = ArtworkStatus.EXHIBITION
    artwork.save(update_fields=['status'])
    return exhibition


@pytest.fixture
def past_exhibition(db):
    """Create a completed exhibition in another city."""
    start = timezone.localdate() - timedelta(days=90)
    return Exhibition.objects.create(
        title='Secession Archive',
        description='Archive show.',
        start_date=start,
        end_date=start + timedelta(days=30),
        curator='Luca Rossi',
        city='Prague',
        country='Czech Republic',
        status=ExhibitionStatus.COMPLETED,
    )
