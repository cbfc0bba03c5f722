import pytest
import uuid
from datetime import date, datetime, time
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
    return Artist.objects.create_user(email='vermeer@example.com', name='Johannes Vermeer')


@pytest.fixture
def reference_day():
    """Fixed 'today' for chart and trend calculations (a Sunday)."""
    return date(2024, 6, 30)


def at_noon(day):
    return timezone.make_aware(datetime.combine(day, time(12)))


@pytest.fixture
def make_artwork(db, artist):
    """Factory creating artworks, optionally backdated."""
    def _make(title='Artwork', price='100.00', created=None, **extra):
        artwork = Artwork.objects.create(
            title=title,
            artist=artist,
            description='Test artwork.',
            price=Decimal(price),
            category='Painting',
            **extra
        )
        if created:
            Artwork.objects.filter(id=artwork.id).update(created_at=at_noon(created))
            artwork.refresh_from_db()
        return artwork
    return _make


@pytest.fixture
def make_sale(db, make_artwork):
    """Factory creating a sale of a fresh artwork on a given day."""
    def _make(day, price='100.00', payment_status=PaymentStatus.COMPLETED):
        artwork = make_artwork(
            title=f'Sold {day.isoformat()}',
            price=price,
            status=(ArtworkStatus.SOLD if payment_status == PaymentStatus.COMPLETED
                    else ArtworkStatus.AVAILABLE),
        )
        price = Decimal(price)
        return Sale.objects.create(
            artwork=artwork,
            buyer='Buyer',
            price=price,
            commission=price / 10,
            payment_method='cash',
            payment_status=payment_status,
            transaction_id=str(uuid.uuid4()),
            date=at_noon(day),
        )
    return _make
