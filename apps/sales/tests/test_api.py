import pytest
from decimal import Decimal
from datetime import timedelta
from uuid import uuid4
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from apps.artworks.models import ArtworkStatus
from apps.sales.models import Sale, PaymentStatus
from apps.sales.services import record_sale


# =============================================================================
# Sale Create Tests
# =============================================================================

@pytest.mark.django_db
class TestSaleCreate:
    """Tests for POST /api/sales/"""

    def test_requires_auth(self, api_client, sale_payload):
        """Sales are never public."""
        url = reverse('sales:sale-list')

        assert api_client.post(url, sale_payload, format='json').status_code == \
            status.HTTP_401_UNAUTHORIZED
        assert api_client.get(url).status_code == status.HTTP_401_UNAUTHORIZED

    def test_create(self, authenticated_client, sale_payload, artwork):
        """Recording a sale completes it and marks the artwork sold."""
        url = reverse('sales:sale-list')
        response = authenticated_client.post(url, sale_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['payment_status'] == PaymentStatus.COMPLETED
        assert response.data['commission'] == '123.46'
        assert response.data['total_amount'] == '1358.01'
        assert response.data['transaction_id']
        assert response.data['artwork']['id'] == str(artwork.id)
        assert response.data['artwork']['status'] == ArtworkStatus.SOLD

        artwork.refresh_from_db()
        assert artwork.status == ArtworkStatus.SOLD

    def test_create_unknown_artwork(self, authenticated_client, sale_payload):
        """Unknown artwork is a 404."""
        url = reverse('sales:sale-list')
        sale_payload['artwork'] = str(uuid4())
        response = authenticated_client.post(url, sale_payload, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'Artwork not found'

    def test_create_sold_artwork(self, authenticated_client, sale_payload):
        """An artwork can only be sold once."""
        url = reverse('sales:sale-list')
        authenticated_client.post(url, sale_payload, format='json')
        response = authenticated_client.post(url, sale_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Sale.objects.count() == 1

    def test_create_exhibited_artwork(self, authenticated_client, sale_payload, exhibited_artwork):
        """Artworks on exhibition are not for sale."""
        url = reverse('sales:sale-list')
        sale_payload['artwork'] = str(exhibited_artwork.id)
        response = authenticated_client.post(url, sale_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        exhibited_artwork.refresh_from_db()
        assert exhibited_artwork.status == ArtworkStatus.EXHIBITION

    def test_create_invalid_price(self, authenticated_client, sale_payload):
        """Price must be positive."""
        url = reverse('sales:sale-list')
        sale_payload['price'] = '-5'
        response = authenticated_client.post(url, sale_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'price' in response.data

    def test_create_missing_buyer(self, authenticated_client, sale_payload):
        """Buyer is required."""
        url = reverse('sales:sale-list')
        del sale_payload['buyer']
        response = authenticated_client.post(url, sale_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'buyer' in response.data


# =============================================================================
# Sale List / Stats Tests
# =============================================================================

@pytest.mark.django_db
class TestSaleList:
    """Tests for GET /api/sales/ and /api/sales/stats/"""

    def test_list_and_filter(self, authenticated_client, artwork, exhibited_artwork):
        """Filter by payment status and artwork."""
        completed = record_sale(
            artwork_id=artwork.id, buyer='A', price=Decimal('100.00'),
            payment_method='cash',
        )
        exhibited_artwork.status = ArtworkStatus.AVAILABLE
        exhibited_artwork.save()
        refunded = record_sale(
            artwork_id=exhibited_artwork.id, buyer='B', price=Decimal('200.00'),
            payment_method='cash',
        )
        Sale.objects.filter(id=refunded.id).update(payment_status=PaymentStatus.REFUNDED)

        url = reverse('sales:sale-list')
        assert authenticated_client.get(url).data['count'] == 2

        response = authenticated_client.get(url, {'payment_status': 'refunded'})
        assert [s['id'] for s in response.data['results']] == [str(refunded.id)]

        response = authenticated_client.get(url, {'artwork': str(artwork.id)})
        assert [s['id'] for s in response.data['results']] == [str(completed.id)]

    def test_filter_dates(self, authenticated_client, artwork):
        """Date bounds are inclusive calendar days."""
        old = timezone.now() - timedelta(days=40)
        record_sale(
            artwork_id=artwork.id, buyer='A', price=Decimal('100.00'),
            payment_method='cash', date=old,
        )

        url = reverse('sales:sale-list')
        since = (timezone.localdate() - timedelta(days=7)).isoformat()
        assert authenticated_client.get(url, {'date_from': since}).data['count'] == 0
        assert authenticated_client.get(url, {'date_to': since}).data['count'] == 1

    def test_stats_empty(self, authenticated_client):
        """Stats are zero when nothing has been sold."""
        url = reverse('sales:sale-stats')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 0
        assert Decimal(response.data['total']) == Decimal('0')
        assert Decimal(response.data['commission']) == Decimal('0')

    def test_stats_only_completed(self, authenticated_client, artwork, exhibited_artwork):
        """Stats ignore pending and refunded sales."""
        record_sale(
            artwork_id=artwork.id, buyer='A', price=Decimal('1000.00'),
            payment_method='cash',
        )
        exhibited_artwork.status = ArtworkStatus.AVAILABLE
        exhibited_artwork.save()
        refunded = record_sale(
            artwork_id=exhibited_artwork.id, buyer='B', price=Decimal('500.00'),
            payment_method='cash',
        )
        Sale.objects.filter(id=refunded.id).update(payment_status=PaymentStatus.REFUNDED)

        response = authenticated_client.get(reverse('sales:sale-stats'))

        assert response.data['count'] == 1
        assert Decimal(response.data['total']) == Decimal('1000.00')
        assert Decimal(response.data['commission']) == Decimal('100.00')


# =============================================================================
# Sale Update / Delete Tests
# =============================================================================

@pytest.mark.django_db
class TestSaleUpdateDelete:
    """Tests for PATCH/DELETE /api/sales/{id}/"""

    def test_refund_releases_artwork(self, authenticated_client, artwork):
        """Moving a sale out of completed puts the artwork back on sale."""
        sale = record_sale(
            artwork_id=artwork.id, buyer='A', price=Decimal('100.00'),
            payment_method='cash',
        )
        url = reverse('sales:sale-detail', args=[sale.id])
        response = authenticated_client.patch(url, {'payment_status': 'refunded'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['payment_status'] == PaymentStatus.REFUNDED
        artwork.refresh_from_db()
        assert artwork.status == ArtworkStatus.AVAILABLE

    def test_price_change_recomputes_commission(self, authenticated_client, artwork):
        """Editing the price updates the commission."""
        sale = record_sale(
            artwork_id=artwork.id, buyer='A', price=Decimal('100.00'),
            payment_method='cash',
        )
        url = reverse('sales:sale-detail', args=[sale.id])
        response = authenticated_client.patch(url, {'price': '250.00'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['commission'] == '25.00'

    def test_update_not_found(self, authenticated_client):
        """Updating an unknown sale is a 404."""
        url = reverse('sales:sale-detail', args=[uuid4()])
        response = authenticated_client.patch(url, {'buyer': 'x'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_releases_artwork(self, authenticated_client, artwork):
        """Deleting a completed sale puts the artwork back on sale."""
        sale = record_sale(
            artwork_id=artwork.id, buyer='A', price=Decimal('100.00'),
            payment_method='cash',
        )
        url = reverse('sales:sale-detail', args=[sale.id])
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Sale deleted successfully'
        assert not Sale.objects.filter(id=sale.id).exists()
        artwork.refresh_from_db()
        assert artwork.status == ArtworkStatus.AVAILABLE

    def test_delete_not_found(self, authenticated_client):
        """Deleting an unknown sale is a 404."""
        url = reverse('sales:sale-detail', args=[uuid4()])
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.parametrize('method', ['get', 'put', 'patch', 'delete'])
    def test_malformed_id_not_found(self, authenticated_client, method):
        """Ids that are not UUIDs do not resolve."""
        response = getattr(authenticated_client, method)('/api/sales/' + '-' * 36 + '/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
