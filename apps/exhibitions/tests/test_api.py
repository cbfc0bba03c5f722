import pytest
from datetime import date
from uuid import uuid4
from django.urls import reverse
from rest_framework import status
from apps.artworks.models import ArtworkStatus
from apps.exhibitions.models import Exhibition


# =============================================================================
# Exhibition Read Tests
# =============================================================================

@pytest.mark.django_db
class TestExhibitionRead:
    """Tests for GET /api/exhibitions/"""

    def test_list_public(self, api_client, exhibition, past_exhibition):
        """Anyone can list exhibitions, latest start first."""
        url = reverse('exhibitions:exhibition-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [e['title'] for e in response.data['results']] == [
            'Golden Phase', 'Secession Archive'
        ]

    def test_list_embeds_location_and_artworks(self, api_client, exhibition, artwork, artist):
        """Location is grouped and artworks are resolved with their artist."""
        url = reverse('exhibitions:exhibition-list')
        response = api_client.get(url)

        entry = response.data['results'][0]
        assert entry['location'] == {
            'venue': 'Main Hall',
            'address': '1 Ring Road',
            'city': 'Vienna',
            'country': 'Austria',
        }
        assert entry['artworks'][0]['id'] == str(artwork.id)
        assert entry['artworks'][0]['artist']['name'] == artist.name
        assert entry['ticket_price'] == '12.50'

    def test_filter_status(self, api_client, exhibition, past_exhibition):
        """Filter by status."""
        url = reverse('exhibitions:exhibition-list')
        response = api_client.get(url, {'status': 'completed'})

        assert response.data['count'] == 1
        assert response.data['results'][0]['id'] == str(past_exhibition.id)

    def test_filter_city(self, api_client, exhibition, past_exhibition):
        """City filter ignores case."""
        url = reverse('exhibitions:exhibition-list')
        response = api_client.get(url, {'city': 'vienna'})

        assert response.data['count'] == 1
        assert response.data['results'][0]['id'] == str(exhibition.id)

    def test_filter_upcoming(self, api_client, exhibition, past_exhibition):
        """Upcoming lists exhibitions starting today or later."""
        url = reverse('exhibitions:exhibition-list')
        response = api_client.get(url, {'upcoming': 'true'})

        assert response.data['count'] == 1
        assert response.data['results'][0]['id'] == str(exhibition.id)

    def test_retrieve(self, api_client, exhibition):
        """Retrieve a single exhibition."""
        url = reverse('exhibitions:exhibition-detail', args=[exhibition.id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['title'] == 'Golden Phase'

    def test_retrieve_not_found(self, api_client):
        """Unknown id is a 404."""
        url = reverse('exhibitions:exhibition-detail', args=[uuid4()])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Exhibition Write Tests
# =============================================================================

@pytest.mark.django_db
class TestExhibitionWrite:
    """Tests for POST/PATCH/DELETE /api/exhibitions/"""

    def _payload(self, **overrides):
        data = {
            'title': 'Beethoven Frieze',
            'description': 'Frieze installation.',
            'start_date': '2030-03-01',
            'end_date': '2030-04-01',
            'curator': 'Mira Weber',
            'location': {'venue': 'East Wing', 'city': 'Vienna', 'country': 'Austria'},
        }
        data.update(overrides)
        return data

    def test_create_requires_auth(self, api_client):
        """Anonymous clients cannot create exhibitions."""
        url = reverse('exhibitions:exhibition-list')
        response = api_client.post(url, self._payload(), format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_create_puts_artworks_on_show(self, authenticated_client, other_artwork):
        """Assigned available artworks move to exhibition status."""
        url = reverse('exhibitions:exhibition-list')
        response = authenticated_client.post(
            url, self._payload(artworks=[str(other_artwork.id)]), format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == 'upcoming'
        assert response.data['location']['venue'] == 'East Wing'
        assert response.data['artworks'][0]['status'] == ArtworkStatus.EXHIBITION
        other_artwork.refresh_from_db()
        assert other_artwork.status == ArtworkStatus.EXHIBITION

    def test_create_keeps_sold_status(self, authenticated_client, sold_artwork):
        """Sold artworks can be shown but stay sold."""
        url = reverse('exhibitions:exhibition-list')
        response = authenticated_client.post(
            url, self._payload(artworks=[str(sold_artwork.id)]), format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        sold_artwork.refresh_from_db()
        assert sold_artwork.status == ArtworkStatus.SOLD

    def test_create_end_before_start(self, authenticated_client):
        """End date cannot precede start date."""
        url = reverse('exhibitions:exhibition-list')
        response = authenticated_client.post(
            url, self._payload(end_date='2030-02-01'), format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'end_date' in response.data

    def test_create_unknown_artwork(self, authenticated_client):
        """Artwork ids must exist."""
        url = reverse('exhibitions:exhibition-list')
        response = authenticated_client.post(
            url, self._payload(artworks=[str(uuid4())]), format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'artworks' in response.data

    def test_create_missing_fields(self, authenticated_client):
        """Title, dates, description and curator are required."""
        url = reverse('exhibitions:exhibition-list')
        response = authenticated_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        for field in ['title', 'description', 'start_date', 'end_date', 'curator']:
            assert field in response.data

    def test_update_resyncs_artworks(self, authenticated_client, exhibition, artwork, other_artwork):
        """Replacing the artwork list releases removed works and shows added ones."""
        url = reverse('exhibitions:exhibition-detail', args=[exhibition.id])
        response = authenticated_client.patch(
            url, {'artworks': [str(other_artwork.id)]}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert [a['id'] for a in response.data['artworks']] == [str(other_artwork.id)]
        artwork.refresh_from_db()
        other_artwork.refresh_from_db()
        assert artwork.status == ArtworkStatus.AVAILABLE
        assert other_artwork.status == ArtworkStatus.EXHIBITION

    def test_update_without_artworks_keeps_them(self, authenticated_client, exhibition, artwork):
        """PATCH without artworks leaves the assignment alone."""
        url = reverse('exhibitions:exhibition-detail', args=[exhibition.id])
        response = authenticated_client.patch(url, {'status': 'ongoing'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'ongoing'
        assert len(response.data['artworks']) == 1

    def test_update_inverted_dates(self, authenticated_client, exhibition):
        """A new end date before the stored start date is rejected."""
        url = reverse('exhibitions:exhibition-detail', args=[exhibition.id])
        response = authenticated_client.patch(url, {'end_date': '2000-01-01'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        exhibition.refresh_from_db()
        assert exhibition.end_date != date(2000, 1, 1)

    def test_update_not_found(self, authenticated_client):
        """Updating an unknown exhibition is a 404."""
        url = reverse('exhibitions:exhibition-detail', args=[uuid4()])
        response = authenticated_client.patch(url, {'title': 'x'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_releases_artworks(self, authenticated_client, exhibition, artwork):
        """Deleting an exhibition returns its artworks to available."""
        url = reverse('exhibitions:exhibition-detail', args=[exhibition.id])
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Exhibition deleted successfully'
        assert not Exhibition.objects.filter(id=exhibition.id).exists()
        artwork.refresh_from_db()
        assert artwork.status == ArtworkStatus.AVAILABLE

    def test_delete_not_found(self, authenticated_client):
        """Deleting an unknown exhibition is a 404."""
        url = reverse('exhibitions:exhibition-detail', args=[uuid4()])
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.parametrize('method', ['get', 'put', 'patch', 'delete'])
    def test_malformed_id_not_found(self, authenticated_client, method):
        """Ids that are not UUIDs do not resolve."""
        response = getattr(authenticated_client, method)('/api/exhibitions/' + '-' * 36 + '/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
