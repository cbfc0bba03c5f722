"""
Service layer tests for exhibition artwork assignment.

Tests cover:
- Status changes when artworks join or leave exhibitions
- Artworks shared between exhibitions
"""

import pytest
from datetime import timedelta
from uuid import uuid4
from django.utils import timezone

from apps.artworks.models import ArtworkStatus
from apps.exhibitions.services import (
    create_exhibition,
    update_exhibition,
    delete_exhibition,
    ExhibitionNotFoundError,
    InvalidDateRangeError,
)


def _create(title, artworks):
    start = timezone.localdate()
    return create_exhibition(
        title=title,
        description='Group show.',
        start_date=start,
        end_date=start + timedelta(days=14),
        curator='Ines Novak',
        artworks=artworks,
    )


@pytest.mark.django_db
class TestArtworkAssignment:
    """Tests for artwork status changes driven by exhibitions."""

    def test_shared_artwork_stays_on_show(self, artwork):
        """Removing an artwork from one exhibition keeps it on show in another."""
        first = _create('First', [artwork])
        second = _create('Second', [artwork])

        delete_exhibition(exhibition_id=first.id)

        artwork.refresh_from_db()
        assert artwork.status == ArtworkStatus.EXHIBITION
        assert list(second.artworks.all()) == [artwork]

    def test_last_exhibition_releases_artwork(self, artwork):
        """The artwork becomes available when its last exhibition drops it."""
        first = _create('First', [artwork])
        second = _create('Second', [artwork])

        update_exhibition(exhibition_id=first.id, data={'artworks': []})
        update_exhibition(exhibition_id=second.id, data={'artworks': []})

        artwork.refresh_from_db()
        assert artwork.status == ArtworkStatus.AVAILABLE

    def test_release_keeps_sold_status(self, sold_artwork):
        """Sold artworks stay sold when an exhibition lets them go."""
        exhibition = _create('Sold Show', [sold_artwork])

        delete_exhibition(exhibition_id=exhibition.id)

        sold_artwork.refresh_from_db()
        assert sold_artwork.status == ArtworkStatus.SOLD

    def test_create_inverted_dates(self):
        """Service rejects inverted date ranges."""
        today = timezone.localdate()
        with pytest.raises(InvalidDateRangeError):
            create_exhibition(
                title='Backwards',
                description='x',
                start_date=today,
                end_date=today - timedelta(days=1),
                curator='x',
            )

    def test_delete_unknown(self):
        """Deleting a missing exhibition raises."""
        with pytest.raises(ExhibitionNotFoundError):
            delete_exhibition(exhibition_id=uuid4())
