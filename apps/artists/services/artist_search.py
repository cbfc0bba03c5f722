"""Artist search and filtering service."""

from django.db.models import Q, QuerySet, Count
from typing import Optional

from ..models import Artist


def search_artists(
    *,
    search: Optional[str] = None,
    specialization: Optional[str] = None,
    active: Optional[bool] = None,
) -> QuerySet:
    """
    Search and filter artists.

    Args:
        search: Text matched against name, bio and email
        specialization: Exact discipline the artist lists
        active: Only active (True) or inactive (False) artists

    Returns:
        QuerySet of matching artists annotated with artwork_count
    """
    queryset = Artist.objects.annotate(artwork_count=Count('artworks'))

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(bio__icontains=search) |
            Q(email__icontains=search)
        )

    if specialization:
        # JSON list membership is not portable across backends; filter in Python
        matching_ids = [
            artist_id
            for artist_id, disciplines in queryset.values_list('id', 'specialization')
            if any(d.lower() == specialization.lower() for d in (disciplines or []))
        ]
        queryset = queryset.filter(id__in=matching_ids)

    if active is not None:
        queryset = queryset.filter(is_active=active)

    return queryset.order_by('name')
