"""Artwork search and filtering service."""

from django.db.models import Q, QuerySet
from decimal import Decimal
from typing import Optional, List
from uuid import UUID

from ..models import Artwork


def search_artworks(
    *,
    search: Optional[str] = None,
    status: Optional[str] = None,
    category: Optional[str] = None,
    artist_id: Optional[UUID] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
) -> QuerySet:
    """
    Search and filter artworks.

    Args:
        search: Text matched against title, description and medium
        status: available / sold / exhibition
        category: Case-insensitive category name
        artist_id: Only this artist's works
        min_price: Lower price bound (inclusive)
        max_price: Upper price bound (inclusive)

    Returns:
        QuerySet of matching artworks with artist preloaded
    """
    queryset = Artwork.objects.select_related('artist')

    if search:
        queryset = queryset.filter(
            Q(title__icontains=search) |
            Q(description__icontains=search) |
            Q(medium__icontains=search)
        )

    if status:
        queryset = queryset.filter(status=status)

    if category:
        queryset = queryset.filter(category__iexact=category)

    if artist_id:
        queryset = queryset.filter(artist_id=artist_id)

    if min_price is not None:
        queryset = queryset.filter(price__gte=min_price)

    if max_price is not None:
        queryset = queryset.filter(price__lte=max_price)

    return queryset.order_by('-created_at')


def get_all_categories() -> List[str]:
    """Get list of all artwork categories."""
    return list(
        Artwork.objects
        .exclude(category='')
        .values_list('category', flat=True)
        .distinct()
        .order_by('category')
    )
