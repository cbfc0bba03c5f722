"""Artwork CRUD operations service."""

import logging
from django.db import transaction
from decimal import Decimal
from uuid import UUID
from typing import Optional, List, Dict, Any

from apps.artists.models import Artist
from ..models import Artwork, ArtworkStatus, DimensionUnit
from .exceptions import (
    ArtworkNotFoundError,
    InvalidStatusTransitionError,
    ArtworkHasSalesError,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = [
    'title', 'artist', 'description', 'price', 'image_url', 'category',
    'medium', 'height', 'width', 'dimension_unit', 'year', 'tags',
]


def get_artwork_by_id(*, artwork_id: UUID) -> Artwork:
    """
    Fetch a single artwork with its artist.

    Raises:
        ArtworkNotFoundError: If artwork doesn't exist
    """
    try:
        return Artwork.objects.select_related('artist').get(id=artwork_id)
    except Artwork.DoesNotExist:
        raise ArtworkNotFoundError("Artwork not found")


@transaction.atomic
def create_artwork(
    *,
    title: str,
    artist: Artist,
    description: str,
    price: Decimal,
    category: str,
    image_url: str = '',
    medium: str = '',
    height: Optional[Decimal] = None,
    width: Optional[Decimal] = None,
    dimension_unit: str = DimensionUnit.CM,
    year: Optional[int] = None,
    status: str = ArtworkStatus.AVAILABLE,
    tags: Optional[List[str]] = None,
) -> Artwork:
    """
    Create a new artwork.

    New artworks may start as `available` or `exhibition`; `sold` is only
    reachable by recording a sale.

    Returns:
        Created Artwork instance

    Raises:
        InvalidStatusTransitionError: If created as `sold`
    """
    if status == ArtworkStatus.SOLD:
        raise InvalidStatusTransitionError(
            "Artworks are marked as sold by recording a sale"
        )

    artwork = Artwork.objects.create(
        title=title,
        artist=artist,
        description=description,
        price=price,
        category=category,
        image_url=image_url,
        medium=medium,
        height=height,
        width=width,
        dimension_unit=dimension_unit,
        year=year,
        status=status,
        tags=tags or [],
    )

    logger.info("Artwork %s created for artist %s", artwork.id, artist.id)
    return artwork


@transaction.atomic
def update_artwork(
    *,
    artwork_id: UUID,
    data: Dict[str, Any]
) -> Artwork:
    """
    Update an existing artwork.

    The status may move between `available` and `exhibition`. Moving into or
    out of `sold` is rejected; re-sending the current status is a no-op.

    Args:
        artwork_id: Artwork UUID
        data: Fields to update

    Returns:
        Updated Artwork instance

    Raises:
        ArtworkNotFoundError: If artwork doesn't exist
        InvalidStatusTransitionError: If the status change touches `sold`
    """
    try:
        artwork = (
            Artwork.objects
            .select_for_update()
            .get(id=artwork_id)
        )
    except Artwork.DoesNotExist:
        raise ArtworkNotFoundError("Artwork not found")

    update_fields = []

    new_status = data.get('status')
    if new_status and new_status != artwork.status:
        if ArtworkStatus.SOLD in (new_status, artwork.status):
            raise InvalidStatusTransitionError(
                f"Cannot change status from '{artwork.status}' to '{new_status}'; "
                "sold status follows the artwork's sales"
            )
        artwork.status = new_status
        update_fields.append('status')

    for field in UPDATABLE_FIELDS:
        if field in data:
            setattr(artwork, field, data[field])
            update_fields.append(field)

    if update_fields:
        update_fields.append('updated_at')
        artwork.save(update_fields=update_fields)

    return Artwork.objects.select_related('artist').get(id=artwork.id)


@transaction.atomic
def delete_artwork(*, artwork_id: UUID) -> None:
    """
    Delete an artwork.

    Raises:
        ArtworkNotFoundError: If artwork doesn't exist
        ArtworkHasSalesError: If sales reference the artwork
    """
    try:
        artwork = (
            Artwork.objects
            .select_for_update()
            .get(id=artwork_id)
        )
    except Artwork.DoesNotExist:
        raise ArtworkNotFoundError("Artwork not found")

    if artwork.sales.exists():
        raise ArtworkHasSalesError(
            f"Artwork '{artwork.title}' has recorded sales and cannot be deleted"
        )

    artwork.delete()
    logger.info("Artwork %s deleted", artwork_id)
