"""Exhibition CRUD operations service."""

import logging
from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone
from datetime import date
from decimal import Decimal
from uuid import UUID
from typing import Optional, List, Dict, Any

from apps.artworks.models import Artwork
from ..models import Exhibition, ExhibitionStatus
from .artwork_assignment import assign_artworks, release_artworks, sync_artworks
from .exceptions import ExhibitionNotFoundError, InvalidDateRangeError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = [
    'title', 'description', 'start_date', 'end_date', 'image_url', 'curator',
    'venue', 'address', 'city', 'country', 'status', 'ticket_price',
]


def _check_dates(start_date: date, end_date: date) -> None:
    if end_date < start_date:
        raise InvalidDateRangeError("End date must not be before start date")


def search_exhibitions(
    *,
    status: Optional[str] = None,
    city: Optional[str] = None,
    upcoming: bool = False,
) -> QuerySet:
    """
    Filter exhibitions.

    Args:
        status: upcoming / ongoing / completed
        city: Case-insensitive city name
        upcoming: Only exhibitions starting today or later

    Returns:
        QuerySet with artworks (and their artists) prefetched
    """
    queryset = Exhibition.objects.prefetch_related('artworks__artist')

    if status:
        queryset = queryset.filter(status=status)

    if city:
        queryset = queryset.filter(city__iexact=city)

    if upcoming:
        queryset = queryset.filter(start_date__gte=timezone.localdate())

    return queryset.order_by('-start_date')


@transaction.atomic
def create_exhibition(
    *,
    title: str,
    description: str,
    start_date: date,
    end_date: date,
    curator: str,
    artworks: Optional[List[Artwork]] = None,
    image_url: str = '',
    venue: str = '',
    address: str = '',
    city: str = '',
    country: str = '',
    status: str = ExhibitionStatus.UPCOMING,
    ticket_price: Decimal = Decimal('0.00'),
) -> Exhibition:
    """
    Create an exhibition and put its artworks on show.

    Returns:
        Created Exhibition instance

    Raises:
        InvalidDateRangeError: If end_date is before start_date
    """
    _check_dates(start_date, end_date)

    exhibition = Exhibition.objects.create(
        title=title,
        description=description,
        start_date=start_date,
        end_date=end_date,
        curator=curator,
        image_url=image_url,
        venue=venue,
        address=address,
        city=city,
        country=country,
        status=status,
        ticket_price=ticket_price,
    )
    assign_artworks(exhibition=exhibition, artworks=artworks or [])

    logger.info(
        "Exhibition %s created with %d artwork(s)",
        exhibition.id, len(artworks or [])
    )
    return exhibition


@transaction.atomic
def update_exhibition(
    *,
    exhibition_id: UUID,
    data: Dict[str, Any]
) -> Exhibition:
    """
    Update an exhibition.

    When `artworks` is present the assignment is re-synced: added artworks
    go on show, removed ones are released.

    Raises:
        ExhibitionNotFoundError: If exhibition doesn't exist
        InvalidDateRangeError: If the resulting dates are inverted
    """
    try:
        exhibition = (
            Exhibition.objects
            .select_for_update()
            .get(id=exhibition_id)
        )
    except Exhibition.DoesNotExist:
        raise ExhibitionNotFoundError("Exhibition not found")

    _check_dates(
        data.get('start_date', exhibition.start_date),
        data.get('end_date', exhibition.end_date),
    )

    update_fields = []
    for field in UPDATABLE_FIELDS:
        if field in data:
            setattr(exhibition, field, data[field])
            update_fields.append(field)

    if update_fields:
        update_fields.append('updated_at')
        exhibition.save(update_fields=update_fields)

    if 'artworks' in data:
        sync_artworks(exhibition=exhibition, artworks=data['artworks'])

    return search_exhibitions().get(id=exhibition.id)


@transaction.atomic
def delete_exhibition(*, exhibition_id: UUID) -> None:
    """
    Delete an exhibition and release its artworks.

    Raises:
        ExhibitionNotFoundError: If exhibition doesn't exist
    """
    try:
        exhibition = (
            Exhibition.objects
            .select_for_update()
            .get(id=exhibition_id)
        )
    except Exhibition.DoesNotExist:
        raise ExhibitionNotFoundError("Exhibition not found")

    release_artworks(exhibition=exhibition, artworks=list(exhibition.artworks.all()))
    exhibition.delete()
    logger.info("Exhibition %s deleted", exhibition_id)
