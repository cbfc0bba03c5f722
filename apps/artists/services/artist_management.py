"""Artist CRUD operations service."""

import logging
from django.db import transaction
from uuid import UUID
from typing import Optional, List, Dict, Any

from ..models import Artist
from .exceptions import (
    ArtistNotFoundError,
    DuplicateArtistEmailError,
    ArtistHasArtworksError,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = [
    'name', 'bio', 'image_url', 'email', 'phone', 'website',
    'specialization', 'achievements', 'is_active',
]


def _normalize_email(email: Optional[str]) -> Optional[str]:
    if not email:
        return None
    return Artist.objects.normalize_email(email.strip()).lower()


def _ensure_email_available(email: Optional[str], exclude_id: Optional[UUID] = None) -> None:
    if not email:
        return
    clash = Artist.objects.filter(email__iexact=email)
    if exclude_id is not None:
        clash = clash.exclude(id=exclude_id)
    if clash.exists():
        raise DuplicateArtistEmailError(f"Email '{email}' is already in use")


def get_artist_by_id(*, artist_id: UUID) -> Artist:
    """
    Fetch a single artist.

    Raises:
        ArtistNotFoundError: If artist doesn't exist
    """
    try:
        return Artist.objects.get(id=artist_id)
    except Artist.DoesNotExist:
        raise ArtistNotFoundError(f"Artist {artist_id} not found")


@transaction.atomic
def create_artist(
    *,
    name: str,
    email: Optional[str] = None,
    password: Optional[str] = None,
    bio: str = '',
    image_url: str = '',
    phone: str = '',
    website: str = '',
    specialization: Optional[List[str]] = None,
    achievements: Optional[List[Dict[str, Any]]] = None,
    is_active: bool = True,
) -> Artist:
    """
    Create a new artist.

    Artists created without a password get an unusable one and cannot log in
    until credentials are set.

    Args:
        name: Display name
        email: Contact email, also the login identifier
        password: Optional raw password (hashed with bcrypt)
        bio: Biography
        image_url: Portrait URL
        phone: Contact phone
        website: Personal website
        specialization: List of disciplines
        achievements: List of {title, year, description}
        is_active: Whether the artist is listed as active

    Returns:
        Created Artist instance

    Raises:
        DuplicateArtistEmailError: If email is already in use
    """
    email = _normalize_email(email)
    _ensure_email_available(email)

    artist = Artist.objects.create_user(
        email=email,
        password=password,
        name=name,
        bio=bio,
        image_url=image_url,
        phone=phone,
        website=website,
        specialization=specialization or [],
        achievements=achievements or [],
        is_active=is_active,
    )

    logger.info("Artist %s created (%s)", artist.id, artist.name)
    return artist


@transaction.atomic
def update_artist(
    *,
    artist_id: UUID,
    data: Dict[str, Any]
) -> Artist:
    """
    Update an existing artist.

    Args:
        artist_id: Artist UUID
        data: Fields to update; an optional 'password' resets credentials

    Returns:
        Updated Artist instance

    Raises:
        ArtistNotFoundError: If artist doesn't exist
        DuplicateArtistEmailError: If the new email is already in use
    """
    try:
        artist = (
            Artist.objects
            .select_for_update()
            .get(id=artist_id)
        )
    except Artist.DoesNotExist:
        raise ArtistNotFoundError(f"Artist {artist_id} not found")

    if 'email' in data:
        data = {**data, 'email': _normalize_email(data['email'])}
        _ensure_email_available(data['email'], exclude_id=artist.id)

    update_fields = []
    for field in UPDATABLE_FIELDS:
        if field in data:
            setattr(artist, field, data[field])
            update_fields.append(field)

    password = data.get('password')
    if password:
        artist.set_password(password)
        update_fields.append('password')

    if update_fields:
        update_fields.append('updated_at')
        artist.save(update_fields=update_fields)

    return artist


@transaction.atomic
def delete_artist(*, artist_id: UUID) -> None:
    """
    Delete an artist.

    Raises:
        ArtistNotFoundError: If artist doesn't exist
        ArtistHasArtworksError: If the artist still owns artworks
    """
    try:
        artist = (
            Artist.objects
            .select_for_update()
            .get(id=artist_id)
        )
    except Artist.DoesNotExist:
        raise ArtistNotFoundError(f"Artist {artist_id} not found")

    artwork_count = artist.artworks.count()
    if artwork_count:
        raise ArtistHasArtworksError(
            f"Artist '{artist.name}' still has {artwork_count} artwork(s)"
        )

    artist.delete()
    logger.info("Artist %s deleted", artist_id)
